# SPDX-License-Identifier: MIT
"""Data types returned by the emoji parser."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class EmojiType(str, Enum):
    """Kind of text an emoji was found in."""

    #: A literal unicode emoji, e.g. "😄".
    UNICODE = "unicode"
    #: A shortcode, e.g. ":smile:".
    TEXT = "text"
    #: A Discord custom emoji tag, e.g. "<a:wave:1234567890123456>".
    CUSTOM = "custom"


@dataclass(frozen=True)
class EmojiPosition:
    """Half-open range of UTF-8 byte offsets into the parsed string."""

    from_: int
    to: int

    def contains(self, index: int) -> bool:
        return self.from_ <= index < self.to


@dataclass(frozen=True)
class ParsedEmoji:
    """Class representing a single emoji found in a string."""

    #: Name of the emoji. For shortcodes this is the text between the colons.
    name: str

    #: Which kind of emoji this is.
    type: EmojiType

    #: For unicode and custom emoji, the matched text itself. For shortcodes,
    #: the unicode emoji the shortcode resolves to.
    unicode: str

    #: Where in the original string the emoji was found.
    position: EmojiPosition

    #: ID of a custom emoji, None for the other types.
    id: Optional[str] = None

    #: URL of the emoji image, if one is known.
    link: Optional[str] = None

    #: Whether a custom emoji is animated. Always False for the other types.
    animated: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.type.value
        data["position"] = {"from": self.position.from_, "to": self.position.to}
        return data
