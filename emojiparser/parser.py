# SPDX-License-Identifier: MIT
"""
Emoji parser.

All positions are UTF-8 byte offsets into the string that was parsed.
"""

from .emoji import EmojiPosition, EmojiType, ParsedEmoji
from .tables import LookupTables, build_tables, fetch_tables, load_tables, to_code_point

from functools import lru_cache
from os import PathLike
from typing import List, Mapping, Optional, Sequence, Self, Union
import re

#: Base URL for unicode emoji assets.
ASSETS_URL = "https://discord.com/assets/"

#: Base URL for custom emoji images.
CDN_URL = "https://cdn.discordapp.com/emojis/"

#: Base URL for the bundled tables, whose hash fragments are Twemoji file
#: names rather than Discord asset hashes.
BUNDLED_ASSETS_URL = "https://cdn.jsdelivr.net/gh/jdecked/twemoji@15.1.0/assets/svg/"

# Both patterns work on bytes, so \w and \d only match ASCII.
CUSTOM_EMOJI_RE = re.compile(rb"<(a?):(\w+):(\d{16,})>")
TEXT_EMOJI_RE = re.compile(rb":([A-Za-z0-9_]+):")


def _encode(content: str) -> bytes:
    return content.encode("utf-8", "surrogatepass")


def _scalar_width(lead: int) -> int:
    """Length of the UTF-8 sequence starting with the given byte."""
    if lead < 0x80:
        return 1
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _is_inside(index: int, ranges: Optional[Sequence[ParsedEmoji]]) -> bool:
    if not ranges:
        return False
    return any(item.position.contains(index) for item in ranges)


class EmojiParser:
    """
    Finds unicode emoji, shortcodes and Discord custom emoji in text.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(
        self,
        tables: LookupTables,
        assets_url: str = ASSETS_URL,
        cdn_url: str = CDN_URL,
    ):
        """
        Initialize the parser.

        :param tables: lookup tables, see :mod:`emojiparser.tables`.
        :param assets_url: base URL for unicode emoji assets.
        :param cdn_url: base URL for custom emoji images.
        """
        self.tables = tables
        self.assets_url = assets_url
        self.cdn_url = cdn_url

    @classmethod
    def from_raw(
        cls, raw_unicode: Mapping[str, str], raw_svg: Mapping[str, str], **kwargs
    ) -> Self:
        """
        Create a parser from in-memory raw tables.

        :raises LoadError: if the tables are malformed.
        """
        return cls(build_tables(raw_unicode, raw_svg), **kwargs)

    @classmethod
    def from_directory(cls, directory: Union[str, PathLike], **kwargs) -> Self:
        """
        Create a parser from UnicodeEmojis.json and UnicodeEmojisSVG.json in
        the given directory.

        :raises LoadError: if the files are missing or malformed.
        """
        return cls(load_tables(directory), **kwargs)

    @classmethod
    def from_url(cls, unicode_url: str, svg_url: str, **kwargs) -> Self:
        """
        Create a parser from tables downloaded over HTTP.

        :raises LoadError: if the download fails or the data is malformed.
        """
        return cls(fetch_tables(unicode_url, svg_url), **kwargs)

    def _asset_link(self, emoji: str, suffix: str = "") -> Optional[str]:
        asset_hash = self.tables.svg_hashes.get(to_code_point(emoji, "-"))
        if asset_hash is None:
            return None
        return self.assets_url + asset_hash + suffix

    def parse(self, content: str) -> List[ParsedEmoji]:
        """
        Find all emoji in the content, ordered by position.

        Custom emoji are found first; unicode emoji and shortcodes starting
        inside a custom emoji tag are ignored.
        """
        custom_emojis = self.parse_custom_tags(content)
        unicode_emojis = self.parse_unicode(content, custom_emojis)
        text_emojis = self.parse_shortcodes(content, custom_emojis)

        # sorted() is stable, so ties keep unicode/text/custom order.
        return sorted(
            unicode_emojis + text_emojis + custom_emojis,
            key=lambda e: e.position.from_,
        )

    def parse_unicode(
        self, content: str, exclusions: Optional[Sequence[ParsedEmoji]] = None
    ) -> List[ParsedEmoji]:
        """
        Find literal unicode emoji, preferring the longest known sequence at
        each position.

        :param exclusions: emoji whose ranges may not contain a match start.
        """
        data = _encode(content)
        candidates = self.tables.candidates
        results = []

        i = 0
        # Character index tracking i, used to look up candidate buckets.
        char_index = 0
        while i < len(data):
            width = _scalar_width(data[i])
            if _is_inside(i, exclusions):
                i += width
                char_index += 1
                continue

            match = None
            for key in candidates.get(content[char_index], ()):
                if content.startswith(key, char_index):
                    match = key
                    break

            if match is None:
                i += width
                char_index += 1
                continue

            encoded_len = len(_encode(match))
            from_ = i
            to = i + encoded_len
            i = to
            char_index += len(match)
            if _is_inside(from_, exclusions):
                continue

            results.append(
                ParsedEmoji(
                    name=self.tables.unicode_to_name[match],
                    type=EmojiType.UNICODE,
                    unicode=match,
                    position=EmojiPosition(from_, to),
                    link=self._asset_link(match),
                )
            )

        return results

    def parse_shortcodes(
        self, content: str, exclusions: Optional[Sequence[ParsedEmoji]] = None
    ) -> List[ParsedEmoji]:
        """
        Find known shortcodes such as ``:smile:``. Unknown names are skipped.

        :param exclusions: emoji whose ranges may not contain a match start.
        """
        results = []
        for m in TEXT_EMOJI_RE.finditer(_encode(content)):
            if _is_inside(m.start(), exclusions):
                continue

            name = m.group(1).decode("ascii")
            unicode = self.tables.name_to_unicode.get(name)
            if unicode is None:
                continue

            results.append(
                ParsedEmoji(
                    name=name,
                    type=EmojiType.TEXT,
                    unicode=unicode,
                    position=EmojiPosition(m.start(), m.end()),
                    # The unicode scanner links the same asset without the
                    # extension; both forms are kept as they are.
                    link=self._asset_link(unicode, ".svg"),
                )
            )

        return results

    def parse_custom_tags(self, content: str) -> List[ParsedEmoji]:
        """
        Find Discord custom emoji like ``<:name:id>`` or ``<a:name:id>``.

        The ID is not checked against Discord, only its shape (16 or more
        digits) is.
        """
        results = []
        for m in CUSTOM_EMOJI_RE.finditer(_encode(content)):
            animated = m.group(1) == b"a"
            emoji_id = m.group(3).decode("ascii")
            ext = "gif" if animated else "png"

            results.append(
                ParsedEmoji(
                    id=emoji_id,
                    name=m.group(2).decode("ascii"),
                    type=EmojiType.CUSTOM,
                    unicode=m.group(0).decode("ascii"),
                    position=EmojiPosition(m.start(), m.end()),
                    link=f"{self.cdn_url}{emoji_id}.{ext}",
                    animated=animated,
                )
            )

        return results


@lru_cache(maxsize=None)
def default_parser() -> EmojiParser:
    """
    Get a parser built from the tables bundled with the package. The parser
    is built on the first call and reused afterwards. Its asset links point
    at the Twemoji SVGs the bundled tables are keyed to.

    :raises LoadError: if the bundled tables cannot be loaded.
    """
    return EmojiParser(load_tables(), assets_url=BUNDLED_ASSETS_URL)
