import pytest

from emojiparser import EmojiParser

RAW_UNICODE = {
    "smile": "😄",
    "😄": "smile",
    "thumbsup": "👍",
    "👍": "thumbsup",
    "thumbsup_tone1": "👍🏻",
    "👍🏻": "thumbsup_tone1",
    "heart": "❤️",
    "❤️": "heart",
    "wave": "👋",
    "👋": "wave",
    # Display names map name -> name and end up in neither table.
    "Smiling Face": "smile",
}

RAW_SVG = {
    "1f604": "a1b2c3d4e5f60718293a4b5c6d7e8f90",
    "1f44d": "0f1e2d3c4b5a69788796a5b4c3d2e1f0",
    "1f44d-1f3fb": "11112222333344445555666677778888",
    "2764-fe0f": "99990000aaaabbbbccccddddeeeeffff",
}


@pytest.fixture
def raw_unicode():
    return dict(RAW_UNICODE)


@pytest.fixture
def raw_svg():
    return dict(RAW_SVG)


@pytest.fixture
def emoji_parser(raw_unicode, raw_svg):
    return EmojiParser.from_raw(raw_unicode, raw_svg)
