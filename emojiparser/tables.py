# SPDX-License-Identifier: MIT
"""
Emoji lookup tables and the functions that load them.

The raw name table maps in both directions at once: some keys are emoji
names whose values are the emoji, others are the emoji whose values are
names. :func:`build_tables` splits it by looking at which side holds
non-ASCII text.
"""

from . import logger
from .request import request_json, RequestError

import requests
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Dict, List, Mapping, Union
import json

#: File holding the raw name <-> unicode table.
UNICODE_EMOJIS_FILE = "UnicodeEmojis.json"

#: File holding the codepoint -> asset hash table.
UNICODE_EMOJIS_SVG_FILE = "UnicodeEmojisSVG.json"

#: Directory with the tables shipped in the package.
BUNDLED_ASSETS_DIR = Path(__file__).parent / "assets"


class LoadError(Exception):
    """Raised when emoji table data is missing or malformed."""


def contains_non_ascii(value: str) -> bool:
    return any(ord(ch) > 127 for ch in value)


def to_code_point(value: str, sep: str = "-") -> str:
    """
    Convert an emoji string to its lowercase hex codepoints, e.g.
    "👍🏻" -> "1f44d-1f3fb".
    """
    return sep.join(f"{ord(ch):x}" for ch in value)


@dataclass(frozen=True)
class LookupTables:
    """Emoji tables used by the parser. Treated as read-only once built."""

    #: Emoji name -> literal unicode emoji.
    name_to_unicode: Dict[str, str]

    #: Literal unicode emoji -> emoji name.
    unicode_to_name: Dict[str, str]

    #: Hex codepoints joined by "-" -> asset hash fragment.
    svg_hashes: Dict[str, str]

    #: Keys of unicode_to_name, longest first, grouped by their first
    #: character.
    candidates: Dict[str, List[str]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Sorting by encoded length keeps a base emoji behind any longer
        # sequence (skin tone, variation selector, ZWJ) starting with it.
        ordered = sorted(
            self.unicode_to_name, key=lambda k: len(k.encode("utf-8")), reverse=True
        )
        candidates = {}
        for key in ordered:
            candidates.setdefault(key[0], []).append(key)
        object.__setattr__(self, "candidates", candidates)


def _check_map(raw, source: str) -> Dict[str, str]:
    if not isinstance(raw, Mapping):
        raise LoadError(f"{source}: expected a JSON object, got {type(raw).__name__}")
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise LoadError(f"{source}: entry {key!r} is not a string to string mapping")
    return dict(raw)


def build_tables(
    raw_unicode: Mapping[str, str], raw_svg: Mapping[str, str]
) -> LookupTables:
    """
    Build the lookup tables from the raw data.

    :param raw_unicode: raw table whose values are either names or emoji.
    :param raw_svg: codepoint -> asset hash table, kept as-is.
    :raises LoadError: if either table is not a str -> str mapping.
    """
    raw_unicode = _check_map(raw_unicode, UNICODE_EMOJIS_FILE)
    raw_svg = _check_map(raw_svg, UNICODE_EMOJIS_SVG_FILE)

    name_to_unicode = {}
    unicode_to_name = {}
    for key, value in raw_unicode.items():
        if contains_non_ascii(key):
            unicode_to_name[key] = value
        if contains_non_ascii(value):
            name_to_unicode[key] = value

    logger.debug(
        f"Built emoji tables: {len(name_to_unicode)} names, "
        f"{len(unicode_to_name)} unicode sequences, {len(raw_svg)} assets"
    )

    return LookupTables(
        name_to_unicode=name_to_unicode,
        unicode_to_name=unicode_to_name,
        svg_hashes=raw_svg,
    )


def load_json_map(path: Union[str, PathLike]) -> Dict[str, str]:
    """
    Read a JSON file containing a single string -> string object.

    :raises LoadError: if the file cannot be read or has the wrong shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise LoadError(f"Cannot load {path}: {e}") from e

    return _check_map(data, str(path))


def load_tables(directory: Union[str, PathLike] = BUNDLED_ASSETS_DIR) -> LookupTables:
    """
    Load the tables from a directory containing UnicodeEmojis.json and
    UnicodeEmojisSVG.json. Defaults to the tables shipped with the package.
    """
    directory = Path(directory)
    return build_tables(
        load_json_map(directory / UNICODE_EMOJIS_FILE),
        load_json_map(directory / UNICODE_EMOJIS_SVG_FILE),
    )


def fetch_tables(unicode_url: str, svg_url: str) -> LookupTables:
    """
    Download both raw tables and build them.

    :raises LoadError: if either download fails or is not valid JSON.
    """
    raw = []
    for url in (unicode_url, svg_url):
        try:
            raw.append(request_json(url))
        except RequestError as e:
            raise LoadError(f"Cannot download {url}: HTTP {e}") from e
        except ValueError as e:
            raise LoadError(f"Cannot parse {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise LoadError(f"Cannot download {url}: {e}") from e

    return build_tables(*raw)
