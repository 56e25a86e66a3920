# SPDX-License-Identifier: MIT
"""
emojiparser - Find unicode, shortcode and Discord custom emoji in text
"""

import logging

VERSION = "0.1.0"

# Logger configuration


class LogFormatter(logging.Formatter):
    # https://stackoverflow.com/questions/384076/how-can-i-color-python-logging-output
    FORMATS = {
        logging.DEBUG: "\x1b[2m%(name)s: %(message)s\x1b[0m",
        logging.INFO: "%(message)s",
        logging.WARNING: "\x1b[33;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.ERROR: "\x1b[31;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.CRITICAL: "\x1b[31;1m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, "%(message)s")
        return logging.Formatter(log_fmt).format(record)


logger = logging.getLogger("emojiparser")
logger.setLevel(logging.INFO)

_log_stream = logging.StreamHandler()
_log_stream.setFormatter(LogFormatter())
_log_stream.setLevel(logging.DEBUG)
_log_stream.name = "emojiparser_handler"

logger.addHandler(_log_stream)

from .emoji import EmojiPosition, EmojiType, ParsedEmoji  # noqa: E402
from .tables import LoadError, LookupTables, build_tables  # noqa: E402
from .parser import EmojiParser, default_parser  # noqa: E402

__all__ = [
    "VERSION",
    "logger",
    "EmojiParser",
    "EmojiPosition",
    "EmojiType",
    "LoadError",
    "LookupTables",
    "ParsedEmoji",
    "build_tables",
    "default_parser",
]
