# SPDX-License-Identifier: MIT

from . import VERSION, logger
from .utils import colors, link_extension
from .parser import EmojiParser, default_parser
from .request import request_download, RequestError
from .tables import LoadError

import requests
import argparse
import os.path
import json
import sys

parser = argparse.ArgumentParser(
    prog="emojiparser",
    description="Find unicode, shortcode and Discord custom emoji in text",
)

parser.add_argument(
    "text", nargs="*", help="text to parse (read from standard input if omitted)"
)
parser.add_argument(
    "--only",
    choices=("all", "unicode", "text", "custom"),
    default="all",
    help="only look for one kind of emoji",
)
parser.add_argument(
    "--data-dir",
    help="directory containing UnicodeEmojis.json and UnicodeEmojisSVG.json (defaults to the bundled tables)",
)
parser.add_argument("--tables-url", help="URL to download UnicodeEmojis.json from")
parser.add_argument("--svg-url", help="URL to download UnicodeEmojisSVG.json from")
parser.add_argument("--json", action="store_true", help="print the results as JSON")
parser.add_argument(
    "-o", "--output", help="output directory to download the emoji images to"
)
parser.add_argument("-v", "--verbose", action="store_true", help="show debug messages")
parser.add_argument("--version", action="version", version=f"emojiparser {VERSION}")


def make_parser(args) -> EmojiParser:
    if args.tables_url or args.svg_url:
        if not (args.tables_url and args.svg_url):
            raise LoadError("--tables-url and --svg-url must be given together")
        return EmojiParser.from_url(args.tables_url, args.svg_url)
    if args.data_dir:
        return EmojiParser.from_directory(args.data_dir)
    return default_parser()


def find_emoji(emoji_parser: EmojiParser, content: str, only: str):
    if only == "unicode":
        return emoji_parser.parse_unicode(content)
    elif only == "text":
        return emoji_parser.parse_shortcodes(content)
    elif only == "custom":
        return emoji_parser.parse_custom_tags(content)
    return emoji_parser.parse(content)


def download_all(found, output_dir: str):
    logger.info("Downloading emoji...")

    h = None
    for handler in logger.handlers:
        if handler.name == "emojiparser_handler":
            h = handler

    for emoji in found:
        if not emoji.link:
            logger.warning(f"No image known for {emoji.name}, skipping")
            continue

        target_path = os.path.join(
            output_dir, emoji.type.value, emoji.name + link_extension(emoji.link)
        )

        if h is not None:
            h.terminator = ""
        logger.info(f"{emoji.name}...")
        if h is not None:
            h.terminator = "\n"

        if os.path.exists(target_path):
            print(" already downloaded")
            continue

        try:
            request_download(emoji.link, target_path)
        except RequestError as e:
            print(" ✗")
            logger.warning(f"Server returned error: {e}")
            continue
        except (ValueError, requests.exceptions.RequestException) as e:
            print(" ✗")
            logger.warning(f"Could not download {emoji.link}: {e}")
            continue
        else:
            print(" ✓")


def main(argv=None) -> int:
    args = parser.parse_args(argv)
    if args.verbose:
        logger.setLevel("DEBUG")

    if args.text:
        content = " ".join(args.text)
    else:
        content = sys.stdin.read()

    try:
        emoji_parser = make_parser(args)
    except LoadError as e:
        logger.error(f"Could not load emoji tables: {e}")
        return 1

    found = find_emoji(emoji_parser, content, args.only)

    if args.json:
        print(json.dumps([e.to_dict() for e in found], ensure_ascii=False, indent=2))
    else:
        if not found:
            logger.info("No emoji found.")
        for emoji in found:
            logger.info(
                f"{colors['dim']}{emoji.position.from_}-{emoji.position.to}{colors['reset']} "
                f"{emoji.type.value:<7} {colors['bold']}{emoji.name}{colors['reset']} "
                f"{emoji.unicode} {emoji.link or ''}".rstrip()
            )

    if args.output:
        download_all(found, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
