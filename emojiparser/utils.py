# SPDX-License-Identifier: MIT
"""Small helpers for the command line interface."""

import sys

colors = {
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "green": "\x1b[32m",
    "reset": "\x1b[0m",
}

if not sys.stdout.isatty():
    colors = dict.fromkeys(colors, "")


def link_extension(link: str) -> str:
    """Get the file extension for an emoji link; asset links without one are SVG."""
    last = link.rsplit("/", 1)[-1]
    if "." in last:
        return "." + last.rsplit(".", 1)[-1]
    return ".svg"
