# SPDX-License-Identifier: MIT
"""Wrapper for fetching emoji tables and images"""

from . import VERSION, logger

import requests
from requests import Session
from requests_cache import CacheMixin
from requests_ratelimiter import LimiterSession, LimiterMixin
from functools import lru_cache
from os import PathLike
import os.path
from pathlib import Path


class CachedLimiterSession(CacheMixin, LimiterMixin, Session):
    """Requests session that combines caching and ratelimiting."""


#: Requests per second allowed towards any single host.
REQUESTS_PER_SECOND = 3

HEADERS = {
    "User-Agent": f"emojiparser {VERSION} (https://github.com/x1xo/emoji-parser)"
}


class RequestError(Exception):
    """Base class for request exceptions."""


# Table downloads are cached in memory only, so nothing is written to disk
# apart from explicitly downloaded images.
@lru_cache(maxsize=None)
def _table_session() -> Session:
    return CachedLimiterSession(
        backend="memory", expire_after=180, per_second=REQUESTS_PER_SECOND
    )


@lru_cache(maxsize=None)
def _download_session() -> Session:
    return LimiterSession(per_second=REQUESTS_PER_SECOND)


def request_json(url: str):
    """
    Fetch and decode a JSON document.

    :raises RequestError: if the server does not answer with 200.
    :raises ValueError: if the response is not valid JSON.
    """
    req = _table_session().get(
        url,
        headers=HEADERS,
    )
    if req.status_code != 200:
        logger.warning(f"Request error for {url}: {req.status_code}")
        logger.warning("Server response:\n" + req.text)
        raise RequestError(req.status_code)

    return req.json()


def request_download(url: str, target: PathLike):
    """Downloads a file to the given target location."""
    basedir = Path(os.path.dirname(target))
    if basedir.is_file():
        raise ValueError("Base directory already exists and is a file")

    if not basedir.is_dir():
        basedir.mkdir(parents=True)

    try:
        with _download_session().get(url, headers=HEADERS, stream=True) as r:
            r.raise_for_status()
            with open(target, "wb") as f:
                for chunk in r.iter_content(chunk_size=8192):
                    f.write(chunk)
    except requests.exceptions.HTTPError as e:
        raise RequestError(e.response.status_code) from e
