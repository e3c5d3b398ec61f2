"""
XML database sources.

Opens the shared-mime-info database either over HTTP(S) or from the local
filesystem and hands it to the extractor as a binary stream.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO

import requests

from mimedesc.constants import DEFAULT_TIMEOUT, FILE_SCHEME, HTTP_SCHEMES
from mimedesc.errors import FetchError

logger = logging.getLogger(__name__)


def fetch_database(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """
    Download the XML database.

    Args:
        url: HTTP(S) URL of the database document.
        timeout: Seconds before the request is abandoned.

    Returns:
        Raw response body.

    Raises:
        FetchError: On transport failure or a non-200 status code.
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch MIME database: {exc}") from exc

    if resp.status_code != 200:
        raise FetchError(
            f"Failed to fetch MIME database: received status code {resp.status_code}"
        )

    logger.debug(f"Fetched {len(resp.content)} bytes from {url}")
    return resp.content


def open_local(path: str) -> BinaryIO:
    """Open a local database file (plain path or file:// URL) in binary mode."""
    if path.startswith(FILE_SCHEME):
        path = path[len(FILE_SCHEME):]
    try:
        return Path(path).open("rb")
    except OSError as exc:
        raise FetchError(f"Failed to open MIME database {path}: {exc}") from exc


def open_source(source: str, timeout: float = DEFAULT_TIMEOUT) -> BinaryIO:
    """
    Open the XML database as a binary stream.

    Sources starting with http:// or https:// are downloaded; anything else
    is treated as a local path. The returned stream is a context manager.
    """
    if source.startswith(HTTP_SCHEMES):
        return io.BytesIO(fetch_database(source, timeout=timeout))
    return open_local(source)
