"""
HTTP fetching (URL -> raw HTML bytes).

Thin wrapper around requests.get. Two failure kinds are reported as
FetchError: a non-200 answer and a transport/read failure. There are no
retries; a failed fetch means no extraction runs for that page.
"""

from __future__ import annotations

import logging

import requests

from venuescrape.config import DEFAULT_TIMEOUT, USER_AGENT
from venuescrape.errors import FetchError

logger = logging.getLogger(__name__)


def fetch_html(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """
    GET `url` and return the raw response body.

    The body is returned undecoded: the parser adapter detects the encoding
    from the bytes and the <meta charset>, which requests ignores when the
    Content-Type header has no charset.
    """
    logger.info("FETCH %s", url)
    try:
        resp = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    except (requests.exceptions.ChunkedEncodingError, requests.exceptions.ContentDecodingError) as exc:
        # body download broke off after the status line arrived
        raise FetchError(url, "failed to read response") from exc
    except requests.RequestException as exc:
        raise FetchError(url, "request failed") from exc

    if resp.status_code != 200:
        raise FetchError(url, f"request did not respond 200 (got {resp.status_code})", status_code=resp.status_code)

    return resp.content
