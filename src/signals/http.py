"""
src/signals/http.py
====================
Shared HTTP helper for the reputation collectors.
"""

import logging
from typing import Any

import aiohttp

logger = logging.getLogger("candidateguard.signals.http")


class UpstreamResponseError(Exception):
    """Raised when an upstream service returns an unusable response."""


async def fetch_json(
    session: aiohttp.ClientSession,
    url: str,
    params: dict[str, str],
) -> dict[str, Any]:
    """
    GET *url* with query *params* and return the decoded JSON object.

    Raises:
        aiohttp.ClientError: On transport failure or non-2xx status.
        UpstreamResponseError: If the body is not a JSON object.
    """
    async with session.get(url, params=params) as resp:
        resp.raise_for_status()
        try:
            body = await resp.json(content_type=None)
        except ValueError as exc:
            raise UpstreamResponseError(
                f"Response from {url} is not valid JSON"
            ) from exc

    if not isinstance(body, dict):
        raise UpstreamResponseError(
            f"Expected JSON object from {url}, got {type(body).__name__}"
        )
    return body
