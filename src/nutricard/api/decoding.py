"""Lenient JSON body decoding shared by the API routes."""

import logging

from fastapi import Request

_logger = logging.getLogger(__name__)


async def read_json_object(request: Request) -> dict[str, object]:
    """Return the JSON object body, or an empty dict when it can't be decoded."""
    try:
        payload = await request.json()
    except (ValueError, RecursionError):
        _logger.debug("Ignoring undecodable request body on %s", request.url.path)
        return {}
    if not isinstance(payload, dict):
        _logger.debug("Ignoring non-object request body on %s", request.url.path)
        return {}
    return payload
