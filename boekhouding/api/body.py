# boekhouding/api/body.py
from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from boekhouding.api.errors import BodyTooLarge, InvalidJSONBody


async def read_body(request: Request, limit: int) -> bytes:
    """Reads the body chunk by chunk and gives up as soon as it passes `limit` bytes."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise BodyTooLarge()

    buf = bytearray()
    async for chunk in request.stream():
        buf.extend(chunk)
        if len(buf) > limit:
            raise BodyTooLarge()
    return bytes(buf)


async def read_json_object(request: Request, limit: int) -> dict[str, Any]:
    """
    Parses the body as a JSON object. An empty body counts as {}.
    Malformed JSON and non-object values raise InvalidJSONBody.
    """
    raw = await read_body(request, limit)
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise InvalidJSONBody() from e
    if not isinstance(data, dict):
        raise InvalidJSONBody()
    return data
