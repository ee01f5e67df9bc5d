"""Error envelopes shared by the exception handlers.

Every error body has the shape ``{"status": "error", "message": ...}``
plus ``details`` and any extra keys when there is more to say.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def error_response(
    status_code: int,
    message: str,
    details: Any = None,
    **extra: Any,
) -> JSONResponse:
    body: dict[str, Any] = {"status": "error", "message": message}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)
