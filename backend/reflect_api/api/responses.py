"""Envelope Rendering — turns a core HandlerResult into an HTTP response.

Invariants:
    - Status code and body come from the HandlerResult unchanged
    - Body is compact JSON with success first (Starlette JSONResponse separators)
    - Every failure is logged once, at INFO, with its ErrorKind
"""

import logging

from fastapi.responses import JSONResponse

from reflect_api.core.envelope import Failure, HandlerResult

logger = logging.getLogger(__name__)


def render(result: HandlerResult, route: str) -> JSONResponse:
    status_code, envelope = result
    if isinstance(envelope, Failure):
        logger.info(
            f"Rejected {route}: {envelope.kind.value}",
            extra={
                "route": route,
                "error_kind": envelope.kind.value,
                "status_code": status_code,
            },
        )
    return JSONResponse(status_code=status_code, content=envelope.to_dict())
