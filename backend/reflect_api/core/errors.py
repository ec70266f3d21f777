"""Error Taxonomy — closed set of error kinds plus the fault exception hierarchy.

Invariants:
    - ErrorKind is a closed set of four; each maps to exactly one (status, message)
    - Status and message derive from the kind alone — never improvised at call sites
    - Expected validation failures are ErrorKind VALUES, not exceptions
    - ReflectError is reserved for unexpected faults (InternalError path)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Static table over per-class attributes: one place to audit the wire strings
    - Single hierarchy with ReflectError base: FastAPI global handler catches all
      (uniform error shape)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ErrorKind(str, Enum):
    """Every way a request can fail."""
    INVALID_AMOUNT = "invalid_amount"
    UNSUPPORTED_INDEX = "unsupported_index"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ErrorSpec:
    """HTTP status and fixed wire message for one ErrorKind."""
    http_status: int
    message: str


ERROR_SPECS: Mapping[ErrorKind, ErrorSpec] = MappingProxyType({
    ErrorKind.INVALID_AMOUNT: ErrorSpec(
        400, "Invalid request data: depositAmount must be positive",
    ),
    ErrorKind.UNSUPPORTED_INDEX: ErrorSpec(
        404, "Stablecoin with the specified index not found",
    ),
    ErrorKind.UNSUPPORTED_OPERATION: ErrorSpec(404, "Invalid request type"),
    ErrorKind.INTERNAL_ERROR: ErrorSpec(500, "Internal server error"),
})


def status_for(kind: ErrorKind) -> int:
    return ERROR_SPECS[kind].http_status


def message_for(kind: ErrorKind) -> str:
    return ERROR_SPECS[kind].message


@dataclass
class ErrorContext:
    """Observability context attached to a fault. Never sent to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    route: str | None = None


class ReflectError(Exception):
    """Base exception for unexpected faults surfaced as an error envelope."""

    def __init__(
        self,
        detail: str,
        code: str = "INTERNAL_ERROR",
        kind: ErrorKind = ErrorKind.INTERNAL_ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.code = code
        self.kind = kind
        self.context = context or ErrorContext()

    @property
    def http_status(self) -> int:
        return status_for(self.kind)

    def to_response(self) -> dict:
        """Convert to the failure envelope. detail stays server-side."""
        return {"success": False, "message": message_for(self.kind)}


class SimulatedFaultError(ReflectError):
    """Deliberate fault raised by the /error hooks to exercise the 500 path."""
    def __init__(self, route: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.route = route
        super().__init__(
            f"Simulated fault on {route}", "SIMULATED_FAULT",
            ErrorKind.INTERNAL_ERROR, ctx,
        )
