"""Response Envelope — the uniform {success, data|message} wrapper around every response.

Invariants:
    - Exactly one shape per envelope: Success{data} or Failure{message}
    - Failure.message always comes from the ErrorKind table (errors.ERROR_SPECS)
    - to_dict() key order is success first, matching the reference wire format
    - HandlerResult status is 200 for Success, status_for(kind) for Failure

Design Decisions:
    - Frozen dataclasses over dicts: handlers cannot emit a half-built envelope
    - Failure keeps its ErrorKind so logs and tests can assert on the kind,
      not on the wire string
"""

from dataclasses import dataclass
from typing import Any, Union

from reflect_api.core.errors import ErrorKind, message_for, status_for

HTTP_OK = 200


@dataclass(frozen=True)
class Success:
    data: Any

    def to_dict(self) -> dict:
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind

    @property
    def message(self) -> str:
        return message_for(self.kind)

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}


Envelope = Union[Success, Failure]
HandlerResult = tuple[int, Envelope]


def ok(data: Any) -> Success:
    return Success(data)


def fail(kind: ErrorKind) -> Failure:
    return Failure(kind)


def respond_ok(data: Any) -> HandlerResult:
    """Success envelope with HTTP 200."""
    return HTTP_OK, ok(data)


def respond_fail(kind: ErrorKind) -> HandlerResult:
    """Failure envelope with the status owned by its kind."""
    return status_for(kind), fail(kind)
