"""Tagged errors and write results returned by the service layer."""

import enum
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel


class ErrorKind(str, enum.Enum):
    """What went wrong, so callers can branch without parsing messages."""
    unauthenticated = "unauthenticated"
    not_found = "not_found"
    conflict = "conflict"
    validation_failed = "validation_failed"
    store_failure = "store_failure"


class ServiceError(BaseModel):
    kind: ErrorKind
    detail: str


NOT_AUTHENTICATED = ServiceError(kind=ErrorKind.unauthenticated, detail="Not authenticated")


@dataclass
class WriteResult:
    """
    Outcome of a write. Writes never raise: exactly one of `data` or
    `error` is meaningful.
    """
    data: Any = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None) -> "WriteResult":
        return cls(data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str) -> "WriteResult":
        return cls(error=ServiceError(kind=kind, detail=detail))

    @classmethod
    def unauthenticated(cls) -> "WriteResult":
        return cls(error=NOT_AUTHENTICATED)
