"""Outcome of a remote lifecycle call (save, publish, unpublish, discard)."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RemoteResult:
    """Truthy on success, falsy on failure.

    Callers that only need pass/fail can write ``if need.publish():``;
    callers that need the cause read ``error``.
    """

    ok: bool
    value: Any = None
    error: Optional[Exception] = None
    operation: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any = None, operation: str = "") -> "RemoteResult":
        return cls(ok=True, value=value, operation=operation)

    @classmethod
    def failure(cls, error: Exception, operation: str = "") -> "RemoteResult":
        return cls(ok=False, error=error, operation=operation)

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status of the failure, when the error carries one."""
        return getattr(self.error, "code", None)
