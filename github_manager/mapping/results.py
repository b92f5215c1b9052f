"""Contains results of state-changing operations that return no useful body."""

from dataclasses import dataclass
from enum import Enum


class FailureReason(str, Enum):
    """Enum for the ways a state-changing operation can fail."""

    UNEXPECTED_STATUS = "unexpected_status"
    REQUEST_FAILED = "request_failed"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a state-changing operation.

    Truthiness follows success, so callers that only need a yes/no answer can
    keep writing ``if manager.delete_workflow_run(...):``.
    """

    success: bool
    status_code: int | None = None
    reason: FailureReason | None = None
    error_body: str = ""

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def succeeded(cls, status_code: int) -> "ActionResult":
        """Build a successful result."""
        return cls(success=True, status_code=status_code)

    @classmethod
    def failed(cls, reason: FailureReason, status_code: int | None, error_body: str) -> "ActionResult":
        """Build a failed result."""
        return cls(success=False, status_code=status_code, reason=reason, error_body=error_body)
