"""Submission result data model for tracking submit handler outcomes."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, List

from .enums import SubmissionStatus, FailureReason
from .validation_failure import ValidationFailure


@dataclass
class SubmissionResult:
    """Result of one submit handler call."""
    status: SubmissionStatus
    failures: List[ValidationFailure] = field(default_factory=list)
    failure_reason: FailureReason = FailureReason.NONE

    # Timing
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    # Error details
    error_message: Optional[str] = None

    @classmethod
    def success(cls, **kwargs) -> "SubmissionResult":
        return cls(status=SubmissionStatus.SUCCESS, **kwargs)

    @classmethod
    def rejected(cls, failures: List[ValidationFailure], **kwargs) -> "SubmissionResult":
        """Handler refused the data with field-targeted failures."""
        return cls(
            status=SubmissionStatus.REJECTED,
            failures=list(failures),
            failure_reason=FailureReason.SERVER_REJECTED,
            **kwargs
        )

    @classmethod
    def failed(
        cls,
        error_message: str,
        failure_reason: FailureReason = FailureReason.HANDLER_ERROR,
        **kwargs
    ) -> "SubmissionResult":
        return cls(
            status=SubmissionStatus.FAILED,
            failure_reason=failure_reason,
            error_message=error_message,
            **kwargs
        )

    @property
    def succeeded(self) -> bool:
        return self.status == SubmissionStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            'status': self.status.value,
            'failure_reason': self.failure_reason.value,
            'failures': [f.to_dict() for f in self.failures],
            'started_at': self.started_at.isoformat() if self.started_at else None,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None,
            'error_message': self.error_message,
        }
