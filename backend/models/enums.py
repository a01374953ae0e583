"""Enums for form fields, failure kinds and submission states."""

from enum import Enum


class FieldName(Enum):
    """Named input slots of the sign-up form."""
    USERNAME = "username"
    EMAIL = "email"


class FailureKind(Enum):
    """Closed set of validation failure kinds."""
    REQUIRED = "required"
    EMAIL = "email"
    USERNAME_INVALID = "usernameInvalid"
    SERVER = "server"          # Returned by the submit handler


class SubmissionState(Enum):
    """Lifecycle state of the form's submit flow."""
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"    # Banner visible until closed or timed out


class SubmissionStatus(Enum):
    """Outcome of a single submit handler call."""
    SUCCESS = "success"
    REJECTED = "rejected"      # Handler returned field failures
    FAILED = "failed"          # Handler raised, timed out or reported an error


class FailureReason(Enum):
    """Detailed failure classification."""
    NONE = "none"
    SERVER_REJECTED = "server_rejected"
    TIMEOUT = "timeout"
    HANDLER_ERROR = "handler_error"
