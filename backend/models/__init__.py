"""Data models for the sign-up form."""

from .enums import FieldName, FailureKind, SubmissionState, SubmissionStatus, FailureReason
from .validation_failure import ValidationFailure
from .sign_up_form_data import SignUpFormData
from .submission_result import SubmissionResult

__all__ = [
    'FieldName',
    'FailureKind',
    'SubmissionState',
    'SubmissionStatus',
    'FailureReason',
    'ValidationFailure',
    'SignUpFormData',
    'SubmissionResult',
]
