"""
Field validation rules for the sign-up form.

Every validator is a pure function of one field value and returns a list of
ValidationFailure objects (empty when the value is acceptable). The required
check and the per-field format checks are separate validators whose results
are merged per field; select_error_message() picks the one to display.
"""

import re
from typing import Callable, Dict, Iterable, List, Mapping, Union

from email_validator import EmailNotValidError, validate_email as check_email_shape

from models.enums import FailureKind, FieldName
from models.validation_failure import ValidationFailure

REQUIRED_MESSAGE = "this field is required"
USERNAME_FORMAT_MESSAGE = "must contain only letters and numbers"
USERNAME_LENGTH_MESSAGE = "must be between 3 and 20 characters"
EMAIL_MESSAGE = "enter a valid email"

USERNAME_PATTERN = re.compile(r'[a-zA-Z0-9]+')
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20

# First kind found wins when a field has several failures
ERROR_PRIORITY = (
    FailureKind.REQUIRED,
    FailureKind.USERNAME_INVALID,
    FailureKind.EMAIL,
    FailureKind.SERVER,
)

Validator = Callable[[str], List[ValidationFailure]]


def required(value: str) -> List[ValidationFailure]:
    """Flag an empty or missing value."""
    if not value:
        return [ValidationFailure(FailureKind.REQUIRED, REQUIRED_MESSAGE)]
    return []


def validate_username(value: str) -> List[ValidationFailure]:
    """
    Check username format, then length.

    Empty values pass (the required validator reports them). Only the first
    failing rule is returned.
    """
    if not value:
        return []

    if not USERNAME_PATTERN.fullmatch(value):
        return [ValidationFailure(FailureKind.USERNAME_INVALID, USERNAME_FORMAT_MESSAGE)]

    if not USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH:
        return [ValidationFailure(FailureKind.USERNAME_INVALID, USERNAME_LENGTH_MESSAGE)]

    return []


def validate_email(value: str) -> List[ValidationFailure]:
    """
    Check the local@domain shape of an email address. Empty values pass.

    Only the syntax is checked: reserved names such as .local or .invalid are
    accepted as long as the domain contains a dot.
    """
    if not value:
        return []

    try:
        checked = check_email_shape(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return [ValidationFailure(FailureKind.EMAIL, EMAIL_MESSAGE)]

    if '.' not in checked.domain:
        return [ValidationFailure(FailureKind.EMAIL, EMAIL_MESSAGE)]

    return []


FIELD_VALIDATORS: Dict[FieldName, List[Validator]] = {
    FieldName.USERNAME: [required, validate_username],
    FieldName.EMAIL: [required, validate_email],
}


def field_failures(field: Union[FieldName, str], value: str) -> List[ValidationFailure]:
    """Run every validator registered for a field and merge the results."""
    failures: List[ValidationFailure] = []
    for validator in FIELD_VALIDATORS[FieldName(field)]:
        failures.extend(validator(value or ''))
    return failures


def is_form_valid(values: Mapping[FieldName, str]) -> bool:
    """True when no field in the mapping has a local failure."""
    return all(not field_failures(field, value) for field, value in values.items())


def select_error_message(failures: Iterable[ValidationFailure]) -> str:
    """Return the message of the highest-priority failure, or '' if none match."""
    failures = list(failures)
    for kind in ERROR_PRIORITY:
        for failure in failures:
            if failure.kind == kind:
                return failure.message
    return ''
