"""Simulated backend that accepts sign-ups after a fixed delay."""

import asyncio
from datetime import datetime
from typing import Iterable, Optional
import logging

from .base_handler import BaseSubmitHandler
from models.sign_up_form_data import SignUpFormData
from models.submission_result import SubmissionResult
from models.validation_failure import ValidationFailure
from models.enums import SubmissionStatus, FailureReason, FailureKind, FieldName

logger = logging.getLogger(__name__)

USERNAME_TAKEN_MESSAGE = "already taken"


class SimulatedSubmitHandler(BaseSubmitHandler):
    """
    Stand-in for a registration endpoint.

    Waits `delay` seconds and then succeeds, unless the username is one of
    `taken_usernames` (compared case-insensitively), in which case the
    submission is rejected with a server failure on the username field.
    """

    HANDLER_NAME = "simulated"

    def __init__(self, delay: float = 0.5, taken_usernames: Optional[Iterable[str]] = None):
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self.delay = delay
        self.taken_usernames = {name.lower() for name in (taken_usernames or [])}
        self.submit_count = 0

    async def submit(self, data: SignUpFormData) -> SubmissionResult:
        """Simulate a round trip to the server."""
        self.submit_count += 1
        started_at = datetime.now()

        if not await self.pre_submit_hook(data):
            return self.create_result(
                SubmissionStatus.FAILED,
                failure_reason=FailureReason.HANDLER_ERROR,
                started_at=started_at,
                error_message="Submission refused before sending",
            )

        await asyncio.sleep(self.delay)

        if data.username.lower() in self.taken_usernames:
            logger.warning(f"[{self.HANDLER_NAME}] Username already taken: {data.username}")
            result = self.create_result(
                SubmissionStatus.REJECTED,
                failures=[
                    ValidationFailure(
                        FailureKind.SERVER,
                        USERNAME_TAKEN_MESSAGE,
                        field=FieldName.USERNAME,
                    )
                ],
                failure_reason=FailureReason.SERVER_REJECTED,
                started_at=started_at,
            )
        else:
            result = self.create_result(SubmissionStatus.SUCCESS, started_at=started_at)

        await self.post_submit_hook(data, result)
        return result
