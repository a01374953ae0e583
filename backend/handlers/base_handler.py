"""Abstract base class for sign-up submit handlers."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
import logging

from models.sign_up_form_data import SignUpFormData
from models.submission_result import SubmissionResult
from models.validation_failure import ValidationFailure
from models.enums import SubmissionStatus, FailureReason

logger = logging.getLogger(__name__)


class BaseSubmitHandler(ABC):
    """
    Abstract base class for the remote side of a sign-up submission.

    A handler receives the snapshot taken at submit time and reports the
    outcome as a SubmissionResult. Field-level refusals are returned as
    REJECTED results carrying ValidationFailure objects with their field set.
    """

    # Class-level attribute to be overridden
    HANDLER_NAME: str = "base"

    @abstractmethod
    async def submit(self, data: SignUpFormData) -> SubmissionResult:
        """
        Submit the sign-up data and return the result.

        Args:
            data: Field values captured when the submission started

        Returns:
            SubmissionResult with status and details
        """
        pass

    def create_result(
        self,
        status: SubmissionStatus,
        failures: Optional[List[ValidationFailure]] = None,
        failure_reason: FailureReason = FailureReason.NONE,
        started_at: Optional[datetime] = None,
        **kwargs
    ) -> SubmissionResult:
        """Create a SubmissionResult stamped with the completion time."""
        return SubmissionResult(
            status=status,
            failures=list(failures or []),
            failure_reason=failure_reason,
            started_at=started_at,
            completed_at=datetime.now(),
            **kwargs
        )

    async def pre_submit_hook(self, data: SignUpFormData) -> bool:
        """
        Hook called before submission. Override to add pre-processing.

        Returns:
            True to continue, False to refuse the submission
        """
        logger.info(f"[{self.HANDLER_NAME}] Starting submission for {data.display_name}")
        return True

    async def post_submit_hook(self, data: SignUpFormData, result: SubmissionResult):
        """Hook called after submission. Override to add post-processing."""
        logger.info(
            f"[{self.HANDLER_NAME}] Completed {data.display_name}: "
            f"{result.status.value}"
        )
