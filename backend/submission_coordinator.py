"""
Submit lifecycle for the sign-up form.

State machine:
    IDLE/SUCCEEDED --submit--> VALIDATING
    VALIDATING --invalid--> IDLE
    VALIDATING --valid--> SUBMITTING
    SUBMITTING --success--> SUCCEEDED  (banner shown, fields reset)
    SUBMITTING --rejected/failed--> IDLE  (errors shown, fields kept)
    SUCCEEDED --banner timeout or close--> IDLE

Only one submission may be in flight; triggers while VALIDATING or
SUBMITTING are ignored.
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional
import logging

from field_model import FieldModel
from handlers.base_handler import BaseSubmitHandler
from models.enums import FieldName, FailureReason, SubmissionState, SubmissionStatus
from models.sign_up_form_data import SignUpFormData
from models.submission_result import SubmissionResult
from models.validation_failure import ValidationFailure
from utils.banner_timer import BannerTimer
from field_validators import is_form_valid

logger = logging.getLogger(__name__)

SUBMISSION_FAILED_MESSAGE = "submission failed, please try again"


class SubmissionCoordinator:
    """
    Drives validation, the async handler call and the success banner.

    Features:
    - Single-flight guard based on the current state
    - Server failures kept per field until that field changes
    - Banner auto-hide that is cancelled by an explicit close
    - Handler errors and timeouts turned into a form-level error
    """

    IN_FLIGHT_STATES = (SubmissionState.VALIDATING, SubmissionState.SUBMITTING)

    def __init__(
        self,
        fields: FieldModel,
        handler: BaseSubmitHandler,
        banner_timeout: float = 5.0,
        submit_timeout: Optional[float] = None,
    ):
        """
        Initialize submission coordinator.

        Args:
            fields: Field storage to validate, snapshot and reset
            handler: Remote side of the submission
            banner_timeout: Seconds the success banner stays visible
            submit_timeout: Maximum seconds to wait for the handler (None = no limit)
        """
        self.fields = fields
        self.handler = handler
        self.submit_timeout = submit_timeout
        self._banner_timer = BannerTimer(banner_timeout)

        self.state = SubmissionState.IDLE
        self.banner_visible = False
        self.last_submitted: Optional[SignUpFormData] = None
        self.last_result: Optional[SubmissionResult] = None
        self.form_error = ''
        self._server_failures: Dict[FieldName, List[ValidationFailure]] = {}

        self._unsubscribe = fields.subscribe(self._on_field_changed)

    @property
    def in_flight(self) -> bool:
        return self.state in self.IN_FLIGHT_STATES

    @property
    def banner_pending(self) -> bool:
        """Whether an auto-hide is scheduled."""
        return self._banner_timer.pending

    def server_failures(self, field: FieldName) -> List[ValidationFailure]:
        return list(self._server_failures.get(FieldName(field), []))

    async def submit(self) -> Optional[SubmissionResult]:
        """
        Validate the form and, if valid, run the submit handler.

        Returns:
            The handler's SubmissionResult, or None if the trigger was ignored
            or validation blocked the submission
        """
        if self.in_flight:
            logger.debug(f"Submit ignored: already {self.state.value}")
            return None

        self.state = SubmissionState.VALIDATING
        self.form_error = ''
        self._server_failures.clear()
        self.fields.mark_all_touched()

        if not is_form_valid(self.fields.values()):
            logger.info("Submit blocked: form has validation errors")
            self.state = SubmissionState.IDLE
            return None

        data = self.fields.snapshot()
        self.state = SubmissionState.SUBMITTING
        logger.info(f"Submitting sign-up form: {data.to_dict()}")

        try:
            result = await self._call_handler(data)
        except asyncio.CancelledError:
            logger.info(f"Submission for {data.display_name} cancelled")
            self.state = SubmissionState.IDLE
            raise
        self.last_result = result

        if result.status == SubmissionStatus.SUCCESS:
            self._on_success(data)
        elif result.status == SubmissionStatus.REJECTED:
            self._on_rejected(result)
        else:
            self._on_failed(result)

        return result

    def close_banner(self):
        """Hide the success banner now and drop the pending auto-hide."""
        self._banner_timer.cancel()
        self.banner_visible = False
        if self.state == SubmissionState.SUCCEEDED:
            self.state = SubmissionState.IDLE

    def close(self):
        """Detach from the field model and cancel timers."""
        self._banner_timer.cancel()
        self._unsubscribe()

    async def _call_handler(self, data: SignUpFormData) -> SubmissionResult:
        started_at = datetime.now()
        try:
            if self.submit_timeout is None:
                return await self.handler.submit(data)
            return await asyncio.wait_for(self.handler.submit(data), timeout=self.submit_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Submission for {data.display_name} timed out after {self.submit_timeout}s")
            return SubmissionResult.failed(
                "Submission timed out",
                failure_reason=FailureReason.TIMEOUT,
                started_at=started_at,
                completed_at=datetime.now(),
            )
        except Exception as e:
            logger.exception(f"Error submitting sign-up for {data.display_name}")
            return SubmissionResult.failed(
                str(e),
                started_at=started_at,
                completed_at=datetime.now(),
            )

    def _on_success(self, data: SignUpFormData):
        self.last_submitted = data
        self.banner_visible = True
        self.state = SubmissionState.SUCCEEDED
        self.fields.reset()
        self._banner_timer.start(self._on_banner_timeout)
        logger.info(f"Sign-up succeeded for {data.display_name}")

    def _on_rejected(self, result: SubmissionResult):
        for failure in result.failures:
            if failure.field is None:
                self.form_error = self.form_error or failure.message
            else:
                self._server_failures.setdefault(failure.field, []).append(failure)
        if not result.failures:
            self.form_error = SUBMISSION_FAILED_MESSAGE
        logger.warning(f"Sign-up rejected: {[f.to_dict() for f in result.failures]}")
        self.state = SubmissionState.IDLE

    def _on_failed(self, result: SubmissionResult):
        self.form_error = SUBMISSION_FAILED_MESSAGE
        logger.warning(f"Sign-up failed: {result.failure_reason.value} - {result.error_message}")
        self.state = SubmissionState.IDLE

    def _on_banner_timeout(self):
        self.banner_visible = False
        if self.state == SubmissionState.SUCCEEDED:
            self.state = SubmissionState.IDLE
        logger.debug("Success banner hidden after timeout")

    def _on_field_changed(self, field: FieldName, value: str):
        if self._server_failures.pop(field, None):
            logger.debug(f"Cleared server failures for {field.value}")
