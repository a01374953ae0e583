"""Sign-up form controller: the surface a UI binds to."""

from typing import List, Optional, Union
import logging

from form_settings import Settings
from field_model import FieldModel
from handlers.base_handler import BaseSubmitHandler
from handlers.simulated_handler import SimulatedSubmitHandler
from models.enums import FieldName, SubmissionState
from models.sign_up_form_data import SignUpFormData
from models.submission_result import SubmissionResult
from models.validation_failure import ValidationFailure
from submission_coordinator import SubmissionCoordinator
from field_validators import field_failures, is_form_valid, select_error_message

logger = logging.getLogger(__name__)


class FormController:
    """
    Binds field input, validation and submission together.

    Error strings are recomputed on every read from the current field values
    plus any failures the submit handler returned.
    """

    def __init__(
        self,
        handler: Optional[BaseSubmitHandler] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.fields = FieldModel()
        self.handler = handler or SimulatedSubmitHandler(
            delay=self.settings.submit_delay_seconds,
            taken_usernames=self.settings.taken_usernames,
        )
        self.coordinator = SubmissionCoordinator(
            self.fields,
            self.handler,
            banner_timeout=self.settings.banner_timeout_seconds,
            submit_timeout=self.settings.submit_timeout_seconds,
        )

    # Input surface

    def update(self, field: Union[FieldName, str], value: Optional[str]):
        self.fields.set(field, value)

    def blur(self, field: Union[FieldName, str]):
        """The user left the field; its errors may now be shown."""
        self.fields.touch(field)

    async def submit(self) -> Optional[SubmissionResult]:
        return await self.coordinator.submit()

    def close_banner(self):
        self.coordinator.close_banner()

    # Output surface

    def failures(self, field: Union[FieldName, str]) -> List[ValidationFailure]:
        field = FieldName(field)
        return field_failures(field, self.fields.get(field)) + self.coordinator.server_failures(field)

    def error(self, field: Union[FieldName, str]) -> str:
        """Message to display for a field, '' when none or not yet touched."""
        if not self.fields.is_touched(field):
            return ''
        return select_error_message(self.failures(field))

    @property
    def username_error(self) -> str:
        return self.error(FieldName.USERNAME)

    @property
    def email_error(self) -> str:
        return self.error(FieldName.EMAIL)

    @property
    def is_valid(self) -> bool:
        """Local validity only; server failures are not considered."""
        return is_form_valid(self.fields.values())

    @property
    def form_error(self) -> str:
        return self.coordinator.form_error

    @property
    def banner_visible(self) -> bool:
        return self.coordinator.banner_visible

    @property
    def submitted_data(self) -> Optional[SignUpFormData]:
        return self.coordinator.last_submitted

    @property
    def state(self) -> SubmissionState:
        return self.coordinator.state

    def close(self):
        self.coordinator.close()
