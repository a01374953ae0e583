import asyncio
from typing import List, Optional

import pytest

from form_settings import Settings
from form_controller import FormController
from handlers.base_handler import BaseSubmitHandler
from models.enums import FieldName
from models.sign_up_form_data import SignUpFormData
from models.submission_result import SubmissionResult

FAST_SETTINGS = Settings(submit_delay_seconds=0.01, banner_timeout_seconds=0.05)


class RecordingHandler(BaseSubmitHandler):
    """Returns a canned result after a short delay and records every call."""

    HANDLER_NAME = "recording"

    def __init__(
        self,
        result: Optional[SubmissionResult] = None,
        delay: float = 0.01,
        error: Optional[Exception] = None,
    ) -> None:
        self.result = result or SubmissionResult.success()
        self.delay = delay
        self.error = error
        self.calls: List[SignUpFormData] = []

    async def submit(self, data: SignUpFormData) -> SubmissionResult:
        self.calls.append(data)
        await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def controller(handler: RecordingHandler):
    form = FormController(handler=handler, settings=FAST_SETTINGS)
    yield form
    form.close()


def fill(form: FormController, username: str, email: str) -> None:
    form.update(FieldName.USERNAME, username)
    form.update(FieldName.EMAIL, email)
