import pytest

from handlers.simulated_handler import USERNAME_TAKEN_MESSAGE, SimulatedSubmitHandler
from models.enums import FailureKind, FailureReason, FieldName, SubmissionStatus
from models.sign_up_form_data import SignUpFormData


async def test_accepts_after_delay() -> None:
    handler = SimulatedSubmitHandler(delay=0.01)

    result = await handler.submit(SignUpFormData(username="validUser1", email="user@example.com"))

    assert result.status == SubmissionStatus.SUCCESS
    assert result.failures == []
    assert result.started_at is not None and result.completed_at is not None
    assert result.completed_at >= result.started_at
    assert handler.submit_count == 1


async def test_rejects_taken_username_case_insensitively() -> None:
    handler = SimulatedSubmitHandler(delay=0, taken_usernames=["Alice"])

    result = await handler.submit(SignUpFormData(username="ALICE", email="alice@example.com"))

    assert result.status == SubmissionStatus.REJECTED
    assert result.failure_reason == FailureReason.SERVER_REJECTED
    assert len(result.failures) == 1
    failure = result.failures[0]
    assert failure.field == FieldName.USERNAME
    assert failure.kind == FailureKind.SERVER
    assert failure.message == USERNAME_TAKEN_MESSAGE
    assert result.to_dict()["failures"] == [
        {"field": "username", "kind": "server", "message": "already taken"}
    ]


async def test_pre_submit_hook_can_refuse() -> None:
    class RefusingHandler(SimulatedSubmitHandler):
        async def pre_submit_hook(self, data: SignUpFormData) -> bool:
            return False

    result = await RefusingHandler(delay=0).submit(SignUpFormData(username="bob123", email="b@c.com"))

    assert result.status == SubmissionStatus.FAILED
    assert result.error_message


def test_negative_delay_is_rejected() -> None:
    with pytest.raises(ValueError):
        SimulatedSubmitHandler(delay=-1)


def test_failure_reasons_are_all_produced_somewhere() -> None:
    assert {reason.value for reason in FailureReason} == {
        "none",
        "server_rejected",
        "timeout",
        "handler_error",
    }
