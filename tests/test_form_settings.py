import pytest

from form_settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SUBMIT_DELAY_SECONDS",
        "BANNER_TIMEOUT_SECONDS",
        "SUBMIT_TIMEOUT_SECONDS",
        "TAKEN_USERNAMES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings.submit_delay_seconds == 0.5
    assert settings.banner_timeout_seconds == 5.0
    assert settings.submit_timeout_seconds is None
    assert settings.taken_usernames == ()
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUBMIT_DELAY_SECONDS", "0.1")
    monkeypatch.setenv("BANNER_TIMEOUT_SECONDS", "2")
    monkeypatch.setenv("SUBMIT_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("TAKEN_USERNAMES", "alice, bob,,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.submit_delay_seconds == 0.1
    assert settings.banner_timeout_seconds == 2.0
    assert settings.submit_timeout_seconds == 3.5
    assert settings.taken_usernames == ("alice", "bob")
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_rejects_bad_numbers(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("BANNER_TIMEOUT_SECONDS", value)

    with pytest.raises(ValueError, match="BANNER_TIMEOUT_SECONDS"):
        Settings.from_env()
