"""Runtime configuration read from the environment (and .env if present)."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


def _get_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default

    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")

    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Timings and simulated-backend behaviour for the sign-up form."""

    submit_delay_seconds: float = 0.5
    banner_timeout_seconds: float = 5.0
    submit_timeout_seconds: Optional[float] = None
    taken_usernames: Tuple[str, ...] = ()
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        taken = os.getenv('TAKEN_USERNAMES', '')
        return cls(
            submit_delay_seconds=_get_float('SUBMIT_DELAY_SECONDS', cls.submit_delay_seconds),
            banner_timeout_seconds=_get_float('BANNER_TIMEOUT_SECONDS', cls.banner_timeout_seconds),
            submit_timeout_seconds=_get_float('SUBMIT_TIMEOUT_SECONDS', None),
            taken_usernames=tuple(name.strip() for name in taken.split(',') if name.strip()),
            log_level=os.getenv('LOG_LEVEL', cls.log_level).upper(),
        )
