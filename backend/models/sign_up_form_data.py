"""Snapshot of the form values taken at submit time."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SignUpFormData:
    """Values of both fields at the moment a submission started."""
    username: str
    email: str

    @property
    def display_name(self) -> str:
        """Human-readable name for logging."""
        return f"{self.username} <{self.email}>"

    def to_dict(self) -> Dict[str, str]:
        return {
            'username': self.username,
            'email': self.email,
        }
