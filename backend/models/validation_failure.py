"""Validation failure data model."""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from .enums import FailureKind, FieldName


@dataclass(frozen=True)
class ValidationFailure:
    """A typed reason a field's value is unacceptable, plus its display message."""
    kind: FailureKind
    message: str
    field: Optional[FieldName] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field': self.field.value if self.field else None,
            'kind': self.kind.value,
            'message': self.message,
        }
