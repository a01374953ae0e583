"""Storage for the sign-up form's field values and touched flags."""

from typing import Callable, Dict, List, Optional, Set, Union
import logging

from models.enums import FieldName
from models.sign_up_form_data import SignUpFormData

logger = logging.getLogger(__name__)

FieldListener = Callable[[FieldName, str], None]


class FieldModel:
    """
    Holds the current value of each form field.

    Values are always strings; the empty string means unset. Subscribers are
    notified with (field, new_value) whenever a value actually changes. No
    validation happens here.
    """

    def __init__(self):
        self._values: Dict[FieldName, str] = {field: '' for field in FieldName}
        self._touched: Set[FieldName] = set()
        self._listeners: List[FieldListener] = []

    def get(self, field: Union[FieldName, str]) -> str:
        return self._values[FieldName(field)]

    def set(self, field: Union[FieldName, str], value: Optional[str]):
        """Store a new value and notify subscribers if it changed."""
        field = FieldName(field)
        value = value or ''

        if self._values[field] == value:
            return

        self._values[field] = value
        self._notify(field, value)

    def touch(self, field: Union[FieldName, str]):
        self._touched.add(FieldName(field))

    def mark_all_touched(self):
        """Make errors of every field eligible for display."""
        self._touched.update(FieldName)

    def is_touched(self, field: Union[FieldName, str]) -> bool:
        return FieldName(field) in self._touched

    def reset(self):
        """Clear both fields and all touched flags."""
        self._touched.clear()
        for field in FieldName:
            self.set(field, '')

    def values(self) -> Dict[FieldName, str]:
        return dict(self._values)

    def snapshot(self) -> SignUpFormData:
        """Capture the current values for submission."""
        return SignUpFormData(
            username=self._values[FieldName.USERNAME],
            email=self._values[FieldName.EMAIL],
        )

    def subscribe(self, listener: FieldListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, field: FieldName, value: str):
        for listener in list(self._listeners):
            listener(field, value)
