from typing import List, Tuple

import pytest

from field_model import FieldModel
from models.enums import FieldName
from models.sign_up_form_data import SignUpFormData


def test_fields_start_empty_and_untouched() -> None:
    fields = FieldModel()

    for field in FieldName:
        assert fields.get(field) == ""
        assert not fields.is_touched(field)


def test_set_accepts_enum_or_string_and_normalises_none() -> None:
    fields = FieldModel()

    fields.set("username", "bob")
    fields.set(FieldName.EMAIL, None)

    assert fields.get(FieldName.USERNAME) == "bob"
    assert fields.get("email") == ""


def test_unknown_field_raises() -> None:
    with pytest.raises(ValueError):
        FieldModel().set("password", "x")


def test_listeners_only_hear_real_changes() -> None:
    fields = FieldModel()
    seen: List[Tuple[FieldName, str]] = []
    fields.subscribe(lambda field, value: seen.append((field, value)))

    fields.set(FieldName.USERNAME, "bob")
    fields.set(FieldName.USERNAME, "bob")
    fields.set(FieldName.EMAIL, "")

    assert seen == [(FieldName.USERNAME, "bob")]


def test_unsubscribe() -> None:
    fields = FieldModel()
    seen: List[str] = []
    unsubscribe = fields.subscribe(lambda field, value: seen.append(value))

    unsubscribe()
    unsubscribe()
    fields.set(FieldName.USERNAME, "bob")

    assert seen == []


def test_reset_clears_values_and_touched_flags() -> None:
    fields = FieldModel()
    fields.set(FieldName.USERNAME, "bob")
    fields.set(FieldName.EMAIL, "bob@example.com")
    fields.mark_all_touched()
    seen: List[FieldName] = []
    fields.subscribe(lambda field, value: seen.append(field))

    fields.reset()

    assert fields.values() == {FieldName.USERNAME: "", FieldName.EMAIL: ""}
    assert not any(fields.is_touched(f) for f in FieldName)
    assert seen == [FieldName.USERNAME, FieldName.EMAIL]


def test_snapshot() -> None:
    fields = FieldModel()
    fields.set(FieldName.USERNAME, "validUser1")
    fields.set(FieldName.EMAIL, "user@example.com")

    snapshot = fields.snapshot()
    fields.set(FieldName.USERNAME, "changed")

    assert snapshot == SignUpFormData(username="validUser1", email="user@example.com")
    assert snapshot.to_dict() == {"username": "validUser1", "email": "user@example.com"}
