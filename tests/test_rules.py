import pytest

from contact_api.errors import ValidationError
from contact_api.records import SCHEMAS, validate
from contact_api.records.rules import is_blank, is_email


def _message(**over):
    raw = {"name": "A", "email": "a@b.com", "message": "hi"}
    raw.update(over)
    return raw


def test_valid_message_passes():
    validate(SCHEMAS["message"], _message())


@pytest.mark.parametrize("field", ["name", "email", "message"])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_blank_required_field_is_named(field, value):
    raw = _message(**{field: value})
    with pytest.raises(ValidationError, match=f"missing field: {field}"):
        validate(SCHEMAS["message"], raw)


def test_absent_required_field():
    raw = _message()
    del raw["message"]
    with pytest.raises(ValidationError) as ei:
        validate(SCHEMAS["message"], raw)
    assert str(ei.value) == "missing field: message"


def test_first_missing_field_wins():
    with pytest.raises(ValidationError, match="missing field: name"):
        validate(SCHEMAS["user"], {})


@pytest.mark.parametrize("kind", ["message", "user"])
def test_bad_email_rejected_for_every_kind(kind):
    raw = {"name": "A", "email": "not-an-email", "message": "hi", "password": "longenough"}
    with pytest.raises(ValidationError, match="invalid email"):
        validate(SCHEMAS[kind], raw)


def test_non_string_required_values_count_as_present():
    validate(SCHEMAS["message"], _message(message=0))


def test_is_email():
    assert is_email("a@b.com")
    assert is_email("first.last@mail.example.org")
    assert not is_email("a@b")
    assert not is_email("a b@c.com")
    assert not is_email("@b.com")


def test_is_blank():
    assert is_blank(None)
    assert is_blank(" \t")
    assert not is_blank(False)
    assert not is_blank("x")
