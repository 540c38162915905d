import pytest

from contact_api.errors import ValidationError
from contact_api.records import SCHEMAS, transform
from contact_api.records.transforms import make_user_transform
from contact_api.security import check_password, hash_password


def test_message_defaults():
    out = transform(SCHEMAS["message"], {"name": "A", "email": "a@b.com", "message": "hi"})
    assert out == {
        "name": "A",
        "email": "a@b.com",
        "phone": None,
        "message": "hi",
        "terms_accepted": 0,
    }


@pytest.mark.parametrize("accepted,flag", [(True, 1), ("yes", 1), (1, 1), (False, 0), (None, 0), ("", 0)])
def test_message_terms_flag(accepted, flag):
    raw = {"name": "A", "email": "a@b.com", "message": "hi", "accepted_terms": accepted}
    assert transform(SCHEMAS["message"], raw)["terms_accepted"] == flag


def test_message_empty_phone_is_null():
    raw = {"name": "A", "email": "a@b.com", "message": "hi", "phone": ""}
    assert transform(SCHEMAS["message"], raw)["phone"] is None


def test_transform_does_not_mutate_input():
    raw = {"name": "A", "email": "a@b.com", "message": "hi", "accepted_terms": True, "token": "t"}
    before = dict(raw)
    transform(SCHEMAS["message"], raw)
    assert raw == before


@pytest.mark.parametrize("password", ["abc", "12345", None, 123456])
def test_user_password_too_short(password):
    raw = {"name": "A", "email": "a@b.com", "password": password}
    with pytest.raises(ValidationError, match="password too short"):
        transform(SCHEMAS["user"], raw)


def test_user_password_is_hashed():
    out = transform(SCHEMAS["user"], {"name": "A", "email": "a@b.com", "password": "longenough"})
    assert set(out) == {"name", "email", "password"}
    assert out["password"] != "longenough"
    assert check_password("longenough", out["password"])


def test_hash_is_salted():
    a, b = hash_password("longenough"), hash_password("longenough")
    assert a != b
    assert check_password("longenough", a) and check_password("longenough", b)


def test_hash_uses_fixed_cost():
    assert hash_password("longenough").startswith("$2b$10$")


def test_custom_hasher():
    t = make_user_transform(hasher=lambda p: "h:" + p[::-1])
    assert t({"name": "A", "email": "a@b.com", "password": "secret"})["password"] == "h:terces"


@pytest.mark.parametrize("password,msg", [
    ("x" * 73, "password too long"),
    ("é" * 37, "password too long"),       # 74 bytes, 37 characters
    ("abc\ud800def", "invalid password"),
])
def test_user_password_rejected_before_hashing(password, msg):
    hashed = []
    t = make_user_transform(hasher=lambda p: hashed.append(p) or "h")
    with pytest.raises(ValidationError, match=msg):
        t({"name": "A", "email": "a@b.com", "password": password})
    assert hashed == []


def test_user_password_at_byte_limit():
    out = transform(SCHEMAS["user"], {"name": "A", "email": "a@b.com", "password": "x" * 72})
    assert check_password("x" * 72, out["password"])
