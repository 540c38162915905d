from typing import Callable

from contact_api.errors import ValidationError
from contact_api.security import hash_password
from contact_api.settings import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH
from .base import SchemaEntry
from .rules import as_flag, or_none
from .types import Record


def transform(schema: SchemaEntry, raw: Record) -> Record:
    """Return a NEW normalized record for `schema.kind`. Never mutates `raw`."""
    return schema.transform(raw)


def transform_message(raw: Record) -> Record:
    return {
        "name": raw.get("name"),
        "email": raw.get("email"),
        "phone": or_none(raw.get("phone")),
        "message": raw.get("message"),
        "terms_accepted": as_flag(raw.get("accepted_terms")),
    }


def make_user_transform(hasher: Callable[[str], str] = hash_password) -> Callable[[Record], Record]:
    """
    Build the user transform around a password hasher, so tests can swap in
    a cheaper one without touching the registry.
    """
    def transform_user(raw: Record) -> Record:
        password = raw.get("password")
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError("password too short")
        try:
            size = len(password.encode("utf-8"))
        except UnicodeEncodeError:
            # lone surrogates can arrive through JSON \u escapes
            raise ValidationError("invalid password") from None
        if size > MAX_PASSWORD_BYTES:
            raise ValidationError("password too long")
        return {
            "name": raw.get("name"),
            "email": raw.get("email"),
            "password": hasher(password),
        }
    return transform_user


transform_user = make_user_transform()
