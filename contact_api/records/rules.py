import re
from typing import Any

from contact_api.errors import ValidationError
from .base import SchemaEntry
from .types import Record

EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")


def validate(schema: SchemaEntry, raw: Record) -> None:
    """
    Reject input with a missing or blank required field, or with an email
    that doesn't look like local@domain.tld. Required fields are checked in
    schema order and the first failure wins.
    """
    for name in schema.required_fields:
        if is_blank(raw.get(name)):
            raise ValidationError(f"missing field: {name}")

    email = raw.get("email")
    if email and not is_email(email):
        raise ValidationError("invalid email")


# --- Individual field helpers ---

def is_blank(v: Any) -> bool:
    """Absent/None, or a string with nothing but whitespace."""
    if v is None:
        return True
    return isinstance(v, str) and not v.strip()

def is_email(v: Any) -> bool:
    return bool(EMAIL_RE.match(str(v)))

def as_flag(v: Any) -> int:
    """Truthy -> 1, anything else -> 0 (columns store the flag as an int)."""
    return 1 if v else 0

def or_none(v: Any):
    """Empty values become NULL."""
    return v or None
