# contact_api/records/registry.py
from types import MappingProxyType
from typing import Mapping

from contact_api.errors import ConfigError
from .base import SchemaEntry
from .transforms import transform_message, transform_user

# --------------------------------------------------------------------
# One entry per insertable record kind. Built once at import, read-only.
# values_from must yield exactly one value per placeholder, in order.
# --------------------------------------------------------------------
MESSAGE = SchemaEntry(
    kind="message",
    table="messages",
    required_fields=("name", "email", "message"),
    transform=transform_message,
    values_from=lambda r: (r["name"], r["email"], r["phone"], r["message"], r["terms_accepted"]),
    insert_statement=(
        "INSERT INTO messages (name, email, phone, message, terms_accepted) "
        "VALUES (:name, :email, :phone, :message, :terms_accepted)"
    ),
)

USER = SchemaEntry(
    kind="user",
    table="users",
    required_fields=("name", "email", "password"),
    transform=transform_user,
    values_from=lambda r: (r["name"], r["email"], r["password"]),
    insert_statement="INSERT INTO users (name, email, password) VALUES (:name, :email, :password)",
)

SCHEMAS: Mapping[str, SchemaEntry] = MappingProxyType({e.kind: e for e in (MESSAGE, USER)})

# Public table name -> record kind, for the generic insert endpoint
TABLE_KINDS: Mapping[str, str] = MappingProxyType({e.table: e.kind for e in SCHEMAS.values()})


def get_schema(kind: str, registry: Mapping[str, SchemaEntry] = SCHEMAS) -> SchemaEntry:
    try:
        return registry[kind]
    except KeyError:
        raise ConfigError(f"unknown kind: {kind}") from None
