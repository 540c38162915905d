from typing import Mapping

from sqlalchemy.orm import Session

from .base import SchemaEntry
from .executor import execute
from .registry import SCHEMAS, get_schema
from .rules import validate
from .transforms import transform
from .types import Record


class RecordDispatcher:
    """
    Validate -> transform -> insert for one record kind.

    Holds no state of its own beyond the read-only registry and the session
    it was handed, so one instance per request is the intended use.
    """
    def __init__(self, db: Session, registry: Mapping[str, SchemaEntry] = SCHEMAS):
        self.db = db
        self.registry = registry

    def insert_record(self, kind: str, raw: Record) -> dict:
        schema = get_schema(kind, self.registry)
        validate(schema, raw)
        normalized = transform(schema, raw)
        return {"insert_id": execute(self.db, schema, normalized)}
