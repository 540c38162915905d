from .base import SchemaEntry
from .dispatcher import RecordDispatcher
from .executor import execute
from .registry import SCHEMAS, TABLE_KINDS, get_schema
from .rules import validate
from .transforms import transform
from .types import Record, RecordKind

__all__ = [
    "RecordDispatcher",
    "SchemaEntry",
    "SCHEMAS",
    "TABLE_KINDS",
    "get_schema",
    "validate",
    "transform",
    "execute",
    "Record",
    "RecordKind",
]
