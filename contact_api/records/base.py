# contact_api/records/base.py
import re
from dataclasses import dataclass, field
from typing import Callable, Sequence, Tuple

from .types import Record, RecordKind

# Same rule SQLAlchemy's text() uses to find named bind parameters
_BIND = re.compile(r"(?<![:\w\\]):(\w+)(?!:)")


@dataclass(frozen=True)
class SchemaEntry:
    """
    Everything needed to insert one record kind:
      - which fields must be present
      - how to turn raw input into a storable record
      - how to lay that record out as statement parameters
      - the fixed INSERT statement itself
    """
    kind: RecordKind
    table: str
    required_fields: Tuple[str, ...]
    transform: Callable[[Record], Record]
    values_from: Callable[[Record], Sequence]
    insert_statement: str
    placeholders: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "placeholders", tuple(_BIND.findall(self.insert_statement)))
