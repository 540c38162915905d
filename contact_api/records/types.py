# contact_api/records/types.py
from typing import Any, Dict, Literal

RecordKind = Literal["message", "user"]
Record = Dict[str, Any]
