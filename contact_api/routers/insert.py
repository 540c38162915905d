from typing import Any, Dict
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from contact_api.db import get_db
from contact_api.records import RecordDispatcher, TABLE_KINDS
from ._responses import error, failed

router = APIRouter(prefix="/api", tags=["insert"])


@router.post("/insert/{table}")
def insert(table: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Generic insert into one of the allowed tables (messages, users)."""
    kind = TABLE_KINDS.get(table)
    if kind is None:
        return error(404, "table not allowed")

    try:
        result = RecordDispatcher(db).insert_record(kind, payload)
        return JSONResponse(
            status_code=201,
            content={"message": f"Inserted into {table}", "id": result["insert_id"]},
        )
    except Exception as e:
        return failed(f"/api/insert/{table}", e)
