from typing import Any, Dict
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contact_api.db import get_db
from contact_api.errors import StorageError
from contact_api.records import RecordDispatcher
from contact_api.records.rules import is_email
from contact_api.repositories import email_registered
from ._responses import error, failed

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/register")
def register(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """
    Create a user. Rejects an email that is already registered with 409
    before any hashing happens.
    """
    email, name = payload.get("email"), payload.get("name")

    try:
        if not email or not name or not payload.get("password"):
            return error(400, "missing required fields")
        if not is_email(email):
            return error(400, "invalid email")
        if email_registered(db, email):
            return error(409, "email already registered")

        result = RecordDispatcher(db).insert_record("user", payload)
        return JSONResponse(
            status_code=201,
            content={"message": "User created", "id": result["insert_id"]},
        )
    except StorageError as e:
        # lost a race with a concurrent registration of the same email
        if isinstance(e.__cause__, IntegrityError):
            return error(409, "email already registered")
        return failed("/api/register", e)
    except Exception as e:
        return failed("/api/register", e)
