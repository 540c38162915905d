from typing import Any, Dict
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from contact_api.db import get_db
from contact_api.recaptcha import verify_recaptcha
from contact_api.records import RecordDispatcher
from ._responses import error, failed

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contact")
def contact(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """
    Store a contact-form message once its reCAPTCHA token checks out.

    Body:
      {"name", "email", "message", "phone"?, "accepted_terms"?, "token"}

    Returns 201 {"message": ..., "id": <new message id>}.
    """
    token = payload.get("token")
    if not token:
        return error(400, "reCAPTCHA token missing")

    try:
        if not verify_recaptcha(token):
            return error(403, "reCAPTCHA verification failed")

        result = RecordDispatcher(db).insert_record("message", payload)
        return JSONResponse(
            status_code=201,
            content={"message": "Message sent", "id": result["insert_id"]},
        )
    except Exception as e:
        return failed("/api/contact", e)
