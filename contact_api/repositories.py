import logging
from sqlalchemy import select
from sqlalchemy.orm import Session
from contact_api.models import User

log = logging.getLogger(__name__)

def email_registered(db: Session, email: str) -> bool:
    """True if a user row already owns this email."""
    found = db.execute(select(User.id).where(User.email == email)).first() is not None
    if found:
        log.info("email already registered: %s", email)
    return found
