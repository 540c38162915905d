from sqlalchemy import Column, String, Integer, Text, DateTime, func
from .db import Base

# -----------------------------
# ORM models (tables) for the contact backend
# -----------------------------
class Message(Base):
    __tablename__ = "messages"
    # A contact-form submission
    id             = Column(Integer, primary_key=True, autoincrement=True)
    name           = Column(String(255), nullable=False)
    email          = Column(String(255), nullable=False)
    phone          = Column(String(50))                        # optional
    message        = Column(Text, nullable=False)
    terms_accepted = Column(Integer, nullable=False, default=0, server_default="0")  # 0/1
    created_at     = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<Message(id={self.id}, email={self.email})>"


class User(Base):
    __tablename__ = "users"
    # A registered user; password holds the bcrypt hash, never the plaintext
    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(String(255), nullable=False)
    email      = Column(String(255), unique=True, index=True, nullable=False)
    password   = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
