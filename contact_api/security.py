import bcrypt

from contact_api.settings import BCRYPT_ROUNDS


def hash_password(plain: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """One-way salted hash. A fresh salt is drawn on every call."""
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def check_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
