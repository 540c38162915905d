# contact_api/settings.py
import os
from pathlib import Path
from urllib.parse import quote_plus

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

load_dotenv(PROJECT_ROOT / ".env")


def _database_url() -> str:
    """
    DATABASE_URL wins. Otherwise, if DB_NAME is set, build a MySQL URL from
    the DB_HOST / DB_USER / DB_PASSWORD / DB_NAME quartet. Falls back to a
    local SQLite file.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    name = os.getenv("DB_NAME")
    if name:
        user = quote_plus(os.getenv("DB_USER", ""))
        password = quote_plus(os.getenv("DB_PASSWORD", ""))
        host = os.getenv("DB_HOST", "localhost")
        auth = f"{user}:{password}@" if user else ""
        return f"mysql+pymysql://{auth}{host}/{name}"
    return "sqlite:///./contact.sqlite3"


# Storage
DATABASE_URL = _database_url()
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))

# Password hashing cost factor
BCRYPT_ROUNDS = 10
MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72

# reCAPTCHA (v2 or v3)
RECAPTCHA_SECRET_KEY = os.getenv("RECAPTCHA_SECRET_KEY", "")
RECAPTCHA_THRESHOLD = float(os.getenv("RECAPTCHA_THRESHOLD", "0.5"))
RECAPTCHA_VERIFY_URL = os.getenv(
    "RECAPTCHA_VERIFY_URL", "https://www.google.com/recaptcha/api/siteverify"
)
RECAPTCHA_TIMEOUT = float(os.getenv("RECAPTCHA_TIMEOUT", "10"))

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
