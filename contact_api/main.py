from contextlib import asynccontextmanager
import logging, time
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from . import models  # noqa: F401  registers tables on Base.metadata
from .db import engine, Base
from .routers.contact import router as contact_router
from .routers.users import router as users_router
from .routers.insert import router as insert_router
from contact_api.settings import CORS_ORIGINS, LOG_LEVEL
from contact_api.setup_logging import setup_logging

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(LOG_LEVEL) # Init Logging


def check_db(eng=engine) -> str | None:
    """
    Create missing tables and ping the database.
    Returns None when healthy, otherwise the error text.
    """
    try:
        Base.metadata.create_all(bind=eng)
        with eng.connect() as conn:
            conn.execute(text("SELECT 1"))
        log.info("connected to database (ping ok)")
        return None
    except Exception as e:
        # Keep serving; /health reports the failure
        log.error("initial database connection failed: %s", e)
        return str(e)


# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs once at startup: make sure the tables exist and that the
    database answers. A failure is recorded, not fatal.
    """
    app.state.db_error = check_db()
    app.state.db_ready = app.state.db_error is None
    yield

# Create the FastAPI app instance
app = FastAPI(title="Contact API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/health")
def health():
    """
    Quick health probe.
    Returns:
      - status: static "ok" if the app is alive
      - timestamp: server time in ms since the epoch
      - db_ready / db_error: outcome of the startup database check
    """
    return {
        "status": "ok",
        "timestamp": int(time.time() * 1000),
        "db_ready": bool(getattr(app.state, "db_ready", False)),
        "db_error": getattr(app.state, "db_error", None),
    }

# Register API routers:
app.include_router(contact_router)
app.include_router(users_router)
app.include_router(insert_router)
