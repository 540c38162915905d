from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from contact_api.settings import DATABASE_URL, DB_POOL_SIZE


def make_engine(url: str = DATABASE_URL):
    """
    SQLite needs check_same_thread=False because FastAPI runs sync routes in a
    thread pool. Server backends get a fixed-size pool.
    """
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False}, future=True, echo=False)
    return create_engine(
        url,
        pool_size=DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
        future=True,
        echo=False,
    )


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
