# /campus_admin/db/database.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ..core.config import DATABASE_URL


def build_engine(url: str, **engine_kwargs) -> Engine:
    """
    Creates the SQLAlchemy engine for `url`. SQLite connections are shared
    across FastAPI's worker threads, so the same-thread check is turned off
    for them; other backends take the keyword arguments unchanged.
    """
    if url.startswith("sqlite"):
        connect_args = engine_kwargs.pop("connect_args", {})
        engine_kwargs["connect_args"] = {"check_same_thread": False, **connect_args}
    return create_engine(url, **engine_kwargs)


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Yields one session per request and always closes it afterwards."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
