"""
Database setup

One engine per process, built from DATABASE_URL (Postgres in production,
SQLite for local runs and tests). Routes take a session from get_session;
scripts use the get_db context manager.
"""

import os
from contextlib import contextmanager
from typing import Iterator

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL env var not set")


class Base(DeclarativeBase):
    pass


def _connect_args(url: str) -> dict:
    # FastAPI serves sync routes from a threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, future=True, pool_pre_ping=True, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@contextmanager
def get_db() -> Iterator[Session]:
    """Session that commits on success, rolls back on error and always closes."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_session() -> Iterator[Session]:
    """FastAPI dependency wrapping get_db."""
    with get_db() as db:
        yield db
