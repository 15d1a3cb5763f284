# cancer_api/database/db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from cancer_api.core.config import Config

# Base untuk model ORM
Base = declarative_base()


def create_db_engine(url: str | None = None):
    """
    SQLAlchemy engine dari Config.database_url() (atau url eksplisit).
    SQLite in-memory dipakai test: satu koneksi dishare antar thread.
    """
    url = url or Config.database_url()
    kwargs = {"pool_pre_ping": True, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def create_session_factory(engine):
    # Session factory
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )
