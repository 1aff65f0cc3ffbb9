### Description ###
# OrderDesk - Local-first Order Intake
# - Local Database Setup -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Local Database Setup

SQLite database backing the key-value store that holds every tenant's
models and orders, plus the globally selected client name.

Uses synchronous SQLAlchemy (no greenlet dependency).
"""

import os
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Database file location
DATA_DIR = Path(__file__).parent.parent / "data"
DATABASE_PATH = DATA_DIR / "orderdesk.db"
DATABASE_URL = os.environ.get("ORDERDESK_DATABASE_URL", f"sqlite:///{DATABASE_PATH}")

# Base class for models
Base = declarative_base()


def create_db_engine(url: str = DATABASE_URL) -> Engine:
    """Create a synchronous engine, making sure the SQLite folder exists"""
    if url.startswith("sqlite:///") and url != "sqlite:///:memory:":
        Path(url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(
        url,
        connect_args={"check_same_thread": False},  # Allow multi-threaded access
        echo=False,  # Set True for SQL debugging
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to engine"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """
    Initialize the database - create all tables.

    Call this on application startup.
    """
    # Import models to register them with Base
    from orderdesk.models import storage_entry  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_db(engine: Engine) -> None:
    """Drop all tables (use with caution!)"""
    Base.metadata.drop_all(bind=engine)
