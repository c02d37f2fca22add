"""
Database module for CAdministrator.
"""
from taxiadmin.db.database import (
    Base,
    build_engine,
    build_session_maker,
    get_async_session,
    init_db,
)

__all__ = [
    "Base",
    "build_engine",
    "build_session_maker",
    "get_async_session",
    "init_db",
]
