"""SQLAlchemy persistence for payroll entities."""

from payroll_kernel.db.base import Base, TrackedBase
from payroll_kernel.db.engine import (
    check_connection,
    create_tables,
    drop_tables,
    get_database_info,
    get_engine,
    get_session,
    init_engine_from_url,
    reset_engine,
    session_scope,
)

__all__ = [
    "Base",
    "TrackedBase",
    "check_connection",
    "create_tables",
    "drop_tables",
    "get_database_info",
    "get_engine",
    "get_session",
    "init_engine_from_url",
    "reset_engine",
    "session_scope",
]
