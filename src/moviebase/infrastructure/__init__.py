"""Infrastructure layer - External dependencies and implementations.

This layer contains:
- Database adapters (SQLAlchemy)
- API routes (FastAPI)
- Authentication (JWT)

The infrastructure layer implements the contracts defined in the
domain layer.
"""

from moviebase.infrastructure.persistence.database import (
    Base,
    DatabaseManager,
    close_database,
    get_db_manager,
    get_db_session,
    init_database,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
    "get_db_session",
    "init_database",
    "close_database",
]
