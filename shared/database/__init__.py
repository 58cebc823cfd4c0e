"""
Database Module
===============

Async PostgreSQL client (asyncpg + SQLAlchemy).

Usage:
    from shared.database import get_postgres_session

    # In FastAPI
    @router.get("/example")
    async def example(
        db: AsyncSession = Depends(get_postgres_session),
    ):
        result = await db.execute(text("SELECT 1"))
        ...
"""

from shared.database.postgres import (
    Base,
    PostgresClient,
    get_postgres_session,
)


__all__ = [
    "get_postgres_session",
    "PostgresClient",
    "Base",
]
