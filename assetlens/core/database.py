"""Async SQLAlchemy engine, session factory and database client."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from assetlens.core.config import settings
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


engine = create_async_engine(
    settings.database_url,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    echo=settings.database_echo,
    future=True,
)

async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class DatabaseClient:
    """Database client with connection and schema management."""

    def __init__(self, engine: AsyncEngine):
        """Initialize database client.

        Args:
            engine: SQLAlchemy async engine
        """
        self.engine = engine

    async def connect(self) -> bool:
        """Test database connection."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.commit()

            LOGGER.info("Database connection successful")
            return True

        except Exception:
            LOGGER.error("Database connection failed", exc_info=True)
            raise

    async def disconnect(self) -> None:
        """Close database connection."""
        try:
            await self.engine.dispose()
            LOGGER.info("Database connection closed")
        except Exception as e:
            LOGGER.error("Error closing database connection", exc_info=True, extra={"error": str(e)})

    async def create_tables(self) -> None:
        """Create tables that don't exist yet without dropping existing ones."""
        # Models must be registered on Base.metadata before create_all
        from assetlens.database import models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            LOGGER.info("Database tables created/verified successfully")

        except Exception as e:
            LOGGER.error("Failed to create database tables", exc_info=True, extra={"error": str(e)})
            raise

    async def health_check(self) -> dict:
        """Check database health."""
        try:
            async with self.engine.connect() as conn:
                val = await conn.scalar(text("SELECT 1"))

            return {
                "status": "healthy",
                "connected": True,
                "latency_test": "passed" if val == 1 else "failed",
            }

        except Exception as e:
            LOGGER.error("Database health check failed", extra={"error": str(e)})
            return {
                "status": "unhealthy",
                "connected": False,
                "error": str(e),
            }


db_client = DatabaseClient(engine)


async def init_database(create_tables: bool = True) -> None:
    """Initialize database connection and optionally create tables.

    Args:
        create_tables: Whether to create missing tables on startup
    """
    try:
        LOGGER.info("Initializing database connection...")
        await db_client.connect()

        if create_tables:
            await db_client.create_tables()

        LOGGER.info("Database initialization completed")

    except Exception as e:
        LOGGER.error("Database initialization failed", exc_info=True, extra={"error": str(e)})
        raise


async def close_database() -> None:
    """Close database connection."""
    try:
        LOGGER.info("Closing database connection...")
        await db_client.disconnect()
    except Exception as e:
        LOGGER.error("Error closing database", exc_info=True, extra={"error": str(e)})
