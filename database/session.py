"""
Asynchronous database session management for FastAPI
SQLite goes through the aiosqlite driver with WAL mode enabled
"""
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy import event
from config import DATABASE_URL, DEBUG
from database.base import Base


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable WAL, foreign keys, and reasonable performance options"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL;")     # Enables write-ahead logging (better concurrency)
    cursor.execute("PRAGMA synchronous = NORMAL;")  # Faster commits, still durable
    cursor.execute("PRAGMA foreign_keys = ON;")     # Enforce FK constraints
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine, registering the SQLite pragmas when relevant"""
    is_sqlite = url.startswith("sqlite")
    new_engine = create_async_engine(
        url,
        echo=DEBUG,
        connect_args={"check_same_thread": False} if is_sqlite else {},
        **kwargs
    )
    if is_sqlite:
        event.listen(new_engine.sync_engine, "connect", _set_sqlite_pragma)
    return new_engine


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def create_tables(bind: AsyncEngine) -> None:
    """Create every table registered on Base.metadata (no-op for existing ones)"""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# --- Application engine and session factory ---
engine = build_engine(DATABASE_URL)
AsyncSessionLocal = build_sessionmaker(engine)


# --- Dependency for FastAPI endpoints ---
async def get_db():
    """
    Provides a new async database session per request.
    Closes it automatically when the request is done.
    """
    async with AsyncSessionLocal() as session:
        yield session
