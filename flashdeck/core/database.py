from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from flashdeck.core.config import settings

Base = declarative_base()


def enable_sqlite_foreign_keys(engine):
    """SQLite ignores ON DELETE CASCADE unless the pragma is set per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)
enable_sqlite_foreign_keys(engine)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    async with async_session_maker() as session:
        yield session


async def init_models(bind=engine):
    # model modules register their tables on Base.metadata when imported
    import flashdeck.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def atomic(db: AsyncSession):
    """Commit everything written inside the block, or roll all of it back."""
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
