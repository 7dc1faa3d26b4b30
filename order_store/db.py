# order_store/db.py

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import order_store.models  # noqa: F401  регистрирует все таблицы в Base.metadata
from order_store.core.config import get_settings
from order_store.models.base import Base

settings = get_settings()


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    # SQLite не проверяет внешние ключи без этой прагмы
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    options = {"echo": echo}
    parsed = make_url(url)
    is_sqlite = parsed.get_backend_name() == "sqlite"
    if is_sqlite and parsed.database in (None, "", ":memory:"):
        # одна общая in-memory база на все сессии
        options["poolclass"] = StaticPool

    engine = create_async_engine(url, **options)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,  # сущности собираются из строк уже после commit
        class_=AsyncSession,
        autoflush=False,
    )


engine = make_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

AsyncSessionLocal = make_session_factory(engine)


async def create_schema(bind: AsyncEngine | None = None) -> None:
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(bind: AsyncEngine | None = None) -> None:
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
