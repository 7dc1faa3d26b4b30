import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

# -------------------------------------------------
# Импорт моделей
# -------------------------------------------------
from order_store.core.config import get_settings
from order_store.models import Base

# -------------------------------------------------
# Alembic Config
# -------------------------------------------------
config = context.config
if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# -------------------------------------------------
# Настройка подключения к БД
# -------------------------------------------------
DATABASE_URL = (
    context.get_x_argument(as_dictionary=True).get("database_url")
    or config.get_main_option("sqlalchemy.url")
    or get_settings().DATABASE_URL
)

config.set_main_option("sqlalchemy.url", DATABASE_URL)


# -------------------------------------------------
# OFFLINE режим
# -------------------------------------------------
def run_migrations_offline():
    """Запуск миграций без подключения (генерация SQL)."""
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


# -------------------------------------------------
# ONLINE режим
# -------------------------------------------------
def do_run_migrations(connection: Connection):
    context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online():
    connectable = create_async_engine(DATABASE_URL, poolclass=pool.NullPool)
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


# -------------------------------------------------
# Точка входа
# -------------------------------------------------
if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
