from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parents[1]


def _config(db_path):
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    config.attributes["configure_logger"] = False
    return config


def _tables(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_upgrade_creates_schema(tmp_path):
    db_path = tmp_path / "orders.db"

    command.upgrade(_config(db_path), "head")

    assert {"customers", "products", "orders", "order_items"} <= _tables(db_path)


def test_downgrade_drops_schema(tmp_path):
    db_path = tmp_path / "orders.db"
    config = _config(db_path)

    command.upgrade(config, "head")
    command.downgrade(config, "base")

    assert not {"customers", "products", "orders", "order_items"} & _tables(db_path)
