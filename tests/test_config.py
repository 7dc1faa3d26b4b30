import pytest
from loguru import logger
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from order_store.core.config import Settings, _flag, get_settings
from order_store.core.logging import setup_logging
from order_store.db import make_engine


def test_get_settings_is_cached():
    assert isinstance(get_settings(), Settings)
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("true", True), (" Yes ", True), ("on", True), ("0", False), ("no", False), ("", False)],
)
def test_flag_parsing(monkeypatch, value, expected):
    monkeypatch.setenv("ORDER_STORE_TEST_FLAG", value)
    assert _flag("ORDER_STORE_TEST_FLAG") is expected


def test_flag_default(monkeypatch):
    monkeypatch.delenv("ORDER_STORE_TEST_FLAG", raising=False)
    assert _flag("ORDER_STORE_TEST_FLAG") is False
    assert _flag("ORDER_STORE_TEST_FLAG", "true") is True


def test_setup_logging_filters_by_level():
    messages = []
    try:
        setup_logging(level="warning", json=False, sink=messages.append)
        logger.info("hidden message")
        logger.warning("visible message")
    finally:
        setup_logging()

    assert any("visible message" in m for m in messages)
    assert not any("hidden message" in m for m in messages)


def test_setup_logging_json():
    messages = []
    try:
        setup_logging(level="INFO", json=True, sink=messages.append)
        logger.info("structured")
    finally:
        setup_logging()

    assert any('"message": "structured"' in m for m in messages)


@pytest.mark.asyncio
async def test_memory_engine_is_shared_and_enforces_foreign_keys():
    engine = make_engine("sqlite+aiosqlite:///:memory:")
    try:
        assert isinstance(engine.sync_engine.pool, StaticPool)
        async with engine.begin() as conn:
            await conn.execute(text("CREATE TABLE t (x INTEGER)"))
        async with engine.connect() as conn:
            assert (await conn.execute(text("SELECT count(*) FROM t"))).scalar() == 0
            assert (await conn.execute(text("PRAGMA foreign_keys"))).scalar() == 1
    finally:
        await engine.dispose()
