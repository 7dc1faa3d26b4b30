import sys

from loguru import logger

from order_store.core.config import get_settings


def setup_logging(level: str | None = None, json: bool | None = None, sink=None):
    settings = get_settings()
    level = (level or settings.LOG_LEVEL).upper()
    serialize = settings.LOG_JSON if json is None else json

    logger.remove()
    logger.add(
        sink or sys.stderr,
        level=level,
        serialize=serialize,
        backtrace=False,
        diagnose=False,
    )
    logger.debug(
        "Logging configured. level='{level}', json={json}",
        level=level,
        json=serialize,
    )
    return logger
