"""
Настройка логирования для PDF Sync Service.
"""
import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from pdfsync.settings import settings


_logging_configured = False


def setup_logging(level: Optional[str] = None, environment: Optional[str] = None, force: bool = False) -> None:
    """Настраивает логирование для всего приложения"""
    global _logging_configured
    if _logging_configured and not force:
        return

    level = (level or settings.LOG_LEVEL).upper()
    environment = environment or settings.ENVIRONMENT

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    # Очищаем существующие handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level, logging.INFO))

    if environment == "production":
        # JSON формат для production
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            timestamp=True
        )
    else:
        # Читаемый формат для development
        formatter = logging.Formatter(
            settings.LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Тишина для шумных библиотек
    logging.getLogger("watchdog").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Получить logger."""
    return logging.getLogger(name)
