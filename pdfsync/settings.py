"""
Настройки PDF Sync Service

Значения читаются из ENV переменных (или .env), у каждого есть разумный дефолт.
Каталог наблюдения дополнительно может прийти аргументом командной строки -
он имеет приоритет над PDF_DIR (см. resolve_watched_dir).
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки сервиса синхронизации PDF-каталога"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Application
    APP_NAME: str = "PDF Viewer"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"  # "development" или "production"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

    # === WATCHED DIRECTORY ===
    PDF_DIR: str = "./pdfs"  # Каталог наблюдения (перекрывается аргументом CLI)
    PDF_EXTENSION: str = ".pdf"  # Единственное отслеживаемое расширение (регистр важен)
    PDF_MEDIA_TYPE: str = "application/pdf"
    WATCH_RECURSIVE: bool = False  # Подписываться ли на события вложенных папок

    # === HTTP ===
    HOST: str = "0.0.0.0"
    PORT: int = 3000


def get_settings() -> Settings:
    """Получить настройки из ENV."""
    return Settings()


def resolve_watched_dir(cli_dir: Optional[str] = None, app_settings: Optional[Settings] = None) -> Path:
    """
    Определяет каталог наблюдения и создаёт его при отсутствии.

    Приоритет: аргумент командной строки → PDF_DIR из окружения → "./pdfs".

    Args:
        cli_dir: Путь из аргументов командной строки (может быть None)
        app_settings: Настройки (по умолчанию - глобальный singleton)

    Returns:
        Path: Путь к каталогу в том виде, в котором он задан
    """
    app_settings = app_settings or settings
    watched_dir = Path(cli_dir or app_settings.PDF_DIR)
    watched_dir.mkdir(parents=True, exist_ok=True)
    return watched_dir


# Синглтон для обратной совместимости
settings = get_settings()
