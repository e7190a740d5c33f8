"""
Pytest fixtures для тестирования PDF Sync
"""
import logging
import os
from pathlib import Path
from typing import Generator

import pytest

from pdfsync.settings import Settings


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Настройка логирования для тестов - показываем только ошибки"""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    formatter = logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s')
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)

    yield


def write_pdf(folder: Path, name: str, mtime: float = None, content: bytes = b"%PDF-1.4\n%%EOF\n") -> Path:
    """Создаёт файл с PDF-заголовком и при необходимости выставляет mtime"""
    path = folder / name
    path.write_bytes(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def pdf_dir(tmp_path) -> Path:
    """Пустой наблюдаемый каталог"""
    folder = tmp_path / "pdfs"
    folder.mkdir()
    return folder


@pytest.fixture
def make_pdf(pdf_dir):
    """Фабрика PDF-файлов в наблюдаемом каталоге"""
    def _make(name: str, mtime: float = None, content: bytes = b"%PDF-1.4\n%%EOF\n") -> Path:
        return write_pdf(pdf_dir, name, mtime=mtime, content=content)
    return _make


@pytest.fixture
def test_settings(pdf_dir) -> Settings:
    """Настройки, указывающие на временный каталог"""
    return Settings(PDF_DIR=str(pdf_dir), LOG_LEVEL="ERROR")


@pytest.fixture
def test_client(test_settings) -> Generator:
    """FastAPI test client без подписки на файловую систему"""
    from fastapi.testclient import TestClient
    from pdfsync.main import create_app

    app = create_app(test_settings, watch=False)
    with TestClient(app) as client:
        yield client
