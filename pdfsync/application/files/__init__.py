"""
Операции над файлами наблюдаемого каталога.

- Scanner - снимок каталога (fail-soft, сортировка по имени)
- FileGateway - проверка имени и выдача одного файла
"""

from .scanner import Scanner
from .gateway import FileGateway, FileHandle, resolve

__all__ = ["Scanner", "FileGateway", "FileHandle", "resolve"]
