"""
Доменные объекты наблюдаемого PDF-каталога.

=== НАЗНАЧЕНИЕ ===
- FileDescriptor - один распознанный файл (name, full_path, modified_at)
- DirectorySnapshot - упорядоченный по имени снимок каталога
- ListChanged / FileChanged - события push-канала
- RawEventKind - нормализованный вид уведомления файловой системы
- InvalidFileName / PdfNotFound - отказы при запросе файла

=== ИСПОЛЬЗОВАНИЕ ===

    from pdfsync.domain.files import DirectorySnapshot, FileDescriptor, ListChanged

    snapshot = DirectorySnapshot.from_descriptors([
        FileDescriptor(name="b.pdf", root="./pdfs", modified_at=1.0),
        FileDescriptor(name="a.pdf", root="./pdfs", modified_at=2.0),
    ])
    snapshot.names  # ["a.pdf", "b.pdf"]

    ListChanged(snapshot).to_message()  # {"type": "pdfs-updated", "files": [...]}
"""

from .models import DirectorySnapshot, FileDescriptor
from .events import FileChanged, ListChanged, MessageType, RawEventKind
from .errors import FileAccessError, InvalidFileName, PdfNotFound

__all__ = [
    "DirectorySnapshot",
    "FileDescriptor",
    "FileChanged",
    "ListChanged",
    "MessageType",
    "RawEventKind",
    "FileAccessError",
    "InvalidFileName",
    "PdfNotFound",
]
