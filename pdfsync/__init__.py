"""
PDF Sync - сервис синхронизации просмотрщиков с каталогом PDF.

=== НАЗНАЧЕНИЕ ===
1. Держит снимок каталога (*.pdf, по имени)
2. Подписывается на уведомления файловой системы (watchdog)
3. На каждое изменение PDF рассылает по WebSocket свежий список и имя файла
4. Отдаёт содержимое одного PDF с защитой от path traversal

=== REST API ===
- GET /api/pdfs - список файлов
- GET /api/pdf/{name} - содержимое файла
- WS  /ws - push-канал
- GET /health - проверка здоровья

=== ЗАПУСК ===
    python -m pdfsync ./pdfs --port 3000
"""

__version__ = "1.0.0"
