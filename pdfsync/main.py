"""
PDF Sync Service - REST API + WebSocket для синхронизации PDF-каталога.
"""
import asyncio
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdfsync.api import router as api_router
from pdfsync.application.files import FileGateway, Scanner
from pdfsync.application.sync import SubscriberRegistry, SyncEngine
from pdfsync.infrastructure import DirectoryWatcher
from pdfsync.logging_config import get_logger, setup_logging
from pdfsync.settings import Settings, resolve_watched_dir, settings


logger = get_logger("pdfsync")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle: запуск watcher'а и движка, остановка при shutdown."""
    state = app.state
    app_settings: Settings = state.settings

    setup_logging(app_settings.LOG_LEVEL, app_settings.ENVIRONMENT)
    logger.info(f"🚀 {app_settings.APP_NAME} v{app_settings.VERSION} starting...")

    engine: SyncEngine = state.engine
    engine.start()
    logger.info(f"📂 Watching PDF directory: {state.watched_dir} ({len(engine.current_snapshot)} files)")

    if state.watcher is not None:
        state.watcher.start(engine.threadsafe_callback(asyncio.get_running_loop()))

    yield

    logger.info("👋 PDF Sync shutting down...")
    if state.watcher is not None:
        state.watcher.stop()
    await engine.stop()


def create_app(
    app_settings: Optional[Settings] = None,
    watched_dir: Optional[Union[str, Path]] = None,
    watch: bool = True,
) -> FastAPI:
    """
    Собирает приложение.

    Args:
        app_settings: Настройки (по умолчанию - глобальный singleton)
        watched_dir: Каталог из аргумента командной строки, перекрывает PDF_DIR
        watch: Подписываться ли на уведомления файловой системы

    Returns:
        FastAPI: Приложение; компоненты лежат в app.state
    """
    app_settings = app_settings or settings
    root = resolve_watched_dir(str(watched_dir) if watched_dir else None, app_settings)

    scanner = Scanner(root, extension=app_settings.PDF_EXTENSION)
    registry = SubscriberRegistry()

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.VERSION,
        description="Синхронизация просмотрщиков с каталогом PDF в реальном времени",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.watched_dir = root
    app.state.scanner = scanner
    app.state.registry = registry
    app.state.engine = SyncEngine(scanner, registry)
    app.state.gateway = FileGateway(
        root,
        extension=app_settings.PDF_EXTENSION,
        media_type=app_settings.PDF_MEDIA_TYPE,
    )
    app.state.watcher = DirectoryWatcher(root, recursive=app_settings.WATCH_RECURSIVE) if watch else None

    # CORS для фронтенда
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
