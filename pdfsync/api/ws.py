"""
Push-канал: WebSocket, по которому сервер рассылает изменения каталога.

Сообщения сервер → клиент:
    {"type": "pdfs-updated", "files": [...]}
    {"type": "pdf-changed", "name": "report.pdf"}

Сообщения клиента не входят в протокол: читаем их только чтобы заметить закрытие.
"""
from fastapi import APIRouter, WebSocket
from fastapi.websockets import WebSocketState

from pdfsync.logging_config import get_logger

logger = get_logger("pdfsync.api.ws")

router = APIRouter(tags=["Push"])


class WebSocketObserver:
    """Наблюдатель поверх одного WebSocket-соединения."""

    def __init__(self, websocket: WebSocket):
        self.websocket = websocket

    @property
    def is_open(self) -> bool:
        return (
            self.websocket.client_state == WebSocketState.CONNECTED
            and self.websocket.application_state == WebSocketState.CONNECTED
        )

    async def send(self, message: dict) -> None:
        await self.websocket.send_json(message)

    def __repr__(self) -> str:
        client = self.websocket.client
        return f"WebSocketObserver({client.host}:{client.port})" if client else "WebSocketObserver()"


@router.websocket("/ws")
async def push_channel(websocket: WebSocket):
    registry = websocket.app.state.registry

    await websocket.accept()
    observer = WebSocketObserver(websocket)
    registry.register(observer)
    logger.info(f"🔌 Client connected: {observer!r} (total: {len(registry)})")

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        registry.unregister(observer)
        logger.info(f"Client disconnected: {observer!r} (total: {len(registry)})")
