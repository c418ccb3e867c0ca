import logging
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from packpal.config.settings import settings
from packpal.core.dependencies import get_gateway
from packpal.realtime.gateway import RealtimeGateway

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket(settings.ws_path)
async def realtime(websocket: WebSocket, gateway: RealtimeGateway = Depends(get_gateway)):
    """Live change feed. Clients authenticate, then subscribe to events."""
    await websocket.accept()
    connection = gateway.registry.add(websocket)
    try:
        while True:
            text = await websocket.receive_text()
            await gateway.handle_text(connection, text)
    except WebSocketDisconnect:
        pass
    except Exception as e:
        logger.error(f"Connection {connection.id} failed: {e}")
    finally:
        gateway.registry.remove(connection)
