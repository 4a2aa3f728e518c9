"""
Realtime WebSocket Route.

- WS /ws - subscribe to a question and relay analysis events

Text and binary frames are both accepted and decoded as UTF-8 JSON.
Protocol details live in services/notifier.py.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Realtime"])


def frame_text(message: Dict[str, Any]) -> Optional[str]:
    """Return the frame payload as text, or None when it is not decodable."""
    if message.get("text") is not None:
        return message["text"]

    data = message.get("bytes")
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"WebSocket message error: {e}")
        return None


@router.websocket("/ws")
async def realtime_updates(websocket: WebSocket):
    notifier = websocket.app.state.notifier
    await notifier.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))

            raw = frame_text(message)
            if raw is not None:
                await notifier.handle_text(websocket, raw)
    except WebSocketDisconnect:
        pass
    finally:
        notifier.disconnect(websocket)
