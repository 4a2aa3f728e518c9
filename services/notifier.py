"""
Realtime notifier for dashboard WebSocket clients.

Each open connection carries at most one subscription (a question id).
Subscribing again overwrites the previous one. Events are pushed
fire-and-forget to every connection subscribed to the event's question:
no acknowledgement, no replay for late subscribers, no subscriber limit.

Inbound frames (JSON):
    {"type": "subscribe", "questionId"}
    {"type": "start_analysis", "questionId", "agent"}
    {"type": "conversation_update", "questionId", "agent", "message", "semanticDistance"}

Outbound frames:
    {"type": "analysis_started", "agent", "timestamp"}
    {"type": "conversation_progress", "agent", "message", "semanticDistance", "timestamp"}
"""

import json
import logging
from typing import Any, Dict, Optional

from starlette.websockets import WebSocket, WebSocketState

from models.common import iso_timestamp

logger = logging.getLogger(__name__)


class Subscriber:
    """One open connection and the question it listens to."""

    __slots__ = ("websocket", "question_id")

    def __init__(self, websocket: WebSocket):
        self.websocket = websocket
        self.question_id: Optional[str] = None


class ConnectionNotifier:
    """Tracks WebSocket subscriptions and fans events out to them."""

    def __init__(self):
        # Keyed by id(websocket): starlette WebSocket objects are unhashable
        self.subscribers: Dict[int, Subscriber] = {}

    # ============ CONNECTION LIFECYCLE ============

    async def connect(self, websocket: WebSocket) -> Subscriber:
        """Accept a connection and register it with no subscription."""
        await websocket.accept()
        subscriber = Subscriber(websocket)
        self.subscribers[id(websocket)] = subscriber
        logger.info("WebSocket client connected")
        return subscriber

    def disconnect(self, websocket: WebSocket) -> None:
        if self.subscribers.pop(id(websocket), None) is not None:
            logger.info("WebSocket client disconnected")

    def subscribe(self, websocket: WebSocket, question_id: Optional[str]) -> None:
        """Record the connection's subscription, replacing any earlier one."""
        subscriber = self.subscribers.get(id(websocket))
        if subscriber is None:
            return
        subscriber.question_id = question_id
        logger.debug(f"WebSocket client subscribed to question {question_id}")

    # ============ INBOUND ============

    async def handle_text(self, websocket: WebSocket, raw: str) -> None:
        """Decode one inbound frame; malformed JSON is logged and ignored."""
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"WebSocket message error: {e}")
            return

        if not isinstance(data, dict):
            logger.error("WebSocket message error: expected a JSON object")
            return

        await self.handle_message(websocket, data)

    async def handle_message(self, websocket: WebSocket, data: Dict[str, Any]) -> None:
        """Dispatch one decoded inbound event."""
        message_type = data.get("type")

        if message_type == "subscribe":
            self.subscribe(websocket, data.get("questionId"))

        elif message_type == "start_analysis":
            await self.publish_analysis_started(data.get("questionId"), data.get("agent"))

        elif message_type == "conversation_update":
            await self.publish_conversation_progress(
                data.get("questionId"),
                data.get("agent"),
                data.get("message"),
                data.get("semanticDistance"),
            )

        else:
            logger.debug(f"Ignoring WebSocket message of type {message_type!r}")

    # ============ OUTBOUND ============

    async def publish_analysis_started(self, question_id: Optional[str], agent: Optional[str]) -> int:
        return await self.broadcast(question_id, {
            "type": "analysis_started",
            "agent": agent,
            "timestamp": iso_timestamp(),
        })

    async def publish_conversation_progress(
        self,
        question_id: Optional[str],
        agent: Optional[str],
        message: Any,
        semantic_distance: Optional[float] = None,
    ) -> int:
        return await self.broadcast(question_id, {
            "type": "conversation_progress",
            "agent": agent,
            "message": message,
            "semanticDistance": semantic_distance,
            "timestamp": iso_timestamp(),
        })

    async def broadcast(self, question_id: Optional[str], payload: Dict[str, Any]) -> int:
        """
        Send payload to every open connection subscribed to question_id.

        Connections that never subscribed never match. A connection whose
        send fails is dropped.

        Returns:
            Number of connections the payload was delivered to
        """
        if question_id is None:
            return 0

        delivered = 0
        for key, subscriber in list(self.subscribers.items()):
            if subscriber.question_id != question_id:
                continue

            websocket = subscriber.websocket
            if websocket.client_state != WebSocketState.CONNECTED:
                self.subscribers.pop(key, None)
                continue

            try:
                await websocket.send_json(payload)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping WebSocket client after failed send: {e}")
                self.subscribers.pop(key, None)

        return delivered
