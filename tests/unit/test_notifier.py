"""
Unit tests for the WebSocket subscription notifier.

Run: pytest tests/unit/test_notifier.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import asyncio

from starlette.websockets import WebSocketState


def run(coro):
    return asyncio.run(coro)


class FakeWebSocket:
    def __init__(self, fail_send=False):
        self.accepted = False
        self.sent = []
        self.fail_send = fail_send
        self.client_state = WebSocketState.CONNECTING

    async def accept(self):
        self.accepted = True
        self.client_state = WebSocketState.CONNECTED

    async def send_json(self, data):
        if self.fail_send:
            raise RuntimeError("socket closed")
        self.sent.append(data)


def connected(notifier, question_id=None, **kwargs):
    ws = FakeWebSocket(**kwargs)
    run(notifier.connect(ws))
    if question_id is not None:
        notifier.subscribe(ws, question_id)
    return ws


class TestSubscriptions:

    def test_connect_accepts(self, notifier):
        ws = connected(notifier)
        assert ws.accepted
        assert len(notifier.subscribers) == 1

    def test_broadcast_reaches_only_matching_subscribers(self, notifier):
        a = connected(notifier, "q1")
        b = connected(notifier, "q1")
        c = connected(notifier, "q2")
        silent = connected(notifier)

        delivered = run(notifier.publish_analysis_started("q1", "vazir"))

        assert delivered == 2
        assert a.sent[0]["type"] == "analysis_started"
        assert a.sent[0]["agent"] == "vazir"
        assert b.sent == a.sent
        assert c.sent == []
        assert silent.sent == []

    def test_resubscribe_overwrites(self, notifier):
        ws = connected(notifier, "q1")
        notifier.subscribe(ws, "q2")

        run(notifier.publish_analysis_started("q1", "vazir"))
        assert ws.sent == []
        run(notifier.publish_analysis_started("q2", "vazir"))
        assert len(ws.sent) == 1

    def test_disconnect_removes(self, notifier):
        ws = connected(notifier, "q1")
        notifier.disconnect(ws)
        assert run(notifier.publish_analysis_started("q1", "vazir")) == 0
        assert notifier.subscribers == {}

    def test_none_question_reaches_nobody(self, notifier):
        connected(notifier)
        assert run(notifier.publish_analysis_started(None, "vazir")) == 0


class TestDelivery:

    def test_failed_send_drops_connection(self, notifier):
        good = connected(notifier, "q1")
        connected(notifier, "q1", fail_send=True)

        assert run(notifier.publish_conversation_progress("q1", "vazir", "hello")) == 1
        assert len(notifier.subscribers) == 1
        assert good.sent[0]["message"] == "hello"

    def test_closed_connection_is_skipped(self, notifier):
        ws = connected(notifier, "q1")
        ws.client_state = WebSocketState.DISCONNECTED

        assert run(notifier.publish_analysis_started("q1", "vazir")) == 0
        assert notifier.subscribers == {}

    def test_progress_payload_shape(self, notifier):
        ws = connected(notifier, "q1")
        run(notifier.publish_conversation_progress("q1", "vazir", "turn text", 0.42))

        payload = ws.sent[0]
        assert payload["type"] == "conversation_progress"
        assert payload["semanticDistance"] == 0.42
        assert payload["timestamp"].endswith("Z")


class TestInboundFrames:

    def test_subscribe_frame(self, notifier):
        ws = connected(notifier)
        run(notifier.handle_text(ws, '{"type": "subscribe", "questionId": "q1"}'))
        assert notifier.subscribers[id(ws)].question_id == "q1"

    def test_conversation_update_is_relayed(self, notifier):
        sender = connected(notifier)
        listener = connected(notifier, "q1")
        run(notifier.handle_text(sender, (
            '{"type": "conversation_update", "questionId": "q1", '
            '"agent": "vazir", "message": "relayed", "semanticDistance": 0.1}'
        )))
        assert listener.sent[0]["message"] == "relayed"
        assert sender.sent == []

    def test_malformed_frames_are_ignored(self, notifier):
        ws = connected(notifier, "q1")
        run(notifier.handle_text(ws, "not json"))
        run(notifier.handle_text(ws, "[1, 2]"))
        run(notifier.handle_text(ws, '{"type": "unknown"}'))
        assert ws.sent == []
        assert notifier.subscribers[id(ws)].question_id == "q1"
