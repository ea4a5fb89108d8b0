"""WebSocket endpoint — realtime rooms for chat-style messaging.

Learn: Each client connects to /ws. Every frame in either direction is a
JSON object {"event": <name>, "data": <payload>}.

Inbound events:
- "join-room"  data = room id string → join that room (no ack)
- "message"    data = {"roomId": ..., ...} → relay to the room

Outbound events:
- "connected"    data = {"id": <connection id>}, sent once on handshake
- "new-message"  data = the exact object received in "message"

Anything else (non-JSON, unknown event, bad payload) is dropped silently.
There is no authentication: any client may join any room.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from wideangu.realtime.hub import RoomHub, hub, new_connection_id

logger = structlog.get_logger()
router = APIRouter()

JOIN_ROOM = "join-room"
MESSAGE = "message"
NEW_MESSAGE = "new-message"
CONNECTED = "connected"


@dataclass(eq=False)
class WebSocketConnection:
    """A hub member backed by a FastAPI WebSocket. Hashed by identity."""

    websocket: WebSocket
    id: str = field(default_factory=new_connection_id)

    async def send_event(self, event: str, data: Any) -> None:
        await self.websocket.send_json({"event": event, "data": data})


def get_hub() -> RoomHub:
    return hub


def parse_frame(raw: str) -> Optional[tuple[str, Any]]:
    """Decode one inbound frame into (event, data), or None if malformed."""
    try:
        frame = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(frame, dict):
        return None
    event = frame.get("event")
    if not isinstance(event, str):
        return None
    return event, frame.get("data")


async def handle_event(
    rooms: RoomHub, conn: WebSocketConnection, event: str, data: Any
) -> None:
    """Apply one inbound event to the hub."""
    if event == JOIN_ROOM:
        if isinstance(data, str):
            await rooms.join(conn, data)
        return

    if event == MESSAGE:
        if not isinstance(data, dict):
            return
        room_id = data.get("roomId")
        if not isinstance(room_id, str):
            return
        delivered = await rooms.broadcast(room_id, NEW_MESSAGE, data)
        logger.debug(
            "realtime.message_relayed",
            connection_id=conn.id,
            room=room_id,
            delivered=delivered,
        )
        return

    logger.debug("realtime.unknown_event", connection_id=conn.id, event_name=event)


@router.websocket("/ws")
async def realtime_websocket(
    websocket: WebSocket,
    rooms: RoomHub = Depends(get_hub),
):
    """WebSocket endpoint for room-based message relay.

    Learn: One long-lived loop per client. The connection is registered
    with the hub only through join-room; on any exit path the finally
    block removes it from every room it joined.
    """
    await websocket.accept()
    conn = WebSocketConnection(websocket)
    logger.info("realtime.connected", connection_id=conn.id)

    try:
        await conn.send_event(CONNECTED, {"id": conn.id})
        while True:
            raw = await websocket.receive_text()
            parsed = parse_frame(raw)
            if parsed is None:
                logger.debug("realtime.malformed_frame", connection_id=conn.id)
                continue
            event, data = parsed
            await handle_event(rooms, conn, event, data)
    except WebSocketDisconnect:
        pass
    finally:
        await rooms.disconnect(conn)
        logger.info("realtime.disconnected", connection_id=conn.id)
