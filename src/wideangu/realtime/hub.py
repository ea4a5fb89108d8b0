"""Room hub — in-memory room membership and message fan-out.

Learn: The hub keeps two indexes:
- room id → set of connections (who receives a broadcast)
- connection → set of room ids (what to clean up on disconnect)

Membership changes never await, so the event loop alone serializes
them. Broadcasts do await each send, so every room gets its own
asyncio.Lock: two broadcasts to the same room can't interleave and every
member receives messages in the order they reached the hub. Rooms don't
share a lock, so a stalled peer only holds up its own room, and each
send is bounded by send_timeout.

The sender is NOT excluded from its own broadcast.
"""

import asyncio
import uuid
from typing import Any, Protocol

import structlog

logger = structlog.get_logger()

# Seconds a single member may take to accept one event
DEFAULT_SEND_TIMEOUT = 5.0


class Connection(Protocol):
    """Anything the hub can deliver events to."""

    id: str

    async def send_event(self, event: str, data: Any) -> None: ...


def new_connection_id() -> str:
    """Opaque identifier assigned to each connection on handshake."""
    return uuid.uuid4().hex


class RoomHub:
    """Room membership table plus broadcast."""

    def __init__(self, send_timeout: float = DEFAULT_SEND_TIMEOUT) -> None:
        self.send_timeout = send_timeout
        self._rooms: dict[str, set[Connection]] = {}
        self._memberships: dict[Connection, set[str]] = {}
        self._room_locks: dict[str, asyncio.Lock] = {}

    async def join(self, conn: Connection, room_id: str) -> None:
        """Add conn to room_id, creating the room on demand. Idempotent."""
        self._rooms.setdefault(room_id, set()).add(conn)
        self._room_locks.setdefault(room_id, asyncio.Lock())
        self._memberships.setdefault(conn, set()).add(room_id)
        logger.debug("realtime.joined_room", connection_id=conn.id, room=room_id)

    async def broadcast(self, room_id: str, event: str, data: Any) -> int:
        """Send event to every member of room_id. Returns delivery count.

        An unknown or empty room is a silent no-op. A member whose send
        fails or exceeds send_timeout is skipped; its own handler will
        remove it via disconnect().
        """
        lock = self._room_locks.get(room_id)
        if lock is None:
            return 0

        delivered = 0
        async with lock:
            for conn in list(self._rooms.get(room_id, ())):
                try:
                    await asyncio.wait_for(
                        conn.send_event(event, data), timeout=self.send_timeout
                    )
                except Exception as e:
                    logger.warning(
                        "realtime.send_failed",
                        connection_id=conn.id,
                        room=room_id,
                        error=repr(e),
                    )
                    continue
                delivered += 1
        return delivered

    async def disconnect(self, conn: Connection) -> None:
        """Remove conn from every room it joined. Peers are not notified."""
        for room_id in self._memberships.pop(conn, set()):
            members = self._rooms.get(room_id)
            if members is None:
                continue
            members.discard(conn)
            if not members:
                del self._rooms[room_id]
                del self._room_locks[room_id]

    # ─── Introspection (logging / tests) ────────────────

    def room_count(self) -> int:
        return len(self._rooms)

    def rooms_of(self, conn: Connection) -> frozenset[str]:
        return frozenset(self._memberships.get(conn, ()))

    def member_count(self, room_id: str) -> int:
        return len(self._rooms.get(room_id, ()))


# Process-wide hub shared by every WebSocket connection
hub = RoomHub()
