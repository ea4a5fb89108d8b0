"""Real-time infrastructure — room hub + WebSocket.

Learn: Messages flow through one channel:
1. Client → WebSocket "message" event → RoomHub.broadcast
2. RoomHub → every WebSocket joined to the target room ("new-message")

Rooms live in process memory only. They appear on the first join and
disappear when their last member disconnects.
"""
