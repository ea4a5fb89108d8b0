"""Wide Angu — media professionals marketplace API.

A prototype backend that serves the professional catalog, accepts
booking / registration / instant-capture requests without storing them,
and relays chat messages between clients in realtime rooms.
"""

__version__ = "0.1.0"
