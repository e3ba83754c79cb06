"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- repositories/   → Data persistence interfaces
- broadcaster.py  → Real-time fan-out to connected clients
"""

from chatroom.domain.ports.broadcaster import Broadcaster

__all__ = ["Broadcaster"]
