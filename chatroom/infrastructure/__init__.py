"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Store implementations (Prisma and in-memory repositories)
- realtime/: WebSocket broadcaster
"""
