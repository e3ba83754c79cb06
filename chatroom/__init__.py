"""
chatroom - real-time chat and user account backend.

Layers:
- domain/          → Entities, value objects, ports, exceptions (stdlib only)
- application/     → Command/query handlers and DTOs
- infrastructure/  → Prisma and in-memory stores, WebSocket broadcaster
- presentation/    → FastAPI routers
- setup/ioc/       → Dishka providers
- config/          → Settings and logging
"""
