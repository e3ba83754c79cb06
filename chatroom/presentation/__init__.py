"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers (REST and WebSocket)
- schemas.py: request bodies, validated before any handler runs
- errors.py: domain error → HTTP status mapping
"""
