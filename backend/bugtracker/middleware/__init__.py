# Middleware package init
"""
Bug Tracker Backend — Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first: every later log line and error body can carry it
    2. Logging: records status and duration of the finished response
    3. CORS: FastAPI's CORSMiddleware (handles the UI's preflight requests)
"""
