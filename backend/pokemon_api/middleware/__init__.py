# Middleware package init
"""
Pokemon API — Middleware Package
=================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error log lines
    carry the same id. Responses unwind in reverse order.
"""
