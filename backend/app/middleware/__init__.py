"""
Notes API - Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [GZip] → [CORS] → Route Handler

    The request ID is generated first so exception handlers and loggers
    further down the chain can read it from request_id_var.
"""
