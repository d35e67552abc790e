# Middleware package init
"""
Todo API Backend — Middleware Package
======================================

Middleware Chain (request direction):
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

    Request ID runs first so the access log line and every log record
    emitted while handling the request carry the same correlation id.
"""
