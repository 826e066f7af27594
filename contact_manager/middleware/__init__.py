# Middleware package init
"""
Contact Manager Backend — Middleware Package
=============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assign or propagate the correlation ID
    2. Logging: one access line per request, tagged with that ID
    3. GZip: compress larger JSON listings
    4. CORS: admit the configured browser origins (handles preflight)

    Responses unwind in reverse, so the X-Request-ID header and the
    logged status/duration are both available on the way out.
"""
