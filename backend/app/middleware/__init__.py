"""
BeerBarBrewery Backend - Middleware Package
=============================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID: generates or propagates X-Request-ID and stores it in a
      ContextVar for log lines and error handlers
    - Logging: one access-log line per request with status and duration
"""
