#!/usr/bin/env python3
"""
HTTP middleware for the proposal API
Request correlation ids, access logging and security headers
"""

import time
import uuid

from fastapi import Request

from api.core.logging import bind_log_context, clear_log_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger("api.access")


class RequestContextMiddleware:
    """Tag each request with an id, bind it to the log context and log completion"""

    async def __call__(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        bind_log_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )
        started = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()


class SecurityHeadersMiddleware:
    """Add security headers to all responses"""

    async def __call__(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response
