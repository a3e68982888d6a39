"""
Request logging middleware for the PulseNet API
"""
import time
import uuid

import structlog

logger = structlog.get_logger(__name__)

SLOW_REQUEST_MS = 500


class RequestLoggingMiddleware:
    """ASGI middleware: one structured log line per HTTP request, tagged with a request id"""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = uuid.uuid4().hex[:8]
        scope.setdefault("state", {})["request_id"] = request_id
        start_time = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                message["headers"] = headers

                log = logger.warning if elapsed_ms > SLOW_REQUEST_MS else logger.info
                log(
                    "HTTP Request",
                    request_id=request_id,
                    method=scope.get("method", "UNKNOWN"),
                    path=scope.get("path", "UNKNOWN"),
                    status_code=message.get("status", 0),
                    process_time_ms=elapsed_ms,
                )

            await send(message)

        await self.app(scope, receive, send_wrapper)


def setup_logging_middleware(app):
    """Attach request logging to the application"""
    app.add_middleware(RequestLoggingMiddleware)
    return app
