from .logging_middleware import RequestLoggingMiddleware, setup_logging_middleware

__all__ = ["RequestLoggingMiddleware", "setup_logging_middleware"]
