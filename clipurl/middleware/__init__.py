from clipurl.middleware.logging import RequestLoggingMiddleware, request_id_var

__all__ = ["RequestLoggingMiddleware", "request_id_var"]
