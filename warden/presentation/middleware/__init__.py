"""HTTP middleware."""

from warden.presentation.middleware.trace_middleware import TraceMiddleware

__all__ = ["TraceMiddleware"]
