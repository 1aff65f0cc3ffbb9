"""
Middleware Package

- logging: request logging with request IDs
"""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
