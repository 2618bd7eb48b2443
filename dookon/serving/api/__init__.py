"""
API Module
"""
from .app import create_app
from .errors import register_exception_handlers
from .middleware import RequestLoggingMiddleware

__all__ = [
    "create_app",
    "register_exception_handlers",
    "RequestLoggingMiddleware",
]
