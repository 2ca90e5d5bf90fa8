"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from chit_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_currency_locale() -> str:
    """Locale used for currency display strings"""
    return settings.currency_locale
