"""FastAPI dependency injection helpers."""

from fastapi import Request

from ridewise.context import AppContext


def get_context(request: Request) -> AppContext:
    """Return the application context built by ``create_app``."""
    return request.app.state.context
