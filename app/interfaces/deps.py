"""
API Dependencies.
"""

from fastapi import Request

from app.infrastructure.store import Store


def get_store(request: Request) -> Store:
    """The process-wide entity store built at startup."""
    return request.app.state.store
