"""Shared API dependencies."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.database import get_db

# Function scope: commit or rollback finishes before the response is sent
DbSession = Annotated[AsyncSession, Depends(get_db, scope="function")]


def cors_headers(method: str) -> Callable[[Response], None]:
    """Announce permissive cross-origin headers for one endpoint.

    Advisory only: nothing server-side checks the caller's origin.
    """

    def set_headers(response: Response) -> None:
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = method
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"

    return set_headers
