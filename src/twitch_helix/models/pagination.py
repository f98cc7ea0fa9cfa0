"""Paginated response envelope models."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Pagination(BaseModel):
    """Pagination block of a Helix response.

    Helix sends ``{}`` on the last page, so the cursor may be absent.
    """

    model_config = ConfigDict(frozen=True)

    cursor: str | None = None


class Page(BaseModel, Generic[T]):
    """One page of a paginated Helix endpoint: ``{"data": [...], "pagination": {...}}``."""

    model_config = ConfigDict(frozen=True)

    data: list[T] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def cursor(self) -> str | None:
        """Continuation cursor for the next page, if any."""
        return self.pagination.cursor
