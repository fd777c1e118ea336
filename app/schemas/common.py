from pydantic import BaseModel, Field
from typing import Generic, List, TypeVar
import math

T = TypeVar("T")


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit) if limit else 0)


class Page(BaseModel, Generic[T]):
    """Offset-paginated slice of a result list."""
    data: List[T] = Field(default_factory=list)
    pagination: Pagination

    @classmethod
    def slice(cls, items: List[T], page: int, limit: int) -> "Page[T]":
        """Page over a fully computed list."""
        start = (page - 1) * limit
        return cls.of(items[start:start + limit], page, limit, len(items))

    @classmethod
    def of(cls, data: List[T], page: int, limit: int, total: int) -> "Page[T]":
        """Wrap one page already fetched from the database."""
        return cls(data=data, pagination=Pagination.build(page, limit, total))
