"""
Offset/limit pagination with PACT style ``link`` headers.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar
from urllib.parse import urlencode

from ileap.services.exceptions import OffsetOutOfRangeError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    next_offset: int | None
    limit: int

    def link_header(
        self, base_url: str, path: str, params: dict[str, list[str]] | None = None
    ) -> str | None:
        """
        ``link`` header value pointing at the next page, if there is one.

        ``params`` are repeated in the link after offset and limit.
        """
        if self.next_offset is None:
            return None
        base_url = base_url.rstrip("/")
        query = [("offset", self.next_offset), ("limit", self.limit)]
        for name, values in (params or {}).items():
            query.extend((name, value) for value in values)
        return f'<{base_url}{path}?{urlencode(query)}>; rel="next"'


def paginate(items: list[T], limit: int, offset: int) -> Page[T]:
    """
    Slice ``items`` into a page.

    Raises:
        OffsetOutOfRangeError: If ``offset`` lies past the end of ``items``
    """
    if offset > len(items):
        raise OffsetOutOfRangeError(offset, len(items))

    limit = min(limit, len(items) - offset)
    next_offset = offset + limit
    return Page(
        items=items[offset:next_offset],
        next_offset=next_offset if next_offset < len(items) else None,
        limit=limit,
    )
