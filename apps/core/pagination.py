"""
Zero-based pagination and sort parsing for catalog queries.

Clients page with ``page`` (zero-based) and ``size`` and sort with
``sort=field,direction`` where direction is ascending unless it is ``desc``.
Sort fields use the wire (camelCase) names and are mapped to model fields
through a per-endpoint whitelist.
"""
from dataclasses import dataclass
from math import ceil
from typing import Mapping, Optional

from django.conf import settings
from django.db.models import QuerySet

from .exceptions import InvalidPageError, InvalidSortError


@dataclass
class PageResult:
    """One page of a query result plus the totals needed to page through it."""

    items: list
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total_elements / self.size) if self.size else 0

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return self.number >= self.total_pages - 1

    def to_response(self, serializer_class, context: Optional[dict] = None) -> dict:
        """Serialize items and attach paging metadata."""
        return {
            'content': serializer_class(self.items, many=True, context=context or {}).data,
            'totalElements': self.total_elements,
            'totalPages': self.total_pages,
            'number': self.number,
            'size': self.size,
            'first': self.is_first,
            'last': self.is_last,
        }


def parse_sort(sort: Optional[str], *, allowed: Mapping[str, str], default: str) -> list[str]:
    """
    Translate ``field,direction`` into ``order_by`` arguments.

    ``id`` is appended as a tie-breaker so pages are stable.

    Args:
        sort: Raw sort parameter, e.g. 'price,desc'. Blank uses default.
        allowed: Wire field name -> model field name
        default: Sort used when sort is blank

    Returns:
        List of order_by expressions, e.g. ['-price', '-id']

    Raises:
        InvalidSortError: If field is not in allowed
    """
    if not sort or not sort.strip():
        sort = default

    parts = [part.strip() for part in sort.split(',')]
    field = parts[0]
    descending = len(parts) > 1 and parts[1].lower() == 'desc'

    if field not in allowed:
        raise InvalidSortError(
            f"Cannot sort by '{field}'. Valid options: {', '.join(sorted(allowed))}"
        )

    prefix = '-' if descending else ''
    model_field = allowed[field]
    ordering = [f'{prefix}{model_field}']
    if model_field != 'id':
        ordering.append(f'{prefix}id')
    return ordering


def paginate(queryset: QuerySet, *, page: int, size: int) -> PageResult:
    """
    Slice one zero-based page out of an ordered queryset.

    Pages past the end are empty rather than an error.

    Raises:
        InvalidPageError: If page is negative or size outside 1..MAX_PAGE_SIZE
    """
    if page < 0:
        raise InvalidPageError("Page index must not be negative")
    if not (1 <= size <= settings.MAX_PAGE_SIZE):
        raise InvalidPageError(f"Page size must be between 1 and {settings.MAX_PAGE_SIZE}")

    total = queryset.count()
    offset = page * size
    items = list(queryset[offset:offset + size]) if offset < total else []

    return PageResult(items=items, number=page, size=size, total_elements=total)
