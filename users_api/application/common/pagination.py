"""
Pagination types for queries.

Page requests are never rejected: out-of-range page numbers and sizes are
clamped by ``Pagination.normalized`` before reaching the repository.

Example:
    pagination = Pagination.normalized(page_number, page_size)
    items, total = repository.get_page(pagination)
    result = PaginatedResult(items=items, total=total, pagination=pagination)
    links = build_page_links(pagination, total, link_for)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
# Maximum allowed page size
MAX_PAGE_SIZE = 20

# Builds a link to the page with the given (page_number, page_size)
LinkFactory = Callable[[int, int], str]


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @classmethod
    def normalized(cls, page: int, page_size: int) -> "Pagination":
        """Clamp raw request values into a valid page request."""
        return cls(page=max(1, page), page_size=min(max(1, page_size), MAX_PAGE_SIZE))

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: List of items for the current page
        total: Total number of items across all pages, counted at query time
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def page_size(self) -> int:
        """Number of items per page."""
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        return total_pages(self.total, self.pagination.page_size)


@dataclass(frozen=True)
class PageLinks:
    """
    Navigation metadata for one page of a collection.

    The next link is always present, even past the last page, so clients
    always receive a well-formed link that may resolve to an empty page.
    """

    previous_page_link: str | None
    next_page_link: str
    page_size: int
    current_page: int
    total_count: int
    total_pages: int


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed to hold ``total_count`` items."""
    if total_count <= 0:
        return 0
    return (total_count + page_size - 1) // page_size


def build_page_links(pagination: Pagination, total_count: int, link_for: LinkFactory) -> PageLinks:
    """
    Compute previous/next links and page metadata.

    Args:
        pagination: Normalized page request
        total_count: Total number of items in the collection
        link_for: Builds a link from a page number and page size

    Returns:
        PageLinks for the requested page
    """
    previous_link = None
    if pagination.page > 1:
        previous_link = link_for(pagination.page - 1, pagination.page_size)

    return PageLinks(
        previous_page_link=previous_link,
        next_page_link=link_for(pagination.page + 1, pagination.page_size),
        page_size=pagination.page_size,
        current_page=pagination.page,
        total_count=total_count,
        total_pages=total_pages(total_count, pagination.page_size),
    )
