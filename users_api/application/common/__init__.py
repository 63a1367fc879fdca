"""
Application common module.

Contains building blocks shared by use cases:
- Pagination: normalized page request
- PaginatedResult: page items plus total count snapshot
- PageLinks: previous/next links and page metadata
"""

from .pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageLinks,
    PaginatedResult,
    Pagination,
    build_page_links,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PageLinks",
    "PaginatedResult",
    "Pagination",
    "build_page_links",
]
