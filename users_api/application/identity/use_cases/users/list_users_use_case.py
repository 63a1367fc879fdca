"""Use case for listing users page by page."""

from users_api.application.common.pagination import (
    LinkFactory,
    PageLinks,
    PaginatedResult,
    Pagination,
    build_page_links,
)
from users_api.application.identity.protocols.user_repository import UserRepositoryProtocol
from users_api.domain.identity.entities.user import User


class ListUsersUseCase:
    """Use case for paged listing of users. Never fails on paging input."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.user_repository = user_repository

    def list_users(
        self, page_number: int, page_size: int, link_for: LinkFactory
    ) -> tuple[PaginatedResult[User], PageLinks]:
        """
        Get one page of users with its navigation links.

        Args:
            page_number: Requested page, clamped to at least 1
            page_size: Requested size, clamped into 1..MAX_PAGE_SIZE
            link_for: Builds the link to a (page_number, page_size) pair

        Returns:
            Tuple of the page and its navigation metadata
        """
        pagination = Pagination.normalized(page_number, page_size)
        items, total = self.user_repository.get_page(pagination)
        page = PaginatedResult(items=items, total=total, pagination=pagination)
        return page, build_page_links(pagination, total, link_for)
