"""Common schemas shared by routers."""

from users_api.infrastructure.common.schemas.pagination_schemas import PaginationHeader

__all__ = ["PaginationHeader"]
