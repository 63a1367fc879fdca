"""API routes for the users resource."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse

from users_api.application.common.pagination import DEFAULT_PAGE_SIZE
from users_api.application.identity.use_cases.users.create_user_use_case import (
    CreateUserUseCase,
)
from users_api.application.identity.use_cases.users.delete_user_use_case import (
    DeleteUserUseCase,
)
from users_api.application.identity.use_cases.users.get_user_use_case import GetUserUseCase
from users_api.application.identity.use_cases.users.list_users_use_case import ListUsersUseCase
from users_api.application.identity.use_cases.users.patch_user_use_case import PatchUserUseCase
from users_api.application.identity.use_cases.users.replace_user_use_case import (
    ReplaceUserUseCase,
)
from users_api.core import Container
from users_api.domain.common.exceptions import DomainError
from users_api.domain.identity.entities.user import User
from users_api.exceptions import UsersApiError
from users_api.infrastructure.common.di import inject_use_case
from users_api.infrastructure.common.schemas import PaginationHeader
from users_api.infrastructure.common.schemas.pagination_schemas import PAGINATION_HEADER
from users_api.infrastructure.identity.schemas import (
    PatchOperationRequest,
    UserCreateRequest,
    UserReplaceRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

GET_USER_ROUTE = "get_user_by_id"
GET_USERS_ROUTE = "get_users"
COLLECTION_METHODS = "POST, GET, OPTIONS"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def to_user_response(user: User) -> UserResponse:
    """Project a domain user onto the wire schema."""
    return UserResponse(
        id=user.id.value,
        login=user.login,
        first_name=user.first_name,
        last_name=user.last_name,
        games_played=user.games_played,
        current_game_id=user.current_game_id.value if user.current_game_id else None,
    )


def created_at_user(request: Request, user: User) -> JSONResponse:
    """201 response pointing at the read-one route, with the new id as body."""
    location = request.url_for(GET_USER_ROUTE, user_id=str(user.id.value))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=str(user.id.value),
        headers={"Location": str(location)},
    )


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/{user_id}", name=GET_USER_ROUTE, response_model=UserResponse)
def get_user_by_id(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(inject_use_case(Container.get_user_use_case)),
) -> UserResponse:
    """Get a user by ID."""
    try:
        user = use_case.get_user(user_id)
    except (UsersApiError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get user {user_id}", e) from e
    return to_user_response(user)


@router.head("/{user_id}", status_code=status.HTTP_200_OK)
def user_exists(
    user_id: UUID,
    use_case: GetUserUseCase = Depends(inject_use_case(Container.get_user_use_case)),
) -> Response:
    """Existence probe: empty 200 with a JSON content type, or 404."""
    try:
        use_case.user_exists(user_id)
    except (UsersApiError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"check user {user_id}", e) from e
    return Response(status_code=status.HTTP_200_OK, headers={"Content-Type": JSON_CONTENT_TYPE})


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    request: Request,
    body: Annotated[UserCreateRequest | None, Body()] = None,
    use_case: CreateUserUseCase = Depends(inject_use_case(Container.create_user_use_case)),
) -> JSONResponse:
    """
    Create a user from a login.

    Returns 201 with the new user's id as body and a Location header pointing
    at the user.
    """
    try:
        user = use_case.create_user(body.to_dto() if body is not None else None)
    except (UsersApiError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("create user", e) from e
    return created_at_user(request, user)


@router.put("/{user_id}")
def replace_user(
    request: Request,
    user_id: UUID,
    body: Annotated[UserReplaceRequest | None, Body()] = None,
    use_case: ReplaceUserUseCase = Depends(inject_use_case(Container.replace_user_use_case)),
) -> Response:
    """
    Replace a user's names, creating the user under this id when absent.

    Returns 201 when the user was created, 204 when it already existed.
    """
    try:
        user, was_inserted = use_case.replace_user(
            user_id, body.to_dto() if body is not None else None
        )
    except (UsersApiError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"replace user {user_id}", e) from e

    if was_inserted:
        return created_at_user(request, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_user(
    user_id: UUID,
    body: Annotated[list[PatchOperationRequest] | None, Body()] = None,
    use_case: PatchUserUseCase = Depends(inject_use_case(Container.patch_user_use_case)),
) -> Response:
    """Apply a JSON Patch document to an existing user."""
    operations = [operation.to_operation() for operation in body] if body is not None else None
    try:
        use_case.patch_user(user_id, operations)
    except (UsersApiError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"patch user {user_id}", e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: UUID,
    use_case: DeleteUserUseCase = Depends(inject_use_case(Container.delete_user_use_case)),
) -> Response:
    """Delete a user."""
    try:
        use_case.delete_user(user_id)
    except (UsersApiError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete user {user_id}", e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", name=GET_USERS_ROUTE, response_model=list[UserResponse])
def get_users(
    request: Request,
    response: Response,
    page_number: Annotated[int, Query(alias="pageNumber")] = 1,
    page_size: Annotated[int, Query(alias="pageSize")] = DEFAULT_PAGE_SIZE,
    use_case: ListUsersUseCase = Depends(inject_use_case(Container.list_users_use_case)),
) -> list[UserResponse]:
    """
    List users one page at a time.

    Paging input is clamped, never rejected. Navigation metadata goes into
    the X-Pagination header as a JSON object.
    """

    def link_for(page: int, size: int) -> str:
        url = request.url_for(GET_USERS_ROUTE).include_query_params(pageNumber=page, pageSize=size)
        return str(url)

    try:
        page, links = use_case.list_users(page_number, page_size, link_for)
    except (UsersApiError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list users", e) from e
    response.headers[PAGINATION_HEADER] = PaginationHeader.from_links(links).to_header_value()
    return [to_user_response(user) for user in page.items]


@router.options("")
def collection_options() -> Response:
    """Advertise the verbs accepted by the collection."""
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": COLLECTION_METHODS})
