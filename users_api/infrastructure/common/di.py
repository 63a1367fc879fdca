from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers
from dependency_injector.providers import Provider

from users_api.core import Container
from users_api.database import DatabaseSession

T = TypeVar("T")


def _provider_name(provider: Provider[T]) -> str:
    for name, declared in Container.providers.items():
        if declared is provider:
            return name
    raise LookupError(f"{provider!r} is not declared on {Container.__name__}")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a provider declared on ``Container``.

    Each request resolves the provider from its own container instance bound
    to the request-scoped database session, so concurrent requests never share
    a ``db`` override.
    """
    name = _provider_name(provider)

    def dependency(db: DatabaseSession) -> T:
        request_container = Container(db=providers.Object(db))
        return getattr(request_container, name)()

    return dependency
