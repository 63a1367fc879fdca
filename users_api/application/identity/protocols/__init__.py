from users_api.application.identity.protocols.user_repository import UserRepositoryProtocol

__all__ = ["UserRepositoryProtocol"]
