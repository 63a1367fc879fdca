from users_api.application.identity.use_cases.dtos.user_dtos import NewUser, UserNames

__all__ = ["NewUser", "UserNames"]
