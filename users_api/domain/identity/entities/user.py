"""User entity exposed as the API's single resource."""

from dataclasses import dataclass

from users_api.domain.common.entity import Entity
from users_api.domain.common.exceptions import InvariantViolationError
from users_api.domain.common.value_objects.ids import GameId, UserId


@dataclass
class User(Entity[UserId]):
    """
    User entity.

    Business Rules:
    - The identifier never changes once assigned
    - Login is fixed at creation; its format is checked on write, not here
    - First and last name are the only client-mutable fields
    - Games played is server-managed and never negative
    """

    id: UserId
    login: str
    first_name: str = ""
    last_name: str = ""
    games_played: int = 0
    current_game_id: GameId | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.games_played < 0:
            raise InvariantViolationError("User", "games played cannot be negative")

    def rename(self, first_name: str, last_name: str) -> None:
        """
        Overwrite the client-mutable name fields.

        Identifier, login and counters are left untouched.
        """
        self.first_name = first_name
        self.last_name = last_name

    @classmethod
    def create(cls, login: str) -> "User":
        """Create a new user (ID is the nil placeholder until persisted)."""
        return cls(id=UserId.generate(), login=login)

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        login: str,
        first_name: str,
        last_name: str,
        games_played: int = 0,
        current_game_id: GameId | None = None,
    ) -> "User":
        """
        Build a user under a caller-chosen or persisted identifier.

        Args:
            id: Existing or requested user ID
            login: User's login
            first_name: User's first name
            last_name: User's last name
            games_played: Number of games the user has played
            current_game_id: Game the user is currently in, if any

        Returns:
            User instance

        Raises:
            InvariantViolationError: If games_played is negative
        """
        return cls(
            id=id,
            login=login,
            first_name=first_name,
            last_name=last_name,
            games_played=games_played,
            current_game_id=current_game_id,
        )
