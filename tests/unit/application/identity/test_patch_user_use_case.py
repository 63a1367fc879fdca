"""Tests for PatchUserUseCase."""

import uuid
from unittest.mock import MagicMock

import pytest

from users_api.application.identity.services.user_patch_service import PatchOperation
from users_api.application.identity.services.user_upsert_service import UserUpsertService
from users_api.application.identity.use_cases.exceptions import UserNotFoundError
from users_api.application.identity.use_cases.users.patch_user_use_case import (
    PatchUserUseCase,
)
from users_api.domain.common.value_objects.ids import UserId
from users_api.domain.identity.entities.user import User
from users_api.exceptions import ClientInputError, PatchApplicationError, ValidationError


def make_use_case(repository: MagicMock) -> PatchUserUseCase:
    return PatchUserUseCase(repository, UserUpsertService(repository))


def existing_user(user_id: uuid.UUID) -> User:
    return User.create_with_id(UserId(user_id), "ada1", "Ada", "Lovelace", games_played=2)


class TestPatchUserUseCase:
    """Test suite for PatchUserUseCase."""

    def test_missing_document_is_rejected(self) -> None:
        repository = MagicMock()

        with pytest.raises(ClientInputError):
            make_use_case(repository).patch_user(uuid.uuid4(), None)

        repository.find_by_id.assert_not_called()

    def test_nil_id_is_not_found(self) -> None:
        repository = MagicMock()

        with pytest.raises(UserNotFoundError):
            make_use_case(repository).patch_user(
                uuid.UUID(int=0), [PatchOperation("replace", "/firstName", "C")]
            )

    def test_unknown_user_is_not_found(self) -> None:
        repository = MagicMock()
        repository.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            make_use_case(repository).patch_user(
                uuid.uuid4(), [PatchOperation("replace", "/firstName", "C")]
            )

        repository.update_or_insert.assert_not_called()

    def test_unappliable_patch_writes_nothing(self) -> None:
        user_id = uuid.uuid4()
        repository = MagicMock()
        repository.find_by_id.return_value = existing_user(user_id)

        with pytest.raises(PatchApplicationError) as exc_info:
            make_use_case(repository).patch_user(
                user_id, [PatchOperation("replace", "/nickname", "x")]
            )

        assert "nickname" in exc_info.value.errors
        repository.update_or_insert.assert_not_called()

    def test_invalid_result_writes_nothing(self) -> None:
        user_id = uuid.uuid4()
        repository = MagicMock()
        repository.find_by_id.return_value = existing_user(user_id)

        with pytest.raises(ValidationError) as exc_info:
            make_use_case(repository).patch_user(user_id, [PatchOperation("remove", "/firstName")])

        assert exc_info.value.errors == {"firstName": ["Invalid First Name"]}
        repository.update_or_insert.assert_not_called()

    def test_patch_overwrites_names_only(self) -> None:
        user_id = uuid.uuid4()
        repository = MagicMock()
        repository.find_by_id.side_effect = lambda _: existing_user(user_id)
        repository.update_or_insert.side_effect = lambda user: (user, False)

        make_use_case(repository).patch_user(
            user_id, [PatchOperation("replace", "/firstName", "C")]
        )

        (stored,), _ = repository.update_or_insert.call_args
        assert (stored.first_name, stored.last_name) == ("C", "Lovelace")
        assert stored.login == "ada1"
        assert stored.games_played == 2

    def test_user_deleted_mid_patch_is_recreated(self) -> None:
        user_id = uuid.uuid4()
        repository = MagicMock()
        # Present at lookup, gone by the time the upsert checks again
        repository.find_by_id.side_effect = [existing_user(user_id), None]
        repository.update_or_insert.side_effect = lambda user: (user, True)

        make_use_case(repository).patch_user(
            user_id, [PatchOperation("replace", "/lastName", "Byron")]
        )

        (stored,), _ = repository.update_or_insert.call_args
        assert stored.id == UserId(user_id)
        assert stored.login == ""
        assert (stored.first_name, stored.last_name) == ("Ada", "Byron")
