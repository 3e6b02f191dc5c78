"""User aggregate use cases (validation, uniqueness, reserved id, merge-on-update)."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from bank_api.domain.models import User
from bank_api.repositories.base import UserRepository
from bank_api.repositories.sql_repository import SQLUserRepository

logger = logging.getLogger(__name__)

# Seed/template record: readable, never created explicitly, updated or deleted
RESERVED_USER_ID = 1


class UserServiceError(Exception):
    """Base exception for user workflows."""


class BusinessError(UserServiceError):
    """Raised when input shape or a domain invariant is violated."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(UserServiceError):
    """Raised when no user exists for the requested id."""

    def __init__(self, message: str = "Resource not found."):
        super().__init__(message)
        self.message = message


def merge(existing: User, incoming: User) -> User:
    """Full replacement of the mutable fields; identity comes from ``existing``."""
    return replace(
        existing,
        name=incoming.name,
        account=incoming.account,
        card=incoming.card,
        features=list(incoming.features or []),
        news=list(incoming.news or []),
    )


class UserService:
    """Create/read/update/delete of user aggregates on top of a UserRepository."""

    def __init__(self, repository: Optional[UserRepository] = None) -> None:
        self.repository = repository if repository is not None else SQLUserRepository()

    # -------------------------------------- helpers --------------------------------------
    def _guard_reserved(self, user_id: Optional[int], action: str) -> None:
        if user_id == RESERVED_USER_ID:
            logger.warning("Refusing to %s reserved user id %s", action, RESERVED_USER_ID)
            raise BusinessError(f"This User ID can not be {action}.")

    # -------------------------------------- queries --------------------------------------
    def find_all(self) -> list[User]:
        return self.repository.find_all()

    def find_by_id(self, user_id: int) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError()
        return user

    # -------------------------------------- commands -------------------------------------
    def create(self, candidate: Optional[User]) -> User:
        if candidate is None:
            raise BusinessError("User to create must not be null.")
        self._guard_reserved(candidate.id, "created")
        if candidate.account is None:
            raise BusinessError("User account must not be null.")
        if candidate.card is None:
            raise BusinessError("User card must not be null.")
        if self.repository.exists_by_account_number(candidate.account.number):
            raise BusinessError("This account number already exists.")
        if self.repository.exists_by_card_number(candidate.card.number):
            raise BusinessError("This card number already exists.")

        # The store always assigns the identity of a new user
        created = self.repository.save(
            replace(
                candidate,
                id=None,
                features=list(candidate.features or []),
                news=list(candidate.news or []),
            )
        )
        logger.info("Created user %s (account %s)", created.id, candidate.account.number)
        return created

    def update(self, user_id: int, incoming: User) -> User:
        self._guard_reserved(user_id, "updated")
        # Account/card uniqueness is not re-checked here; the storage constraints still apply
        if incoming is None or incoming.id != user_id:
            raise BusinessError("Update IDs must be the same.")
        existing = self.find_by_id(user_id)
        updated = self.repository.save(merge(existing, incoming))
        logger.info("Updated user %s", updated.id)
        return updated

    def delete(self, user_id: int) -> None:
        self._guard_reserved(user_id, "deleted")
        existing = self.find_by_id(user_id)
        self.repository.delete(existing)
        logger.info("Deleted user %s", user_id)
