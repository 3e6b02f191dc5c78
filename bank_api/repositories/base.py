"""
Persistence port for the user aggregate.

Services depend on this interface rather than on SQLAlchemy; it carries no
business rules, only the lookups and writes the user service composes.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from bank_api.domain.models import User


class UserRepository(ABC):
    """Capabilities required by UserService."""

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every persisted user in store-defined order."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user for ``user_id`` or None."""

    @abstractmethod
    def exists_by_account_number(self, number: str) -> bool:
        ...

    @abstractmethod
    def exists_by_card_number(self, number: str) -> bool:
        ...

    @abstractmethod
    def save(self, user: User) -> User:
        """Insert when ``user.id`` is None, overwrite otherwise; return the stored aggregate."""

    @abstractmethod
    def delete(self, user: User) -> None:
        ...
