"""User aggregate persistence backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from bank_api.db import models as orm
from bank_api.db.session import get_session
from bank_api.domain.models import Account, Card, Feature, News, User
from bank_api.repositories.base import UserRepository


def _account_to_domain(entity: orm.Account | None) -> Account | None:
    if entity is None:
        return None
    return Account(
        id=entity.id,
        number=entity.number,
        agency=entity.agency,
        balance=entity.balance,
        limit=entity.limit,
    )


def _card_to_domain(entity: orm.Card | None) -> Card | None:
    if entity is None:
        return None
    return Card(id=entity.id, number=entity.number, limit=entity.limit)


def _entity_to_user(entity: orm.User) -> User:
    return User(
        id=entity.id,
        name=entity.name,
        account=_account_to_domain(entity.account),
        card=_card_to_domain(entity.card),
        features=[Feature(id=f.id, icon=f.icon, description=f.description) for f in entity.features],
        news=[News(id=n.id, icon=n.icon, description=n.description) for n in entity.news],
    )


class SQLUserRepository(UserRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- reads --------------------------
    def find_all(self) -> list[User]:
        with get_session() as session:
            entities = session.execute(select(orm.User).order_by(orm.User.id)).scalars().all()
            return [_entity_to_user(entity) for entity in entities]

    def find_by_id(self, user_id: int) -> Optional[User]:
        with get_session() as session:
            entity = session.get(orm.User, user_id)
            return _entity_to_user(entity) if entity else None

    def exists_by_account_number(self, number: str) -> bool:
        with get_session() as session:
            stmt = select(orm.Account.id).where(orm.Account.number == number).limit(1)
            return session.execute(stmt).first() is not None

    def exists_by_card_number(self, number: str) -> bool:
        with get_session() as session:
            stmt = select(orm.Card.id).where(orm.Card.number == number).limit(1)
            return session.execute(stmt).first() is not None

    # -------------------------- writes --------------------------
    def save(self, user: User) -> User:
        with get_session() as session:
            entity = session.get(orm.User, user.id) if user.id is not None else None
            if not entity:
                entity = orm.User(id=user.id)
                session.add(entity)
            self._apply(entity, user)
            session.commit()
            return _entity_to_user(entity)

    def delete(self, user: User) -> None:
        with get_session() as session:
            entity = session.get(orm.User, user.id)
            if entity:
                session.delete(entity)
                session.commit()

    # -------------------------- mapping --------------------------
    def _apply(self, entity: orm.User, user: User) -> None:
        """Copy the aggregate onto the row; account/card rows are kept, lists are replaced."""
        entity.name = user.name

        if user.account is None:
            entity.account = None
        else:
            account = entity.account or orm.Account()
            account.number = user.account.number
            account.agency = user.account.agency
            account.balance = user.account.balance
            account.limit = user.account.limit
            entity.account = account

        if user.card is None:
            entity.card = None
        else:
            card = entity.card or orm.Card()
            card.number = user.card.number
            card.limit = user.card.limit
            entity.card = card

        entity.features = [orm.Feature(icon=f.icon, description=f.description) for f in user.features or []]
        entity.news = [orm.News(icon=n.icon, description=n.description) for n in user.news or []]
