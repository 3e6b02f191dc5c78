"""Utility script to create the database schema and seed the reserved template user."""
from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from bank_api.domain.models import Account, Card, Feature, News, User
from bank_api.repositories.sql_repository import SQLUserRepository
from bank_api.services.user_service import RESERVED_USER_ID

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def reserved_user() -> User:
    return User(
        id=RESERVED_USER_ID,
        name="Template",
        account=Account(number="00000000-0", agency="0001", balance=Decimal("0.00"), limit=Decimal("0.00")),
        card=Card(number="xxxx xxxx xxxx 0000", limit=Decimal("0.00")),
        features=[Feature(icon="pix.svg", description="Pix")],
        news=[News(icon="credit.svg", description="Welcome")],
    )


def create_all(seed: bool = True) -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    if not seed:
        return
    repo = SQLUserRepository()
    if repo.find_by_id(RESERVED_USER_ID) is not None:
        return
    template = reserved_user()
    if repo.exists_by_account_number(template.account.number) or repo.exists_by_card_number(template.card.number):
        logger.warning("Reserved user %s not seeded: template account/card number already taken", RESERVED_USER_ID)
        return
    repo.save(template)
    logger.info("Seeded reserved user %s", RESERVED_USER_ID)


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
