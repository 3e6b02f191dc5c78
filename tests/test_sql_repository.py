"""
Smoke tests for the SQLUserRepository against a temporary SQLite database.
"""
from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from bank_api.db.create_tables import create_all
from bank_api.domain.models import Account, Card, Feature, News, User
from bank_api.repositories.sql_repository import SQLUserRepository
from bank_api.services.user_service import RESERVED_USER_ID


def make_user(account_number: str = "00000001-0", card_number: str = "xxxx xxxx xxxx 0001") -> User:
    return User(
        name="Darieldon",
        account=Account(number=account_number, agency="0001", balance=Decimal("1000.00"), limit=Decimal("500.00")),
        card=Card(number=card_number, limit=Decimal("2000.00")),
        features=[Feature(icon="icon1.png", description="Feature 1")],
        news=[News(icon="news1.png", description="News 1"), News(icon="news2.png", description="News 2")],
    )


def test_save_assigns_ids_and_round_trips(temp_db):
    repo = SQLUserRepository()

    saved = repo.save(make_user())

    assert saved.id is not None
    assert saved.account.id is not None
    assert saved.card.id is not None
    assert all(f.id is not None for f in saved.features)

    loaded = repo.find_by_id(saved.id)
    assert loaded is not None
    assert loaded.name == "Darieldon"
    assert loaded.account.number == "00000001-0"
    assert loaded.account.balance == Decimal("1000.00")
    assert loaded.card.limit == Decimal("2000.00")
    assert [n.description for n in loaded.news] == ["News 1", "News 2"]


def test_exists_by_natural_keys(temp_db):
    repo = SQLUserRepository()
    assert not repo.exists_by_account_number("00000001-0")
    assert not repo.exists_by_card_number("xxxx xxxx xxxx 0001")

    repo.save(make_user())

    assert repo.exists_by_account_number("00000001-0")
    assert repo.exists_by_card_number("xxxx xxxx xxxx 0001")
    assert not repo.exists_by_account_number("99999999-9")


def test_overwrite_keeps_account_row_and_replaces_lists(temp_db):
    repo = SQLUserRepository()
    saved = repo.save(make_user())
    account_id = saved.account.id

    saved.name = "Nome Atualizado"
    saved.account.number = "00000121-1"
    saved.features = []
    saved.news = [News(icon="fresh.png", description="Fresh")]
    updated = repo.save(saved)

    assert updated.id == saved.id
    assert updated.account.id == account_id
    assert updated.account.number == "00000121-1"
    assert updated.features == []
    assert [n.description for n in updated.news] == ["Fresh"]
    assert not repo.exists_by_account_number("00000001-0")


def test_find_all_is_ordered_by_id(temp_db):
    repo = SQLUserRepository()
    first = repo.save(make_user())
    second = repo.save(make_user("00000002-0", "xxxx xxxx xxxx 0002"))

    assert [u.id for u in repo.find_all()] == [first.id, second.id]


def test_delete_removes_owned_rows(temp_db):
    repo = SQLUserRepository()
    saved = repo.save(make_user())

    repo.delete(saved)

    assert repo.find_by_id(saved.id) is None
    assert not repo.exists_by_account_number("00000001-0")
    assert not repo.exists_by_card_number("xxxx xxxx xxxx 0001")


def test_duplicate_account_number_hits_unique_constraint(temp_db):
    repo = SQLUserRepository()
    repo.save(make_user())

    with pytest.raises(IntegrityError):
        repo.save(make_user(card_number="xxxx xxxx xxxx 0009"))


def test_create_all_seeds_reserved_user_once(temp_db):
    repo = SQLUserRepository()

    create_all(seed=True)
    create_all(seed=True)

    users = repo.find_all()
    assert [u.id for u in users] == [RESERVED_USER_ID]
    assert repo.save(make_user()).id == RESERVED_USER_ID + 1


def test_create_all_seeds_reserved_user_into_populated_table(temp_db):
    repo = SQLUserRepository()
    existing = make_user()
    existing.id = 5
    repo.save(existing)

    create_all(seed=True)

    assert [u.id for u in repo.find_all()] == [RESERVED_USER_ID, 5]
    assert repo.find_by_id(RESERVED_USER_ID).name == "Template"


def test_create_all_skips_seed_when_template_numbers_are_taken(temp_db):
    repo = SQLUserRepository()
    repo.save(make_user(account_number="00000000-0"))

    create_all(seed=True)

    assert len(repo.find_all()) == 1
    assert repo.find_all()[0].name == "Darieldon"
