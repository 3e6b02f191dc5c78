"""
Pydantic models for the user payloads.

Each DTO mirrors one piece of the domain aggregate and knows how to build
itself from the domain object (``from_model``) and back (``to_model``).
Absent or ``null`` feature/news lists are read as empty lists.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from bank_api.domain.models import Account, Card, Feature, News, User


class AccountDto(BaseModel):
    id: Optional[int] = None
    number: Optional[str] = Field(None, examples=["00000001-0"])
    agency: Optional[str] = Field(None, examples=["0001"])
    balance: Optional[Decimal] = Field(None, examples=["1000.00"])
    limit: Optional[Decimal] = Field(None, examples=["500.00"])

    @classmethod
    def from_model(cls, model: Account) -> "AccountDto":
        return cls(
            id=model.id,
            number=model.number,
            agency=model.agency,
            balance=model.balance,
            limit=model.limit,
        )

    def to_model(self) -> Account:
        return Account(
            id=self.id,
            number=self.number,
            agency=self.agency,
            balance=self.balance,
            limit=self.limit,
        )


class CardDto(BaseModel):
    id: Optional[int] = None
    number: Optional[str] = Field(None, examples=["xxxx xxxx xxxx 0001"])
    limit: Optional[Decimal] = Field(None, examples=["2000.00"])

    @classmethod
    def from_model(cls, model: Card) -> "CardDto":
        return cls(id=model.id, number=model.number, limit=model.limit)

    def to_model(self) -> Card:
        return Card(id=self.id, number=self.number, limit=self.limit)


class FeatureDto(BaseModel):
    id: Optional[int] = None
    icon: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_model(cls, model: Feature) -> "FeatureDto":
        return cls(id=model.id, icon=model.icon, description=model.description)

    def to_model(self) -> Feature:
        return Feature(id=self.id, icon=self.icon, description=self.description)


class NewsDto(BaseModel):
    id: Optional[int] = None
    icon: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_model(cls, model: News) -> "NewsDto":
        return cls(id=model.id, icon=model.icon, description=model.description)

    def to_model(self) -> News:
        return News(id=self.id, icon=self.icon, description=self.description)


class UserDto(BaseModel):
    """Wire shape of a user aggregate, used for both requests and responses."""

    id: Optional[int] = None
    name: Optional[str] = Field(None, examples=["Darieldon"])
    account: Optional[AccountDto] = None
    card: Optional[CardDto] = None
    features: list[FeatureDto] = Field(default_factory=list)
    news: list[NewsDto] = Field(default_factory=list)

    @field_validator("features", "news", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @classmethod
    def from_model(cls, model: User) -> "UserDto":
        return cls(
            id=model.id,
            name=model.name,
            account=AccountDto.from_model(model.account) if model.account else None,
            card=CardDto.from_model(model.card) if model.card else None,
            features=[FeatureDto.from_model(f) for f in model.features or []],
            news=[NewsDto.from_model(n) for n in model.news or []],
        )

    def to_model(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            account=self.account.to_model() if self.account else None,
            card=self.card.to_model() if self.card else None,
            features=[f.to_model() for f in self.features],
            news=[n.to_model() for n in self.news],
        )
