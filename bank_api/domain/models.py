"""In-memory shape of the user aggregate shared by services and repositories."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class Account:
    id: Optional[int] = None
    number: Optional[str] = None
    agency: Optional[str] = None
    balance: Optional[Decimal] = None
    limit: Optional[Decimal] = None


@dataclass
class Card:
    id: Optional[int] = None
    number: Optional[str] = None
    limit: Optional[Decimal] = None


@dataclass
class Feature:
    id: Optional[int] = None
    icon: Optional[str] = None
    description: Optional[str] = None


@dataclass
class News:
    id: Optional[int] = None
    icon: Optional[str] = None
    description: Optional[str] = None


@dataclass
class User:
    """Aggregate root: owns exactly one account and card plus feature/news lists."""

    id: Optional[int] = None
    name: Optional[str] = None
    account: Optional[Account] = None
    card: Optional[Card] = None
    features: list[Feature] = field(default_factory=list)
    news: list[News] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Absent collections are always empty, never None
        if self.features is None:
            self.features = []
        if self.news is None:
            self.news = []
