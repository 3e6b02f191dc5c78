"""SQLAlchemy models for the user aggregate tables."""
from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from .session import Base


class Account(Base):
    __tablename__ = "tb_account"

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(String(32), unique=True, nullable=False)
    agency = Column(String(16), nullable=True)
    balance = Column(Numeric(13, 2), nullable=True)
    limit = Column("additional_limit", Numeric(13, 2), nullable=True)


class Card(Base):
    __tablename__ = "tb_card"

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(String(32), unique=True, nullable=False)
    limit = Column("available_limit", Numeric(13, 2), nullable=True)


class Feature(Base):
    __tablename__ = "tb_feature"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("tb_user.id", ondelete="CASCADE"), nullable=False)
    icon = Column(String(255), nullable=True)
    description = Column(String(255), nullable=True)


class News(Base):
    __tablename__ = "tb_news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("tb_user.id", ondelete="CASCADE"), nullable=False)
    icon = Column(String(255), nullable=True)
    description = Column(String(255), nullable=True)


class User(Base):
    __tablename__ = "tb_user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=True)
    account_id = Column(Integer, ForeignKey("tb_account.id"), unique=True, nullable=True)
    card_id = Column(Integer, ForeignKey("tb_card.id"), unique=True, nullable=True)

    account = relationship("Account", cascade="all,delete-orphan", single_parent=True, lazy="joined")
    card = relationship("Card", cascade="all,delete-orphan", single_parent=True, lazy="joined")
    features = relationship(
        "Feature",
        cascade="all,delete-orphan",
        order_by="Feature.id",
        lazy="selectin",
    )
    news = relationship(
        "News",
        cascade="all,delete-orphan",
        order_by="News.id",
        lazy="selectin",
    )
