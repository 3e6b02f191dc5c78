"""Domain objects (user aggregate) independent of FastAPI and SQLAlchemy."""

from .models import Account, Card, Feature, News, User

__all__ = ["Account", "Card", "Feature", "News", "User"]
