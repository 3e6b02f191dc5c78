"""Request/response models exposed by the HTTP layer."""

from .user import AccountDto, CardDto, FeatureDto, NewsDto, UserDto

__all__ = ["AccountDto", "CardDto", "FeatureDto", "NewsDto", "UserDto"]
