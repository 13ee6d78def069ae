"""Domain types for user profiles: errors, filters, requests and responses."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class UserError(Exception):
    """Base class for user-profile errors."""

    default_message = "user error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    def __str__(self) -> str:
        return self.args[0]


class NotOwnerError(UserError):
    """The requester does not own the profile being changed."""

    default_message = "requester is not the owner of this profile"


class UserNotFoundError(UserError):
    """The requested user does not exist."""

    default_message = "user not found"


class CategoryHasLinkedServicesError(UserError):
    """A category cannot be removed while services are linked to it."""

    default_message = "category has linked services"


class UserType(str, Enum):
    """Kinds of user account."""

    HELPER = "helper"
    BUSINESS = "business"


@dataclass(frozen=True)
class AuthPayload:
    """Identity of the authenticated requester."""

    user_id: str
    user_type: str


@dataclass
class ProfileFilters:
    """Optional filters applied to the services listed in a business profile."""

    category_id: int | None = None
    actuation_days: list[str] = field(default_factory=list)


@dataclass
class UpdateProfileRequest:
    """Mutable fields of a user profile; empty fields are left unchanged."""

    email: str = ""
    biography: str = ""
    categories: list[int] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> UpdateProfileRequest:
        """Build a request from decoded JSON, raising ValueError on bad input."""
        if not isinstance(data, Mapping):
            raise ValueError("request body must be a JSON object")

        email = data.get("email", "")
        if email is None:
            email = ""
        if not isinstance(email, str):
            raise ValueError("field 'email' must be a string")

        biography = data.get("biography", "")
        if biography is None:
            biography = ""
        if not isinstance(biography, str):
            raise ValueError("field 'biography' must be a string")

        raw_categories = data.get("categories", [])
        if raw_categories is None:
            raw_categories = []
        if not isinstance(raw_categories, list):
            raise ValueError("field 'categories' must be an array")
        categories = []
        for item in raw_categories:
            if isinstance(item, bool) or not isinstance(item, int) or item < 0:
                raise ValueError("field 'categories' must hold non-negative integers")
            categories.append(item)

        return cls(email=email, biography=biography, categories=categories)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty fields."""
        body: dict[str, Any] = {}
        if self.email:
            body["email"] = self.email
        if self.biography:
            body["biography"] = self.biography
        if self.categories:
            body["categories"] = list(self.categories)
        return body


@dataclass
class ProfileResponse:
    """A user profile as returned to clients."""

    id: uuid.UUID
    name: str = ""
    email: str = ""
    user_type: str = ""
    reviews: list[Any] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form of the profile."""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "user_type": str(getattr(self.user_type, "value", self.user_type)),
            "reviews": list(self.reviews),
        }