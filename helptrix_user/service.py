"""Business rules for reading, updating and deleting user profiles."""

from __future__ import annotations

import uuid
from typing import Protocol

from helptrix_user.domain import (
    NotOwnerError,
    ProfileFilters,
    ProfileResponse,
    UpdateProfileRequest,
    UserType,
)


class UserRepository(Protocol):
    """Storage for user profiles."""

    def get_profile(self, user_id: uuid.UUID, filters: ProfileFilters) -> ProfileResponse: ...

    def update_profile(self, user_id: uuid.UUID, request: UpdateProfileRequest) -> None: ...

    def delete_profile(self, user_id: uuid.UUID) -> None: ...


class UserService:
    """Applies access rules before delegating to the repository."""

    def __init__(self, repo: UserRepository) -> None:
        self.repo = repo

    def get_profile(self, requester_id, requester_type, target_id, filters) -> ProfileResponse:
        """Fetch a profile; filters apply only for business requesters."""
        if requester_type != UserType.BUSINESS:
            filters = ProfileFilters()
        return self.repo.get_profile(target_id, filters)

    def update_profile(self, requester_id, target_id, request) -> None:
        """Update a profile; only its owner may do so."""
        if requester_id != target_id:
            raise NotOwnerError()
        self.repo.update_profile(target_id, request)

    def delete_profile(self, requester_id, target_id) -> None:
        """Delete a profile; only its owner may do so."""
        if requester_id != target_id:
            raise NotOwnerError()
        self.repo.delete_profile(target_id)