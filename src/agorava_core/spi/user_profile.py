"""
agorava_core.spi.user_profile

Base type for a user's profile on a social network.

Responsibilities:
- Hold the permanent, network-scoped user id.
- Define the display contract (`full_name`, `profile_image_url`) implemented per provider.
- Provide equality/hashing that is id-based but exact about the concrete provider type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class UserProfile(ABC):
    """
    Basic user information returned by a provider adapter.

    Subclasses are built once when a profile is fetched and must not change afterwards.
    They pickle like any plain object, so they can travel inside session state.
    """

    def __init__(self, id: str) -> None:
        # Not validated here; adapters call `check_empty_string` upstream when they need to.
        self._id = id

    @property
    def id(self) -> str:
        """
        Permanent identifier for the life-time of the network account.
        """

        return self._id

    @property
    @abstractmethod
    def full_name(self) -> str: ...

    @property
    @abstractmethod
    def profile_image_url(self) -> str: ...

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "profile_image_url": self.profile_image_url,
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, UserProfile):
            return NotImplemented
        # A twitter user and a linkedin user sharing an id are different people.
        if type(self) is not type(other):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return 0 if self._id is None else hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"


# --- Module Notes -----------------------------------------------------------
# Concrete profiles live in provider adapter packages, outside this core.
