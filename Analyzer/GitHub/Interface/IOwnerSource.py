"""
Owner source abstraction.
An owner-only GitHub URL names either an organization or a user account. Each
IOwnerSource knows how to load one of those account kinds; OwnerResolver tries
them in order and keeps the first that answers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IOwnerSource(ABC):
    """Abstract owner source interface."""

    kind: str = ""

    @abstractmethod
    def FetchProfile(self, owner: str) -> Dict[str, Any]:
        """Return the account profile; raise GitHubError when the account is not of this kind."""
        pass

    @abstractmethod
    def FetchRepos(self, owner: str, limit: int) -> List[Dict[str, Any]]:
        """Return up to `limit` repositories of the account."""
        pass
