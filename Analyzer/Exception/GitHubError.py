
"""GitHub API error base class."""
from typing import Optional


class GitHubError(Exception):    
    
    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

"""Raised when a submitted URL cannot be resolved to a GitHub owner or repository."""
class InvalidRepoUrlError(ValueError):
    def __init__(self, message: str = "Invalid GitHub URL", url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(self.message)

"""Raised when an owner-only URL resolves to neither an organization nor a user with repositories."""
class OwnerNotFoundError(Exception):
    def __init__(self, owner: str, message: Optional[str] = None):
        self.owner = owner
        self.message = message or f"Could not find organization or user: {owner}"
        super().__init__(self.message)
