from dataclasses import dataclass
from typing import Optional

"""Owner and optional repository resolved from a GitHub web URL."""
@dataclass(frozen=True)
class RepoRef:
    owner: str
    repo: Optional[str] = None
    is_organization_or_user: bool = False

    @property
    def full_name(self) -> str:
        if self.repo is None:
            return self.owner
        return f"{self.owner}/{self.repo}"
