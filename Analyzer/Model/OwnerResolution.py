from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

ORGANIZATION = "organization"
USER = "user"
NOT_FOUND = "not_found"

"""Tagged result of resolving an owner-only URL."""
@dataclass
class OwnerResolution:
    kind: str
    owner: str
    profile: Optional[Dict[str, Any]] = None
    repos: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def is_organization(self) -> bool:
        return self.kind == ORGANIZATION

    @property
    def is_user(self) -> bool:
        return self.kind == USER

    @property
    def found(self) -> bool:
        return self.kind != NOT_FOUND

    @classmethod
    def not_found(cls, owner: str) -> "OwnerResolution":
        return cls(kind=NOT_FOUND, owner=owner)
