from dataclasses import dataclass, field
from typing import Any, Dict, Optional

"""Last analysis kept by the client between runs."""
@dataclass
class AnalysisSnapshot:
    repo_url: str = ""
    repo_info: Optional[Dict[str, Any]] = None
    languages: Dict[str, int] = field(default_factory=dict)
    technologies: Optional[Dict[str, Any]] = None

    @property
    def analyzed(self) -> bool:
        return bool(self.repo_url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "repoUrl": self.repo_url,
            "repoInfo": self.repo_info,
            "languages": self.languages,
            "technologies": self.technologies,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisSnapshot":
        return cls(
            repo_url=data.get("repoUrl") or "",
            repo_info=data.get("repoInfo") or None,
            languages=data.get("languages") or {},
            technologies=data.get("technologies") or None,
        )
