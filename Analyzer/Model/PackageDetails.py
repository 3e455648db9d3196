from dataclasses import dataclass, field
from typing import Any, Dict, Optional

"""Dependency maps copied from a repository's package.json."""
@dataclass
class PackageDetails:
    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_package_json(cls, package_json: Dict[str, Any]) -> "PackageDetails":
        dependencies = package_json.get("dependencies") or {}
        dev_dependencies = package_json.get("devDependencies") or {}
        if not isinstance(dependencies, dict) or not isinstance(dev_dependencies, dict):
            raise ValueError("package.json dependency sections must be objects")
        return cls(dependencies=dict(dependencies), dev_dependencies=dict(dev_dependencies))

    def merge(self, other: "PackageDetails") -> None:
        self.dependencies.update(other.dependencies)
        self.dev_dependencies.update(other.dev_dependencies)

    def names(self):
        return list({**self.dependencies, **self.dev_dependencies}.keys())

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
        }


"""Outcome of a best-effort package.json fetch; never raised."""
@dataclass
class PackageFetchResult:
    found: bool
    details: PackageDetails = field(default_factory=PackageDetails)
    error: Optional[str] = None
