from dataclasses import dataclass, field
from typing import List

from Analyzer.Model.PackageDetails import PackageFetchResult

"""Files and package.json found in one repository, with the labels detected from them."""
@dataclass
class RepoScan:
    full_name: str
    file_names: List[str] = field(default_factory=list)
    package: PackageFetchResult = field(default_factory=lambda: PackageFetchResult(found=False))
    technologies: List[str] = field(default_factory=list)
