"""
Collects the inputs of technology detection for one repository: the root file
listing (plus the `.github` directory when present) and package.json.
"""
import json
from concurrent.futures import ThreadPoolExecutor
from typing import List

from Analyzer.Exception.GitHubError import GitHubError
from Analyzer.GitHub.GitHubClient import GitHubClient
from Analyzer.Model.PackageDetails import PackageDetails, PackageFetchResult
from Analyzer.Model.RepoScan import RepoScan
from Analyzer.Business.TechnologyDetector import detect_technologies

import logging
logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"


def _entry_names(listing) -> List[str]:
    if not isinstance(listing, list):
        return []
    return [item.get("name") for item in listing if isinstance(item, dict) and item.get("name")]


class RepoScanner:
    def __init__(self, client: GitHubClient):
        self.client = client

    def ListFileNames(self, owner: str, repo: str) -> List[str]:
        """Root entry names; raises GitHubError when the listing itself fails."""
        names = _entry_names(self.client.get_contents(owner, repo))
        if ".github" in names:
            try:
                nested = _entry_names(self.client.get_contents(owner, repo, ".github"))
                names.extend(f".github/{name}" for name in nested)
            except GitHubError as e:
                logger.warning("Could not list .github for %s/%s: %s", owner, repo, e.message)
        return names

    def FetchPackageDetails(self, owner: str, repo: str) -> PackageFetchResult:
        try:
            text = self.client.get_file_text(owner, repo, PACKAGE_JSON)
        except GitHubError as e:
            if e.status_code == 404:
                return PackageFetchResult(found=False)
            logger.warning("Could not fetch package.json for %s/%s: %s", owner, repo, e.message)
            return PackageFetchResult(found=False, error=e.message)
        try:
            package_json = json.loads(text)
            if not isinstance(package_json, dict):
                raise ValueError("top level is not an object")
            details = PackageDetails.from_package_json(package_json)
        except ValueError as e:
            logger.warning("Malformed package.json in %s/%s: %s", owner, repo, e)
            return PackageFetchResult(found=True, error=f"Malformed package.json: {e}")
        return PackageFetchResult(found=True, details=details)

    def ScanRepository(self, owner: str, repo: str) -> RepoScan:
        """Single-repository scan: listing and package.json run side by side, both best-effort."""
        with ThreadPoolExecutor(max_workers=2) as executor:
            listing_future = executor.submit(self.ListFileNames, owner, repo)
            package_future = executor.submit(self.FetchPackageDetails, owner, repo)
            package = package_future.result()
            try:
                file_names = listing_future.result()
            except GitHubError as e:
                logger.warning("Error scanning contents of %s/%s: %s", owner, repo, e.message)
                file_names = []
        return self._build(owner, repo, file_names, package)

    def ScanListedRepository(self, owner: str, repo: str) -> RepoScan:
        """Owner fan-out scan: the listing must succeed; package.json is read only when listed."""
        file_names = self.ListFileNames(owner, repo)
        if PACKAGE_JSON in file_names:
            package = self.FetchPackageDetails(owner, repo)
        else:
            package = PackageFetchResult(found=False)
        return self._build(owner, repo, file_names, package)

    def _build(self, owner: str, repo: str, file_names: List[str], package: PackageFetchResult) -> RepoScan:
        return RepoScan(
            full_name=f"{owner}/{repo}",
            file_names=file_names,
            package=package,
            technologies=detect_technologies(file_names, package.details),
        )
