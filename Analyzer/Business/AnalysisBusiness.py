from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, List, Optional

from Analyzer.Exception.GitHubError import GitHubError, OwnerNotFoundError
from Analyzer.GitHub.GitHubClient import GitHubClient
from Analyzer.GitHub.OwnerResolver import OwnerResolver, top_repos_by_stars
from Analyzer.Model.OwnerResolution import OwnerResolution
from Analyzer.Model.PackageDetails import PackageDetails
from Analyzer.Model.RepoRef import RepoRef
from Analyzer.Business.RepoScanner import RepoScanner
from Analyzer.Business.TechnologyDetector import unique_labels
from Analyzer.Utility.url import parse_repo_url

import logging
logger = logging.getLogger(__name__)

INFO_REPO_LIMIT = 6
FANOUT_REPO_LIMIT = 5
LANGUAGE_REPO_LIMIT = 5
TECHNOLOGY_REPO_LIMIT = 3
CONTRIBUTOR_LIMIT = 10


class AnalysisBusiness:

    """Aggregates GitHub API calls behind the three repository endpoints.
    Every public method takes the raw submitted URL, raises ValueError for bad
    input, OwnerNotFoundError when an owner-only URL resolves to nothing, and
    lets GitHubError from the primary resource propagate.
    """
    def __init__(self, client: GitHubClient, resolver: Optional[OwnerResolver] = None):
        self.client = client
        self.resolver = resolver or OwnerResolver(client)
        self.scanner = RepoScanner(client)

    def _resolve_owner(self, ref: RepoRef, limit: int) -> OwnerResolution:
        resolution = self.resolver.Resolve(ref.owner, limit)
        if not resolution.found:
            raise OwnerNotFoundError(ref.owner)
        logger.info("Resolved %s as %s with %d repositories", ref.owner, resolution.kind, len(resolution.repos))
        return resolution

    # ===== Repository information =====

    def GetRepoInfo(self, url: str) -> Dict[str, Any]:
        ref = parse_repo_url(url)
        if ref.repo is None:
            return self._owner_info(ref)

        with ThreadPoolExecutor(max_workers=2) as executor:
            repo_future = executor.submit(self.client.get_repo, ref.owner, ref.repo)
            contributors_future = executor.submit(self.client.get_contributors, ref.owner, ref.repo, CONTRIBUTOR_LIMIT)
            repo_info = repo_future.result()
            contributors = contributors_future.result()

        organization, user_info, all_repos = self._owner_enrichment(ref.owner, repo_info)
        return {
            "repoInfo": repo_info,
            "contributors": contributors,
            "isOrganization": False,
            "isUser": False,
            "organization": organization,
            "userInfo": user_info,
            "allRepos": all_repos,
        }

    def _owner_info(self, ref: RepoRef) -> Dict[str, Any]:
        resolution = self._resolve_owner(ref, INFO_REPO_LIMIT)
        top_repo = resolution.repos[0]
        contributors = self.client.get_contributors(ref.owner, top_repo["name"], CONTRIBUTOR_LIMIT)
        return {
            "repoInfo": top_repo,
            "contributors": contributors,
            "isOrganization": resolution.is_organization,
            "isUser": resolution.is_user,
            "organization": resolution.profile if resolution.is_organization else None,
            "userInfo": resolution.profile if resolution.is_user else None,
            "allRepos": resolution.repos,
        }

    def _owner_enrichment(self, owner: str, repo_info: Dict[str, Any]):
        """Owner profile and top repositories attached to a single-repository response; best-effort."""
        owner_type = (repo_info.get("owner") or {}).get("type")
        try:
            if owner_type == "Organization":
                profile = self.client.get_org(owner)
                repos = self.client.get_org_repos(owner, per_page=INFO_REPO_LIMIT)
                return profile, None, top_repos_by_stars(repos, INFO_REPO_LIMIT)
            if owner_type == "User":
                profile = self.client.get_user(owner)
                repos = self.client.get_user_repos(owner, per_page=INFO_REPO_LIMIT)
                return None, profile, top_repos_by_stars(repos, INFO_REPO_LIMIT)
        except GitHubError as e:
            logger.warning("Could not load owner details for %s: %s", owner, e.message)
        return None, None, []

    # ===== Languages =====

    def GetLanguages(self, url: str) -> Dict[str, int]:
        ref = parse_repo_url(url)
        if ref.repo is not None:
            return self.client.get_languages(ref.owner, ref.repo)

        resolution = self._resolve_owner(ref, FANOUT_REPO_LIMIT)
        repos = resolution.repos[:LANGUAGE_REPO_LIMIT]
        combined: Dict[str, int] = {}
        with ThreadPoolExecutor(max_workers=len(repos)) as executor:
            future_to_repo = {
                executor.submit(self.client.get_languages, ref.owner, repo["name"]): repo["name"]
                for repo in repos
            }
            for future in as_completed(future_to_repo):
                name = future_to_repo[future]
                try:
                    languages = future.result()
                except GitHubError as e:
                    logger.warning("Skipping languages of %s/%s: %s", ref.owner, name, e.message)
                    continue
                for language, size in languages.items():
                    combined[language] = combined.get(language, 0) + size
        # stable key order regardless of completion order
        return dict(sorted(combined.items(), key=lambda item: (-item[1], item[0])))

    # ===== Technologies =====

    def GetTechnologies(self, url: str) -> Dict[str, Any]:
        ref = parse_repo_url(url)
        if ref.repo is not None:
            scan = self.scanner.ScanRepository(ref.owner, ref.repo)
            return {
                "technologies": scan.technologies,
                "packageDetails": scan.package.details.to_dict(),
            }

        resolution = self._resolve_owner(ref, FANOUT_REPO_LIMIT)
        repos = resolution.repos[:TECHNOLOGY_REPO_LIMIT]
        scans = {}
        with ThreadPoolExecutor(max_workers=len(repos)) as executor:
            future_to_repo = {
                executor.submit(self.scanner.ScanListedRepository, ref.owner, repo["name"]): repo["name"]
                for repo in repos
            }
            for future in as_completed(future_to_repo):
                name = future_to_repo[future]
                try:
                    scans[name] = future.result()
                except GitHubError as e:
                    logger.warning("Error processing repo %s/%s: %s", ref.owner, name, e.message)

        labels: List[str] = []
        package_details = PackageDetails()
        # merge in star order so later repositories win on version conflicts deterministically
        for repo in repos:
            scan = scans.get(repo["name"])
            if scan is None:
                continue
            labels.extend(scan.technologies)
            package_details.merge(scan.package.details)
        return {
            "technologies": unique_labels(labels),
            "packageDetails": package_details.to_dict(),
            "analyzedRepoCount": len(scans),
        }
