"""Resolve an owner-only URL to an organization, a user, or nothing."""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

from Analyzer.Exception.GitHubError import GitHubError
from Analyzer.GitHub.GitHubClient import GitHubClient
from Analyzer.GitHub.Interface.IOwnerSource import IOwnerSource
from Analyzer.GitHub.Implementation.OrganizationSource import OrganizationSource
from Analyzer.GitHub.Implementation.UserSource import UserSource
from Analyzer.Model.OwnerResolution import OwnerResolution

import logging
logger = logging.getLogger(__name__)


def top_repos_by_stars(repos: List[Dict[str, Any]], limit: int) -> List[Dict[str, Any]]:
    # the org listing ignores sort=stars, so order locally
    ordered = sorted(repos, key=lambda r: r.get("stargazers_count") or 0, reverse=True)
    return ordered[:limit]


class OwnerResolver:
    """Tries each source in order; the first that returns a profile and at least one repository wins."""

    def __init__(self, client: GitHubClient, sources: Optional[Sequence[IOwnerSource]] = None):
        self.sources = list(sources) if sources is not None else [OrganizationSource(client), UserSource(client)]

    def Resolve(self, owner: str, limit: int) -> OwnerResolution:
        for source in self.sources:
            try:
                with ThreadPoolExecutor(max_workers=2) as executor:
                    profile_future = executor.submit(source.FetchProfile, owner)
                    repos_future = executor.submit(source.FetchRepos, owner, limit)
                    profile = profile_future.result()
                    repos = repos_future.result()
            except GitHubError as e:
                logger.info("Owner %s is not a %s (%s)", owner, source.kind, e.message)
                continue

            if not repos:
                logger.info("%s %s has no repositories", source.kind.capitalize(), owner)
                return OwnerResolution.not_found(owner)
            return OwnerResolution(
                kind=source.kind,
                owner=owner,
                profile=profile,
                repos=top_repos_by_stars(repos, limit),
            )
        return OwnerResolution.not_found(owner)
