from typing import Any, Dict, List

from Analyzer.GitHub.GitHubClient import GitHubClient
from Analyzer.GitHub.Interface.IOwnerSource import IOwnerSource
from Analyzer.Model.OwnerResolution import ORGANIZATION


class OrganizationSource(IOwnerSource):
    kind = ORGANIZATION

    def __init__(self, client: GitHubClient):
        self.client = client

    def FetchProfile(self, owner: str) -> Dict[str, Any]:
        return self.client.get_org(owner)

    def FetchRepos(self, owner: str, limit: int) -> List[Dict[str, Any]]:
        return self.client.get_org_repos(owner, per_page=limit)
