"""
Lightweight GitHub API client to centralize HTTP interactions and error handling.
"""
import base64
import binascii
from typing import Any, Dict, List, Optional

import requests

from Analyzer.Exception.GitHubError import GitHubError
from Analyzer.Utility.config import DEFAULT_API_ROOT

import logging
logger = logging.getLogger(__name__)

USER_AGENT = "GitHub-Repo-Analyzer"


class GitHubClient:
    def __init__(self, token: Optional[str] = None, base_url: str = DEFAULT_API_ROOT,
                 session: Optional[requests.Session] = None, timeout: float = 15.0):
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        })
        if token:
            self.session.headers.update({"Authorization": f"token {token}"})
        self.base = base_url.rstrip("/")
        self.timeout = timeout

    def _handle_response(self, response: requests.Response, path: str) -> Any:
        if not 200 <= response.status_code < 300:
            message = None
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("message")
            except ValueError:
                pass
            if response.status_code == 404:
                raise GitHubError(message or f"Not found: {path}", 404)
            if response.status_code == 401:
                raise GitHubError(message or "Unauthorized: Invalid GitHub token", 401)
            raise GitHubError(message or f"GitHub API error: {response.status_code}", response.status_code)
        # e.g. contributors of an empty repository
        if response.status_code == 204:
            return None
        try:
            return response.json()
        except ValueError:
            if not response.content:
                return None
            raise GitHubError(f"GitHub API returned a non-JSON body for {path}", 502)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)
        try:
            if params:
                response = self.session.get(url, params=params, timeout=self.timeout)
            else:
                response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GitHubError(f"GitHub API unreachable: {e}", 502)
        return self._handle_response(response, path)

    def get_repo(self, owner: str, repo: str) -> Dict[str, Any]:
        return self.get(f"repos/{owner}/{repo}")

    def get_contributors(self, owner: str, repo: str, per_page: int = 10) -> List[Dict[str, Any]]:
        return self.get(f"repos/{owner}/{repo}/contributors", {"per_page": per_page}) or []

    def get_languages(self, owner: str, repo: str) -> Dict[str, int]:
        return self.get(f"repos/{owner}/{repo}/languages") or {}

    def get_contents(self, owner: str, repo: str, path: str = "") -> Any:
        if path:
            return self.get(f"repos/{owner}/{repo}/contents/{path.strip('/')}")
        return self.get(f"repos/{owner}/{repo}/contents")

    def get_file_text(self, owner: str, repo: str, path: str) -> str:
        data = self.get_contents(owner, repo, path)
        if not isinstance(data, dict) or "content" not in data:
            raise GitHubError(f"{path} is not a file in {owner}/{repo}", 422)
        try:
            return base64.b64decode(data["content"]).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise GitHubError(f"Could not decode {path} in {owner}/{repo}: {e}", 422)

    def get_org(self, org: str) -> Dict[str, Any]:
        return self.get(f"orgs/{org}")

    def get_org_repos(self, org: str, per_page: int = 6, sort: str = "stars", direction: str = "desc") -> List[Dict[str, Any]]:
        return self.get(f"orgs/{org}/repos", {"sort": sort, "direction": direction, "per_page": per_page})

    def get_user(self, user: str) -> Dict[str, Any]:
        return self.get(f"users/{user}")

    def get_user_repos(self, user: str, per_page: int = 6, sort: str = "stars", direction: str = "desc") -> List[Dict[str, Any]]:
        return self.get(f"users/{user}/repos", {"sort": sort, "direction": direction, "per_page": per_page})
