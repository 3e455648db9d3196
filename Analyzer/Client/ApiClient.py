"""
HTTP client for the analyzer API, used by the command-line front end.
"""
from typing import Any, Dict, Optional
import os
import requests

import logging
logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000/api"


class ApiError(Exception):
    def __init__(self, status_code: int, error: str, message: str):
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(self.message)


class ApiClient:
    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout: float = 60.0):
        self.base = (base_url or os.environ.get("ANALYZER_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, path: str, repo_url: str) -> Any:
        url = f"{self.base}/{path}"
        try:
            response = self.session.get(url, params={"url": repo_url}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiError(0, "connection_error", f"Could not reach the analyzer API at {self.base}: {e}")
        try:
            body = response.json()
        except ValueError:
            body = None
        if response.status_code != 200:
            if isinstance(body, dict):
                raise ApiError(response.status_code, body.get("error", "error"), body.get("message") or body.get("error", ""))
            raise ApiError(response.status_code, "error", f"Analyzer API returned {response.status_code}")
        if body is None:
            raise ApiError(response.status_code, "invalid_response", "Analyzer API returned a non-JSON body")
        return body

    def get_repo_info(self, repo_url: str) -> Dict[str, Any]:
        return self._get("repo/info", repo_url)

    def get_repo_languages(self, repo_url: str) -> Dict[str, int]:
        return self._get("repo/languages", repo_url)

    def get_repo_technologies(self, repo_url: str) -> Dict[str, Any]:
        return self._get("repo/technologies", repo_url)
