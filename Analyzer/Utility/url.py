"""URL utilities for repository parsing."""
import re
from urllib.parse import urlparse

from Analyzer.Exception.GitHubError import InvalidRepoUrlError
from Analyzer.Model.RepoRef import RepoRef

GITHUB_HOSTS = ("github.com", "www.github.com")

# Shape accepted by the entry form before a request is issued
ENTRY_URL_PATTERN = re.compile(r"^https?://github\.com/[\w-]+(?:/[\w.-]+)?/?$")


def parse_repo_url(url: str) -> RepoRef:
    if not isinstance(url, str) or not url.strip():
        raise InvalidRepoUrlError("GitHub repository URL is required", url)
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        raise InvalidRepoUrlError("The provided URL is not a valid GitHub URL", url)
    host = (parsed.hostname or "").lower()
    if parsed.scheme not in ("http", "https") or host not in GITHUB_HOSTS:
        raise InvalidRepoUrlError("The provided URL is not a valid GitHub URL", url)

    segments = [segment for segment in parsed.path.split("/") if segment]
    if not segments:
        raise InvalidRepoUrlError("Invalid GitHub URL: owner is missing", url)
    if len(segments) == 1:
        return RepoRef(owner=segments[0], repo=None, is_organization_or_user=True)

    repo = segments[1]
    if repo.endswith(".git"):
        repo = repo[:-4]
    return RepoRef(owner=segments[0], repo=repo or None, is_organization_or_user=not repo)


def is_valid_repo_url(url: str) -> bool:
    return bool(url) and ENTRY_URL_PATTERN.match(url.strip()) is not None
