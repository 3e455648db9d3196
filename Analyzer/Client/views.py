"""Plain-text renderings of a stored analysis."""
from typing import Any, Dict, List, Optional

from Analyzer.Model.AnalysisSnapshot import AnalysisSnapshot
from Analyzer.Business.TechnologySchema import group_by_category

TOP_REPOS_SHOWN = 6
CONTRIBUTORS_SHOWN = 8
BAR_WIDTH = 30


def language_shares(languages: Dict[str, int]) -> List[Dict[str, Any]]:
    """Languages with their share of the total bytes, largest first."""
    total = sum(languages.values())
    if not total:
        return []
    ordered = sorted(languages.items(), key=lambda item: (-item[1], item[0]))
    return [
        {"language": name, "bytes": size, "percentage": round(size * 100.0 / total, 1)}
        for name, size in ordered
    ]


def _header(title: str) -> List[str]:
    return [title, "-" * len(title)]


def _owner_lines(info: Dict[str, Any]) -> List[str]:
    if info.get("isOrganization") and info.get("organization"):
        org = info["organization"]
        lines = _header(f"Organization: {org.get('name') or org.get('login')}")
        if org.get("description"):
            lines.append(org["description"])
        lines.append(f"Public repositories: {org.get('public_repos', 0)}")
        return lines
    if info.get("isUser") and info.get("userInfo"):
        user = info["userInfo"]
        lines = _header(f"User: {user.get('name') or user.get('login')}")
        if user.get("bio"):
            lines.append(user["bio"])
        lines.append(f"Public repositories: {user.get('public_repos', 0)}")
        return lines
    return []


def render_dashboard(snapshot: AnalysisSnapshot) -> str:
    if not snapshot.analyzed:
        return "No analysis yet. Run `repo-analyzer analyze <GitHub URL>` first."

    info = snapshot.repo_info or {}
    lines: List[str] = [f"Analysis of {snapshot.repo_url}", ""]

    owner = _owner_lines(info)
    if owner:
        lines.extend(owner + [""])

    repo = info.get("repoInfo")
    if repo:
        lines.extend(_header(f"Repository: {repo.get('name')}"))
        if repo.get("description"):
            lines.append(repo["description"])
        lines.append(
            f"Stars: {repo.get('stargazers_count', 0)}  Forks: {repo.get('forks_count', 0)}  "
            f"Watchers: {repo.get('watchers_count', 0)}"
        )
        if repo.get("created_at"):
            lines.append(f"Created: {repo['created_at']}  Updated: {repo.get('updated_at')}")
        if repo.get("html_url"):
            lines.append(repo["html_url"])
        lines.append("")

    all_repos = info.get("allRepos") or []
    if all_repos:
        lines.extend(_header("Top repositories"))
        for item in all_repos[:TOP_REPOS_SHOWN]:
            lines.append(f"  {str(item.get('name')):<30} ★ {item.get('stargazers_count', 0):>7}  forks {item.get('forks_count', 0)}")
        lines.append("")

    contributors = info.get("contributors") or []
    if contributors:
        lines.extend(_header("Contributors"))
        for contributor in contributors[:CONTRIBUTORS_SHOWN]:
            lines.append(f"  {str(contributor.get('login')):<30} {contributor.get('contributions', 0)} contributions")
        lines.append("")

    shares = language_shares(snapshot.languages)
    if shares:
        lines.extend(_header("Languages"))
        for share in shares:
            bar = "#" * max(1, int(share["percentage"] * BAR_WIDTH / 100))
            lines.append(f"  {share['language']:<20} {share['percentage']:>5}% {bar}")
        lines.append("")

    technologies = (snapshot.technologies or {}).get("technologies") or []
    if technologies:
        lines.extend(_header("Technologies"))
        lines.append("  " + ", ".join(technologies))

    return "\n".join(lines).rstrip() + "\n"


def render_technology_schema(snapshot: AnalysisSnapshot, graph: Optional[Dict[str, Any]] = None) -> str:
    technologies = snapshot.technologies or {}
    labels = technologies.get("technologies") or []
    if not labels:
        return "No technologies detected.\n"

    lines: List[str] = [f"Technology schema for {snapshot.repo_url}", ""]
    if technologies.get("analyzedRepoCount") is not None:
        lines.extend([f"Repositories analyzed: {technologies['analyzedRepoCount']}", ""])

    for category, members in group_by_category(labels).items():
        lines.extend(_header(category.capitalize()))
        lines.extend(f"  {member}" for member in members)
        lines.append("")

    package_details = technologies.get("packageDetails") or {}
    for key, title in (("dependencies", "Dependencies"), ("devDependencies", "Dev dependencies")):
        entries = package_details.get(key) or {}
        if entries:
            lines.extend(_header(title))
            lines.extend(f"  {name} {version}" for name, version in sorted(entries.items()))
            lines.append("")

    if graph and graph.get("links"):
        lines.extend(_header("Relations"))
        lines.extend(f"  {link['source']} -> {link['target']}" for link in graph["links"])

    return "\n".join(lines).rstrip() + "\n"
