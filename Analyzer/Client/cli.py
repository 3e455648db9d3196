"""
Command-line front end for the GitHub Repo Analyzer API.
Usage:
    repo-analyzer analyze https://github.com/octocat/Hello-World
    repo-analyzer show
    repo-analyzer schema
    repo-analyzer clear
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from Analyzer.Client.ApiClient import ApiClient, ApiError
from Analyzer.Client.SnapshotStore import SnapshotStore
from Analyzer.Client.views import render_dashboard, render_technology_schema
from Analyzer.Business.TechnologySchema import build_technology_graph
from Analyzer.Model.PackageDetails import PackageDetails
from Analyzer.Utility.url import is_valid_repo_url

logger = logging.getLogger(__name__)

GRAPH_SESSION_KEY = "technology-graph"


def _technology_graph(store: SnapshotStore):
    cached = store.read_session(GRAPH_SESSION_KEY)
    if cached and cached.get("repoUrl") == store.snapshot.repo_url:
        return cached["graph"]
    technologies = store.snapshot.technologies or {}
    packages = technologies.get("packageDetails") or {}
    graph = build_technology_graph(
        technologies.get("technologies") or [],
        PackageDetails(
            dependencies=packages.get("dependencies") or {},
            dev_dependencies=packages.get("devDependencies") or {},
        ),
    )
    store.write_session(GRAPH_SESSION_KEY, {"repoUrl": store.snapshot.repo_url, "graph": graph})
    return graph


def Analyze(url: str, store: SnapshotStore, api: ApiClient) -> int:
    if not url:
        print("Error: Please enter a GitHub repository URL", file=sys.stderr)
        return 2
    if not is_valid_repo_url(url):
        print("Error: Please enter a valid GitHub URL (https://github.com/<owner>[/<repo>])", file=sys.stderr)
        return 2

    # a new analysis always starts from a clean slate
    store.clear()
    try:
        repo_info = api.get_repo_info(url)
        languages = api.get_repo_languages(url)
        technologies = api.get_repo_technologies(url)
    except ApiError as e:
        logger.debug("Analysis of %s failed: %s", url, e)
        print(f"Error ({e.status_code or 'network'}): {e.message}", file=sys.stderr)
        return 1

    # only a complete analysis is kept
    store.set_repo_url(url)
    store.set_repo_info(repo_info)
    store.set_languages(languages)
    store.set_technologies(technologies)

    print(render_dashboard(store.snapshot))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="repo-analyzer",
        description="Analyze a GitHub repository, organization or user through the analyzer API",
    )
    parser.add_argument("--api-url", default=None, help="Analyzer API base URL (default: $ANALYZER_API_URL or http://localhost:5000/api)")
    parser.add_argument("--state-dir", default=None, help="Where the last analysis is kept (default: $ANALYZER_STATE_DIR or ~/.repo-analyzer)")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a GitHub URL and keep the result")
    analyze_parser.add_argument("url", help="https://github.com/<owner> or https://github.com/<owner>/<repo>")
    subparsers.add_parser("show", help="Show the last analysis")
    subparsers.add_parser("schema", help="Show the technology schema of the last analysis")
    subparsers.add_parser("clear", help="Forget the last analysis")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else os.environ.get("LOG_LEVEL", "WARNING").upper())

    store = SnapshotStore(args.state_dir)

    if args.command == "analyze":
        return Analyze(args.url, store, ApiClient(args.api_url))
    if args.command == "show":
        print(render_dashboard(store.snapshot))
        return 0
    if args.command == "schema":
        if not store.snapshot.analyzed:
            print(render_dashboard(store.snapshot))
            return 0
        print(render_technology_schema(store.snapshot, _technology_graph(store)))
        return 0
    if args.command == "clear":
        store.clear()
        print("Analysis cleared.")
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
