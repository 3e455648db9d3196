"""
Flask REST API for the GitHub Repository Analyzer

This module exposes repository analytics computed from the GitHub REST API
to UI clients over HTTP.

Endpoints:
    GET  /api/repo/info?url=...          - Repository, contributors and owner details
    GET  /api/repo/languages?url=...     - Language byte counts
    GET  /api/repo/technologies?url=...  - Detected technologies and package.json dependencies
    POST /api/github                     - Raw GitHub payload for one of the above
    GET  /api/health-check               - Health check
"""

import logging
from typing import Any, Callable, Dict, Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from Analyzer.Utility.config import AppConfig, load_config
from Analyzer.Exception.GitHubError import GitHubError, OwnerNotFoundError
from Analyzer.GitHub.GitHubClient import GitHubClient
from Analyzer.Business.AnalysisBusiness import AnalysisBusiness
from Analyzer.Routes.validators import validate_url_param, validate_proxy_payload, error_body, empty_technologies
from Analyzer.Utility.url import parse_repo_url

logger = logging.getLogger(__name__)

CORS_ALLOWED_HEADERS = [
    "X-CSRF-Token", "X-Requested-With", "Accept", "Accept-Version", "Content-Length",
    "Content-MD5", "Content-Type", "Date", "X-Api-Version",
]
CORS_METHODS = ["GET", "OPTIONS", "POST"]

"""Create and configure the Flask application.
    Args:
        config: Optional AppConfig; read from the environment (and .env) when omitted
        client: Optional GitHubClient; built from config when omitted
    Returns:
        Flask application instance
"""
def CreateApp(config: Optional[AppConfig] = None, client: Optional[GitHubClient] = None):

    config = config or load_config()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))

    app = Flask(__name__)
    # Any origin may read the API
    CORS(app, resources={r"/api/*": {"origins": "*"}}, methods=CORS_METHODS, allow_headers=CORS_ALLOWED_HEADERS)

    client = client or GitHubClient(
        token=config.github_token,
        base_url=config.github_api_root,
        timeout=config.request_timeout,
    )
    logger.info("GitHub API root: %s (token configured: %s)", config.github_api_root, bool(config.github_token))
    RegisterRoutes(app, AnalysisBusiness(client), client)
    return app

"""Run one analysis and translate failures to JSON error responses.
    Args:
        action: Bound AnalysisBusiness method taking the submitted URL
        what: Human readable name of the resource, used in messages
        failure_fields: Extra fields merged into every error body
"""
def RunAnalysis(action: Callable[[str], Any], what: str, failure_fields: Optional[Dict[str, Any]] = None):
    failure_fields = failure_fields or {}
    url = None
    try:
        url = validate_url_param(request.args)
        logger.info("Fetching %s for %s", what, url)
        result = action(url)
        logger.info("Fetched %s for %s", what, url)
        return jsonify(result), 200

    except ValueError as e:
        logger.info("Rejected %s request: %s", what, e)
        return jsonify(error_body("invalid_parameter", str(e), **failure_fields)), 400

    except OwnerNotFoundError as e:
        logger.info("Owner not found: %s", e.owner)
        return jsonify(error_body("not_found", e.message, **failure_fields)), 404

    except GitHubError as e:
        logger.error("GitHub API error while fetching %s for %s: %s (%s)", what, url, e.message, e.status_code)
        return jsonify(error_body(
            "github_error",
            f"Failed to fetch repository {what}: {e.message}",
            upstreamStatus=e.status_code,
            **failure_fields
        )), 500

    except Exception as e:
        logger.exception("Error fetching %s for %s", what, url)
        return jsonify(error_body("internal_error", f"Failed to fetch repository {what}: {e}", **failure_fields)), 500

"""Register all API routes.
    Args:
        app: Flask application instance
        business: AnalysisBusiness serving the repository endpoints
        client: GitHubClient used by the raw proxy endpoint
"""
def RegisterRoutes(app: Flask, business: AnalysisBusiness, client: GitHubClient) -> None:

    @app.route("/")
    def index():
        return jsonify({"message": "GitHub Repo Analyzer API running!"})

    """Health check endpoint.
        Returns:
            JSON response with status
    """
    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "GitHub Repo Analyzer API is running"
        }), 200

    @app.route('/api/repo/info', methods=['GET', 'OPTIONS'])
    def RepoInfoEndpoint():
        if request.method == 'OPTIONS':
            return "", 200
        return RunAnalysis(business.GetRepoInfo, "information")

    @app.route('/api/repo/languages', methods=['GET', 'OPTIONS'])
    def RepoLanguagesEndpoint():
        if request.method == 'OPTIONS':
            return "", 200
        return RunAnalysis(business.GetLanguages, "languages")

    @app.route('/api/repo/technologies', methods=['GET', 'OPTIONS'])
    def RepoTechnologiesEndpoint():
        if request.method == 'OPTIONS':
            return "", 200
        # clients read these fields even from a failed response
        return RunAnalysis(business.GetTechnologies, "technologies", empty_technologies())

    """Forward a request straight to the GitHub API.
        Request JSON body:
        {
            "url": "https://github.com/owner/repo",   # Required
            "endpoint": "info"                        # Required: info | languages | technologies
        }
        Returns:
            The unmodified GitHub payload or an error
    """
    @app.route('/api/github', methods=['POST', 'OPTIONS'])
    def GitHubProxyEndpoint():
        if request.method == 'OPTIONS':
            return "", 200
        try:
            data = request.get_json(silent=True) or {}
            url, endpoint = validate_proxy_payload(data)
            ref = parse_repo_url(url)
            if ref.repo is None:
                raise ValueError("The provided URL is not a valid GitHub repository URL")
        except ValueError as e:
            return jsonify(error_body("invalid_parameter", str(e))), 400

        try:
            if endpoint == "info":
                payload = client.get_repo(ref.owner, ref.repo)
            elif endpoint == "languages":
                payload = client.get_languages(ref.owner, ref.repo)
            else:
                payload = client.get_contents(ref.owner, ref.repo)
            return jsonify(payload), 200
        except GitHubError as e:
            logger.error("GitHub API error proxying %s for %s: %s", endpoint, url, e.message)
            return jsonify(error_body("github_error", e.message, upstreamStatus=e.status_code)), 500

    """Handle 404 errors.

        Args:
            error: The error object

        Returns:
            JSON response with error
    """
    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/repo/info?url=<GitHub URL>"
        }), 404

    """Handle 405 errors.
        Args:
            error: The error object
        Returns:
            JSON response with error
    """
    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
