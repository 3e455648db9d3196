import base64
import json

import pytest

from Analyzer.GitHub.GitHubClient import GitHubClient
from Analyzer.Routes.RepoRoute import CreateApp
from Analyzer.Utility.config import AppConfig

API = "https://api.github.com"


class DummyResponse:
    def __init__(self, status_code, json_data=None):
        self.status_code = status_code
        self._json = json_data

    def json(self):
        if self._json is None:
            raise ValueError("No JSON")
        return self._json


class DummySession:
    def __init__(self, responses):
        self.responses = responses
        self.headers = {}

    def get(self, url, params=None, timeout=None):
        return self.responses.get(("GET", url), DummyResponse(404, {"message": "Not Found"}))


def listing(*names):
    return DummyResponse(200, [{"name": name} for name in names])


def file_response(data):
    raw = json.dumps(data).encode("utf-8")
    return DummyResponse(200, {"content": base64.b64encode(raw).decode("ascii"), "encoding": "base64"})


def make_client(responses, session_cls=DummySession):
    client = GitHubClient(token=None, session=session_cls(responses))
    app = CreateApp(AppConfig(), client=client)
    return app.test_client()


# ===== /api/repo/info =====

def test_info_single_repository():
    client = make_client({
        ("GET", f"{API}/repos/octocat/Hello-World"): DummyResponse(200, {
            "name": "Hello-World", "owner": {"login": "octocat", "type": "User"},
        }),
        ("GET", f"{API}/repos/octocat/Hello-World/contributors"): DummyResponse(200, [{"login": "octocat", "contributions": 32}]),
        ("GET", f"{API}/users/octocat"): DummyResponse(200, {"login": "octocat", "public_repos": 8}),
        ("GET", f"{API}/users/octocat/repos"): DummyResponse(200, [
            {"name": "Spoon-Knife", "stargazers_count": 12},
            {"name": "Hello-World", "stargazers_count": 2500},
        ]),
    })
    resp = client.get("/api/repo/info", query_string={"url": "https://github.com/octocat/Hello-World"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["isOrganization"] is False
    assert data["isUser"] is False
    assert data["repoInfo"]["name"] == "Hello-World"
    assert data["contributors"][0]["login"] == "octocat"
    assert data["userInfo"]["login"] == "octocat"
    assert data["organization"] is None
    assert [r["name"] for r in data["allRepos"]] == ["Hello-World", "Spoon-Knife"]


def test_info_single_repository_without_owner_details():
    client = make_client({
        ("GET", f"{API}/repos/octocat/Hello-World"): DummyResponse(200, {
            "name": "Hello-World", "owner": {"login": "octocat", "type": "User"},
        }),
        ("GET", f"{API}/repos/octocat/Hello-World/contributors"): DummyResponse(200, []),
    })
    resp = client.get("/api/repo/info", query_string={"url": "https://github.com/octocat/Hello-World"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["userInfo"] is None
    assert data["allRepos"] == []


def test_info_empty_repository_has_no_contributors():
    client = make_client({
        ("GET", f"{API}/repos/octocat/empty"): DummyResponse(200, {
            "name": "empty", "owner": {"login": "octocat", "type": "User"},
        }),
        ("GET", f"{API}/repos/octocat/empty/contributors"): DummyResponse(204),
    })
    resp = client.get("/api/repo/info", query_string={"url": "https://github.com/octocat/empty"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["repoInfo"]["name"] == "empty"
    assert data["contributors"] == []


def test_info_organization():
    org_repos = [{"name": f"repo{i}", "stargazers_count": stars} for i, stars in enumerate([5, 90, 40, 7, 300, 1, 60, 2])]
    client = make_client({
        ("GET", f"{API}/orgs/microsoft"): DummyResponse(200, {"login": "microsoft", "name": "Microsoft"}),
        ("GET", f"{API}/orgs/microsoft/repos"): DummyResponse(200, org_repos),
        ("GET", f"{API}/repos/microsoft/repo4/contributors"): DummyResponse(200, [{"login": "dev", "contributions": 3}]),
    })
    resp = client.get("/api/repo/info", query_string={"url": "https://github.com/microsoft"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["isOrganization"] is True
    assert data["isUser"] is False
    assert data["organization"]["name"] == "Microsoft"
    stars = [r["stargazers_count"] for r in data["allRepos"]]
    assert len(stars) <= 6
    assert stars == sorted(stars, reverse=True)
    assert data["repoInfo"]["name"] == "repo4"
    assert data["contributors"] == [{"login": "dev", "contributions": 3}]


def test_info_user_fallback():
    client = make_client({
        ("GET", f"{API}/users/octocat"): DummyResponse(200, {"login": "octocat"}),
        ("GET", f"{API}/users/octocat/repos"): DummyResponse(200, [{"name": "Hello-World", "stargazers_count": 1}]),
        ("GET", f"{API}/repos/octocat/Hello-World/contributors"): DummyResponse(200, []),
    })
    resp = client.get("/api/repo/info", query_string={"url": "https://github.com/octocat"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["isUser"] is True
    assert data["isOrganization"] is False
    assert data["userInfo"]["login"] == "octocat"


def test_info_unknown_owner_is_404():
    client = make_client({})
    resp = client.get("/api/repo/info", query_string={"url": "https://github.com/ghost"})
    assert resp.status_code == 404
    data = resp.get_json()
    assert data["error"] == "not_found"
    assert data["message"]


def test_info_upstream_failure_is_500():
    client = make_client({})
    resp = client.get("/api/repo/info", query_string={"url": "https://github.com/octocat/missing"})
    assert resp.status_code == 500
    data = resp.get_json()
    assert data["error"] == "github_error"
    assert data["upstreamStatus"] == 404


# ===== input validation =====

@pytest.mark.parametrize("path", ["/api/repo/info", "/api/repo/languages", "/api/repo/technologies"])
def test_malformed_url_is_400(path):
    client = make_client({})
    resp = client.get(path, query_string={"url": "not a url"})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["error"] == "invalid_parameter"
    assert data["message"]


@pytest.mark.parametrize("path", ["/api/repo/info", "/api/repo/languages", "/api/repo/technologies"])
def test_missing_url_is_400(path):
    client = make_client({})
    resp = client.get(path)
    assert resp.status_code == 400
    assert resp.get_json()["message"]


@pytest.mark.parametrize("path", ["/api/repo/info", "/api/repo/languages", "/api/repo/technologies"])
def test_options_preflight(path):
    client = make_client({})
    resp = client.options(path, headers={"Origin": "http://example.com", "Access-Control-Request-Method": "GET"})
    assert resp.status_code == 200
    assert resp.data == b""
    assert resp.headers.get("Access-Control-Allow-Origin") == "*"


# ===== /api/repo/languages =====

def test_languages_single_repository():
    client = make_client({
        ("GET", f"{API}/repos/pallets/flask/languages"): DummyResponse(200, {"Python": 1200, "HTML": 30}),
    })
    resp = client.get("/api/repo/languages", query_string={"url": "https://github.com/pallets/flask"})
    assert resp.status_code == 200
    assert resp.get_json() == {"Python": 1200, "HTML": 30}


def test_languages_organization_are_summed():
    client = make_client({
        ("GET", f"{API}/orgs/acme"): DummyResponse(200, {"login": "acme"}),
        ("GET", f"{API}/orgs/acme/repos"): DummyResponse(200, [
            {"name": "x", "stargazers_count": 3},
            {"name": "y", "stargazers_count": 2},
            {"name": "broken", "stargazers_count": 1},
        ]),
        ("GET", f"{API}/repos/acme/x/languages"): DummyResponse(200, {"Python": 100, "Go": 10}),
        ("GET", f"{API}/repos/acme/y/languages"): DummyResponse(200, {"Python": 5}),
        ("GET", f"{API}/repos/acme/broken/languages"): DummyResponse(500, {"message": "Server Error"}),
    })
    resp = client.get("/api/repo/languages", query_string={"url": "https://github.com/acme"})
    assert resp.status_code == 200
    assert resp.get_json() == {"Python": 105, "Go": 10}


# ===== /api/repo/technologies =====

def test_technologies_single_repository():
    client = make_client({
        ("GET", f"{API}/repos/o/r/contents"): listing("package.json", "tsconfig.json", "Dockerfile"),
        ("GET", f"{API}/repos/o/r/contents/package.json"): file_response({"dependencies": {"express": "^4.18.0"}}),
    })
    resp = client.get("/api/repo/technologies", query_string={"url": "https://github.com/o/r"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["technologies"] == ["Docker", "Node.js", "TypeScript", "express"]
    assert data["packageDetails"] == {"dependencies": {"express": "^4.18.0"}, "devDependencies": {}}
    assert "analyzedRepoCount" not in data


def test_technologies_nothing_detected():
    client = make_client({
        ("GET", f"{API}/repos/o/plain/contents"): listing("README", "LICENSE"),
    })
    resp = client.get("/api/repo/technologies", query_string={"url": "https://github.com/o/plain"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["technologies"] == []
    assert data["packageDetails"] == {"dependencies": {}, "devDependencies": {}}


def test_technologies_unreadable_repository_still_200():
    client = make_client({})
    resp = client.get("/api/repo/technologies", query_string={"url": "https://github.com/o/missing"})
    assert resp.status_code == 200
    assert resp.get_json()["technologies"] == []


def test_technologies_organization():
    client = make_client({
        ("GET", f"{API}/orgs/acme"): DummyResponse(200, {"login": "acme"}),
        ("GET", f"{API}/orgs/acme/repos"): DummyResponse(200, [
            {"name": "d", "stargazers_count": 0},
            {"name": "c", "stargazers_count": 1},
            {"name": "b", "stargazers_count": 5},
            {"name": "a", "stargazers_count": 10},
        ]),
        ("GET", f"{API}/repos/acme/a/contents"): listing("package.json"),
        ("GET", f"{API}/repos/acme/a/contents/package.json"): file_response({"dependencies": {"react": "^18.0.0"}}),
        ("GET", f"{API}/repos/acme/b/contents"): DummyResponse(500, {"message": "Server Error"}),
        ("GET", f"{API}/repos/acme/c/contents"): listing("main.go"),
        ("GET", f"{API}/repos/acme/d/contents"): listing("Cargo.toml"),
    })
    resp = client.get("/api/repo/technologies", query_string={"url": "https://github.com/acme"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["technologies"] == ["Go", "Node.js", "react"]
    assert data["packageDetails"]["dependencies"] == {"react": "^18.0.0"}
    assert data["analyzedRepoCount"] == 2


def test_technologies_unexpected_failure_keeps_shape():
    class BrokenSession(DummySession):
        def get(self, url, params=None, timeout=None):
            raise RuntimeError("unexpected")

    client = make_client({}, session_cls=BrokenSession)
    resp = client.get("/api/repo/technologies", query_string={"url": "https://github.com/acme"})
    assert resp.status_code == 500
    data = resp.get_json()
    assert data["error"] == "internal_error"
    assert data["message"]
    assert data["technologies"] == []
    assert data["packageDetails"] == {"dependencies": {}, "devDependencies": {}}


# ===== other routes =====

def test_github_proxy():
    client = make_client({
        ("GET", f"{API}/repos/o/r/languages"): DummyResponse(200, {"Rust": 42}),
    })
    resp = client.post("/api/github", json={"url": "https://github.com/o/r", "endpoint": "languages"})
    assert resp.status_code == 200
    assert resp.get_json() == {"Rust": 42}


def test_github_proxy_rejects_unknown_endpoint():
    client = make_client({})
    resp = client.post("/api/github", json={"url": "https://github.com/o/r", "endpoint": "issues"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid_parameter"


def test_health_check_and_unknown_route():
    client = make_client({})
    assert client.get("/api/health-check").get_json()["status"] == "healthy"
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"


def test_wrong_method_is_405():
    client = make_client({})
    resp = client.delete("/api/repo/info")
    assert resp.status_code == 405
    assert resp.get_json()["error"] == "method_not_allowed"
