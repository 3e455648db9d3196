from Analyzer.Business.TechnologySchema import (
    build_technology_graph,
    categorize_technology,
    group_by_category,
)
from Analyzer.Model.PackageDetails import PackageDetails


def test_categorize_known_technologies():
    assert categorize_technology("React") == "frontend"
    assert categorize_technology("docker") == "devops"
    assert categorize_technology("PostgreSQL") == "database"
    assert categorize_technology("jest") == "testing"
    assert categorize_technology("eslint") == "tools"


def test_categorize_keyword_fallbacks():
    assert categorize_technology("prettier-plugin-format") == "tools"
    assert categorize_technology("knex-db") == "database"
    assert categorize_technology("chai-spec") == "testing"
    assert categorize_technology("left-pad") == "other"


def test_graph_links_dependencies_to_node():
    graph = build_technology_graph(
        ["Node.js", "TypeScript", "React"],
        PackageDetails(dependencies={"react": "^18.0.0", "lodash": "^4.0.0"}),
    )
    ids = [node["id"] for node in graph["nodes"]]
    # "react" collides with "React" and is not added twice
    assert ids == ["Node.js", "TypeScript", "React", "lodash"]
    assert {"source": "Node.js", "target": "lodash"} in graph["links"]
    assert {"source": "React", "target": "TypeScript"} in graph["links"]
    assert {"source": "React", "target": "JavaScript"} not in graph["links"]


def test_graph_without_node_has_no_dependency_links():
    graph = build_technology_graph(["Docker", "GitHub Actions"], PackageDetails(dependencies={"lodash": "1"}))
    assert graph["links"] == [{"source": "GitHub Actions", "target": "Docker"}]


def test_group_by_category_order():
    groups = group_by_category(["left-pad", "Docker", "React", "Python"])
    assert list(groups) == ["frontend", "backend", "devops", "other"]
    assert groups["other"] == ["left-pad"]
