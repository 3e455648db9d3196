"""
Groups detected technologies into categories and derives the relation graph
shown by the technology schema view.
"""
from typing import Any, Dict, List, Optional

from Analyzer.Model.PackageDetails import PackageDetails

TECHNOLOGY_CATEGORIES: Dict[str, List[str]] = {
    "frontend": [
        "React", "Angular", "Vue.js", "Svelte", "Next.js", "Nuxt.js",
        "TypeScript", "JavaScript", "HTML", "CSS", "Tailwind", "Bootstrap",
        "Material-UI", "Chakra UI", "Styled Components",
    ],
    "backend": [
        "Node.js", "Express", "Django", "Flask", "Spring", "ASP.NET",
        "Laravel", "Ruby on Rails", "PHP", "Java", "Python", "Go", "Rust",
    ],
    "database": [
        "MongoDB", "PostgreSQL", "MySQL", "SQLite", "Redis", "Elasticsearch",
        "Firestore", "DynamoDB", "Cassandra", "Neo4j",
    ],
    "devops": [
        "Docker", "Kubernetes", "GitHub Actions", "Travis CI", "Jenkins",
        "CircleCI", "AWS", "Google Cloud", "Azure", "Heroku", "Netlify", "Vercel",
    ],
    "testing": [
        "Jest", "Mocha", "Cypress", "Selenium", "Puppeteer", "React Testing Library",
        "Enzyme", "JUnit", "PyTest",
    ],
    "mobile": ["React Native", "Flutter", "Swift", "Kotlin", "Ionic", "Xamarin"],
    "tools": ["Webpack", "Babel", "ESLint", "Prettier", "npm", "Yarn", "Vite", "Rollup"],
}

# Checked in order when no category table matches
KEYWORD_FALLBACKS = [
    (("lint", "format"), "tools"),
    (("db", "sql"), "database"),
    (("test", "spec"), "testing"),
    (("ui", "css"), "frontend"),
    (("server", "api"), "backend"),
]

CATEGORY_COLORS: Dict[str, str] = {
    "frontend": "#3B82F6",
    "backend": "#10B981",
    "database": "#6366F1",
    "devops": "#F59E0B",
    "testing": "#EC4899",
    "mobile": "#8B5CF6",
    "tools": "#6B7280",
    "other": "#9CA3AF",
}

KNOWN_RELATIONS = [
    ("React", "TypeScript"),
    ("React", "JavaScript"),
    ("Vue.js", "JavaScript"),
    ("Angular", "TypeScript"),
    ("Express", "Node.js"),
    ("Mongoose", "MongoDB"),
    ("Sequelize", "PostgreSQL"),
    ("Sequelize", "MySQL"),
    ("GitHub Actions", "Docker"),
    ("Travis CI", "Docker"),
]


def categorize_technology(label: str) -> str:
    tech = label.lower()
    for category, technologies in TECHNOLOGY_CATEGORIES.items():
        for known in technologies:
            known = known.lower()
            if known == tech or known in tech:
                return category
    for keywords, category in KEYWORD_FALLBACKS:
        if any(keyword in tech for keyword in keywords):
            return category
    return "other"


def build_technology_graph(technologies: List[str], package_details: Optional[PackageDetails] = None) -> Dict[str, Any]:
    package_details = package_details or PackageDetails()
    nodes: List[Dict[str, str]] = []
    links: List[Dict[str, str]] = []
    seen = set()

    def add_node(label: str) -> None:
        if label.lower() in seen:
            return
        category = categorize_technology(label)
        nodes.append({"id": label, "label": label, "category": category, "color": CATEGORY_COLORS[category]})
        seen.add(label.lower())

    for tech in technologies:
        add_node(tech)

    has_node = any(node["id"] == "Node.js" for node in nodes)
    for dependency in package_details.names():
        add_node(dependency)
        if has_node:
            links.append({"source": "Node.js", "target": dependency})

    ids = {node["id"] for node in nodes}
    for source, target in KNOWN_RELATIONS:
        if source in ids and target in ids:
            links.append({"source": source, "target": target})

    return {"nodes": nodes, "links": links}


def group_by_category(technologies: List[str]) -> Dict[str, List[str]]:
    """Category name to labels, in the display order of the category tables, empty categories left out."""
    groups: Dict[str, List[str]] = {}
    for tech in technologies:
        groups.setdefault(categorize_technology(tech), []).append(tech)
    order = list(TECHNOLOGY_CATEGORIES) + ["other"]
    return {category: groups[category] for category in order if category in groups}
