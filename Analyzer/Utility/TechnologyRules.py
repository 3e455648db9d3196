
from typing import Any, Dict, List

# Each rule contributes its label when any normalized (lower-cased) file name
# matches one of its signals. Rules never disable one another.
#   names:     exact file or directory names
#   contains:  substrings of a name
#   suffixes:  file extensions
DEFAULT_TECHNOLOGY_RULES: List[Dict[str, Any]] = [
    # front-end frameworks
    {"label": "Angular", "names": ["angular.json"], "contains": ["angular"]},
    {"label": "React", "names": ["react-app-env.d.ts"], "contains": ["react"]},
    {"label": "Vue.js", "names": ["vue.config.js"], "contains": ["vue"]},
    {"label": "Svelte", "names": ["svelte.config.js"], "contains": ["svelte"]},
    {"label": "Next.js", "names": ["next.config.js"]},
    # back-end languages and frameworks
    {"label": "Express", "contains": ["express"]},
    {"label": "Python", "names": ["requirements.txt"], "suffixes": [".py"]},
    {"label": "Java", "suffixes": [".java"]},
    {"label": "Go", "suffixes": [".go"]},
    {"label": "Ruby", "names": ["gemfile"]},
    {"label": "Rust", "names": ["cargo.toml"]},
    {"label": "PHP", "names": ["composer.json"]},
    {"label": "Java", "names": ["pom.xml"]},
    {"label": "Go", "names": ["go.mod"]},
    # databases
    {"label": "MongoDB", "contains": ["mongo"]},
    {"label": "PostgreSQL", "contains": ["postgres"]},
    {"label": "MySQL", "contains": ["mysql"]},
    # styling
    {"label": "Tailwind", "names": ["tailwind.config.js"]},
    # languages of the web
    {"label": "TypeScript", "names": ["tsconfig.json"], "suffixes": [".ts", ".tsx"]},
    {"label": "JavaScript", "suffixes": [".js", ".jsx"]},
    {"label": "HTML", "suffixes": [".html"]},
    {"label": "CSS", "suffixes": [".css"]},
    # tooling
    {"label": "Node.js", "names": ["package.json"]},
    {"label": "Webpack", "names": ["webpack.config.js"]},
    {"label": "Docker", "names": ["dockerfile", "docker-compose.yml"]},
    {"label": "Travis CI", "names": [".travis.yml"]},
    {"label": "GitHub Actions", "names": [".github/workflows"], "contains": [".github/workflows"]},
]
