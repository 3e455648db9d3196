"""Configuration helpers (.env loading, token lookup, application settings)."""
import os
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_API_ROOT = "https://api.github.com"


ENV_FILE_COMMENT = "#"


def _parse_env_line(line: str) -> Optional[Tuple[str, str]]:
    line = line.strip()
    if not line or line.startswith(ENV_FILE_COMMENT) or "=" not in line:
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    key, _, value = line.partition("=")
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key.strip(), value


def read_env_file(filepath: str = ".env") -> Dict[str, str]:
    """KEY=value pairs of a dotenv file; a missing or unreadable file yields nothing."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            pairs = [_parse_env_line(line) for line in f]
    except FileNotFoundError:
        logger.debug(".env file not found: %s", filepath)
        return {}
    except OSError as e:
        logger.warning("Could not read %s: %s", filepath, e)
        return {}
    return dict(pair for pair in pairs if pair)


def get_github_token() -> Optional[str]:
    return os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


"""Settings consumed by the API server."""
@dataclass
class AppConfig:
    github_token: Optional[str] = None
    github_api_root: str = DEFAULT_API_ROOT
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"
    request_timeout: float = 15.0


def load_config(env_file: Optional[str] = ".env") -> AppConfig:
    if env_file:
        # values already exported win over the file
        for key, value in read_env_file(env_file).items():
            os.environ.setdefault(key, value)
    try:
        port = int(os.environ.get("PORT", "5000"))
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {os.environ.get('PORT')!r}")
    try:
        timeout = float(os.environ.get("GITHUB_REQUEST_TIMEOUT", "15"))
    except ValueError:
        raise ValueError("GITHUB_REQUEST_TIMEOUT must be a number of seconds")
    return AppConfig(
        github_token=get_github_token(),
        github_api_root=os.environ.get("GITHUB_API_ROOT") or DEFAULT_API_ROOT,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=port,
        debug=_env_bool("FLASK_DEBUG"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        request_timeout=timeout,
    )
