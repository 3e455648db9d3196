from typing import Any, Dict, Mapping, Tuple

PROXY_ENDPOINTS = ("info", "languages", "technologies")


def validate_url_param(args: Mapping[str, Any]) -> str:
    url = args.get("url")
    if not url or not isinstance(url, str) or not url.strip():
        raise ValueError("Please provide a GitHub repository URL")
    return url.strip()


def validate_proxy_payload(data: Dict[str, Any]) -> Tuple[str, str]:
    url = validate_url_param(data)
    endpoint = data.get("endpoint")
    if endpoint not in PROXY_ENDPOINTS:
        raise ValueError(f"Field 'endpoint' must be one of: {', '.join(PROXY_ENDPOINTS)}")
    return url, endpoint


def error_body(error: str, message: str, **extra: Any) -> Dict[str, Any]:
    body = {"error": error, "message": message or "An unexpected error occurred"}
    body.update(extra)
    return body


def empty_technologies() -> Dict[str, Any]:
    return {
        "technologies": [],
        "packageDetails": {"dependencies": {}, "devDependencies": {}},
    }
