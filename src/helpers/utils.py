# Request building helpers shared by the wrapper and the domain APIs
from typing import Any, Dict, Mapping, Optional

MAX_BODY_IN_MESSAGE = 600


def common_headers_json():
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    return headers


def common_headers_accept_json():
    return {"Accept": "application/json"}


def is_full_url(path: str) -> bool:
    return path.startswith(("http://", "https://"))


def resolve_url(base_url: str, path: str) -> str:
    """Join ``path`` to ``base_url`` with exactly one slash, unless it is already a full URL."""
    if is_full_url(path):
        return path
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def build_cookie_header(existing: Optional[str], token: str) -> str:
    token_cookie = f"token={token}"
    if existing:
        return f"{existing}; {token_cookie}"
    return token_cookie


def apply_cookie_token(headers: Mapping[str, str], token: Optional[str]) -> Dict[str, str]:
    """Return a copy of ``headers`` with the token appended to its Cookie header."""
    merged = dict(headers)
    if not token:
        return merged

    existing = None
    for name in list(merged):
        if name.lower() == "cookie":
            existing = merged.pop(name)
    merged["Cookie"] = build_cookie_header(existing, token)
    return merged


def normalize_query(query: Optional[Mapping[str, Any]]) -> Optional[Dict[str, str]]:
    if query is None:
        return None

    params = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        else:
            params[key] = str(value)
    return params


def truncate(text: Optional[str], max_len: int = MAX_BODY_IN_MESSAGE) -> str:
    if not text:
        return ""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "..."
