# To Make the GET, POST, PUT, PATCH, DELETE calls and normalize what comes back
import enum
import json
import logging
import time
import types
from dataclasses import dataclass, field as dc_field
from typing import Any, Dict, Mapping, Optional

import requests

from src.helpers.utils import apply_cookie_token, normalize_query, resolve_url

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPES = ("application/json", "+json")


class BodyKind(enum.Enum):
    PARSED = "parsed"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True)
class RequestOptions:
    headers: Mapping[str, str] = dc_field(default_factory=dict)
    query: Optional[Mapping[str, Any]] = None
    data: Any = None
    cookie_token: Optional[str] = None


@dataclass(frozen=True)
class ApiResponse:
    """Normalized result of one HTTP call, the same shape for every verb."""

    ok: bool
    status: int
    headers: Mapping[str, str]
    url: str
    body_text: str
    duration_ms: int
    body_json: Any = None

    @property
    def body_kind(self) -> BodyKind:
        if not self.body_text:
            return BodyKind.EMPTY
        if self.body_json is None:
            return BodyKind.TEXT
        return BodyKind.PARSED

    def field(self, name, default=None):
        """Read ``name`` from a JSON object body; ``default`` for any other body."""
        if isinstance(self.body_json, dict):
            return self.body_json.get(name, default)
        return default


def looks_like_json(body_text: str, content_type: str) -> bool:
    if not body_text:
        return False
    if any(marker in content_type for marker in JSON_CONTENT_TYPES):
        return True
    # best effort: a text body that merely starts with a bracket is tried too
    return body_text.strip().startswith(("{", "["))


def parse_body(body_text: str, content_type: str):
    if not looks_like_json(body_text, content_type):
        return None
    try:
        return json.loads(body_text)
    except ValueError:
        logger.debug("Body is not valid JSON, keeping text only")
        return None


def normalize_headers(raw_headers) -> Dict[str, str]:
    headers = {}
    for name, value in raw_headers.items():
        headers[name.lower()] = value
    return headers


class ApiClient:
    """Thin requests wrapper bound to one base URL."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.session = session or requests.Session()

    def get(self, path, options=None, **kwargs) -> ApiResponse:
        return self._send("GET", path, options, kwargs)

    def post(self, path, options=None, **kwargs) -> ApiResponse:
        return self._send("POST", path, options, kwargs)

    def put(self, path, options=None, **kwargs) -> ApiResponse:
        return self._send("PUT", path, options, kwargs)

    def patch(self, path, options=None, **kwargs) -> ApiResponse:
        return self._send("PATCH", path, options, kwargs)

    def delete(self, path, options=None, **kwargs) -> ApiResponse:
        return self._send("DELETE", path, options, kwargs)

    def close(self):
        self.session.close()

    def _send(self, method: str, path: str, options: Optional[RequestOptions], kwargs) -> ApiResponse:
        if options is None:
            options = RequestOptions(**kwargs)
        elif kwargs:
            raise TypeError(f"pass either options or keyword arguments, not both: {sorted(kwargs)}")

        url = resolve_url(self.base_url, path)
        headers = apply_cookie_token(options.headers, options.cookie_token)
        params = normalize_query(options.query)

        body = {}
        if isinstance(options.data, (str, bytes)):
            body["data"] = options.data
        elif options.data is not None:
            body["json"] = options.data

        logger.debug("%s %s params=%s", method, url, params)
        start = time.perf_counter()
        # Transport errors (DNS, connection refused, ...) are not caught here
        response = self.session.request(method, url, headers=headers, params=params, **body)
        body_text = response.text
        duration_ms = int((time.perf_counter() - start) * 1000)

        response_headers = normalize_headers(response.headers)
        body_json = parse_body(body_text, response_headers.get("content-type", ""))

        logger.debug("%s %s -> %s in %dms", method, url, response.status_code, duration_ms)
        return ApiResponse(
            ok=200 <= response.status_code < 300,
            status=response.status_code,
            headers=types.MappingProxyType(response_headers),
            url=url,
            body_text=body_text,
            body_json=body_json,
            duration_ms=duration_ms,
        )
