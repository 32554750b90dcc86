# Environment configuration - read once, passed around explicitly
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://restful-booker.herokuapp.com"
DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "password123"


@dataclass(frozen=True)
class EnvConfig:
    base_url: str
    username: str
    password: str
    ci: bool


def _value(environ, key, default):
    value = (environ.get(key) or "").strip()
    return value or default


def load_env(environ: Optional[Mapping[str, str]] = None) -> EnvConfig:
    """Resolve the run configuration.

    With no ``environ`` the process environment is used, after a ``.env``
    file (if any) has been loaded on top of it without overriding.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    ci = (environ.get("CI") or "").strip().lower() == "true" or bool(environ.get("GITHUB_ACTIONS"))

    return EnvConfig(
        base_url=_value(environ, "BASE_URL", DEFAULT_BASE_URL),
        username=_value(environ, "USERNAME", DEFAULT_USERNAME),
        password=_value(environ, "PASSWORD", DEFAULT_PASSWORD),
        ci=ci,
    )
