"""
SITE CONFIG
===========
Centralized site settings loaded from environment.
"""

# FLOW:
# - Read env vars once and expose SITE_SETTINGS.
# - get_salt() is read lazily so a missing salt fails on first use.

from __future__ import annotations

import logging
import os
import secrets

import dotenv


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or unreadable."""


def get_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


def get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_name() -> str:
    env = os.getenv("APP_ENV", "").strip().lower()
    if env in {"prod", "production"}:
        return ".env.production"
    if env in {"local", "localhost", "dev", "development"}:
        return ".env.localhost"
    return ".env"


def _env_path() -> str:
    root = os.path.dirname(os.path.dirname(__file__))
    return os.path.join(root, _env_name())


dotenv.load_dotenv(_env_path())

if os.getenv("APP_ENV_LOG", "false").lower() == "true":
    logging.getLogger("site.env").info("Active env file: %s", _env_path())

SITE_SETTINGS = {
    "CULTURE_COOKIE_NAME": os.getenv("SITE_CULTURE_COOKIE", ".Site.Culture"),
    "CULTURE_COOKIE_DAYS": get_int("CULTURE_COOKIE_DAYS", 365),
    "SESSION_MAX_AGE": get_int("SESSION_MAX_AGE", 60 * 60 * 8),
    "SESSION_HTTPS_ONLY": get_bool("SESSION_HTTPS_ONLY", False),
    "LOG_FILE": os.getenv("SITE_LOG_FILE", "logs/site.log"),
    "SEED_ON_STARTUP": get_bool("SEED_ON_STARTUP", False),
}


def get_salt() -> str:
    """Return the hashing salt; a missing salt is a fatal configuration error."""
    salt = os.getenv("SALT")
    if salt is None or not salt.strip():
        raise ConfigurationError("SALT must be set in your .env file.")
    return salt


def get_session_secret() -> str:
    placeholders = {"", "change-this-secret", "AUTO_GENERATE"}
    secret = os.getenv("SESSION_SECRET_KEY") or os.getenv("SECRET_KEY") or ""
    if secret in placeholders:
        # Sessions do not survive a restart without a configured key.
        secret = secrets.token_urlsafe(64)
        os.environ["SESSION_SECRET_KEY"] = secret
    return secret
