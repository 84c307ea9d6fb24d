"""Locale-preference cookie encoding."""

from __future__ import annotations

import datetime
from typing import Optional, Tuple

from .config import SITE_SETTINGS

CULTURE_COOKIE_NAME = SITE_SETTINGS["CULTURE_COOKIE_NAME"]

_CULTURE_PREFIX = "c="
_UI_CULTURE_PREFIX = "uic="
_SEPARATOR = "|"


def make_cookie_value(culture: str, ui_culture: Optional[str] = None) -> str:
    """Encode as ``c=<culture>|uic=<ui culture>``."""
    return f"{_CULTURE_PREFIX}{culture}{_SEPARATOR}{_UI_CULTURE_PREFIX}{ui_culture or culture}"


def parse_cookie_value(value: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Decode a cookie value into ``(culture, ui_culture)``.

    Either part may be missing, in which case the other is used for both.
    Anything that does not match the format returns None.
    """
    if not value or not value.strip():
        return None

    parts = value.strip().split(_SEPARATOR)
    if len(parts) > 2:
        return None

    culture = ""
    ui_culture = ""
    for part in parts:
        if part.startswith(_CULTURE_PREFIX):
            culture = part[len(_CULTURE_PREFIX):]
        elif part.startswith(_UI_CULTURE_PREFIX):
            ui_culture = part[len(_UI_CULTURE_PREFIX):]
        else:
            return None

    if not culture and not ui_culture:
        return None
    return (culture or ui_culture, ui_culture or culture)


def culture_from_cookie(value: Optional[str]) -> Optional[str]:
    parsed = parse_cookie_value(value)
    return parsed[0] if parsed else None


def cookie_expiry(now: Optional[datetime.datetime] = None) -> datetime.datetime:
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return now + datetime.timedelta(days=SITE_SETTINGS["CULTURE_COOKIE_DAYS"])
