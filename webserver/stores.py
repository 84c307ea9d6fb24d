"""
SESSION & COOKIE STORES
=======================
Narrow key-value interfaces the site service depends on.

FLOW:
- SiteService reads/writes through SessionStore and CookieJar only.
- Request adapters bind them to Starlette's request.session and cookies.
- PendingCookieMiddleware copies cookies written during a request onto
  the outgoing response, whatever response type the route returned.
- Memory* classes are in-process fakes for tests and scripts.
"""

from __future__ import annotations

import datetime
from typing import Dict, List, Optional, Protocol, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class SessionStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class CookieJar(Protocol):
    def get(self, name: str) -> Optional[str]:
        ...

    def set(self, name: str, value: str, expires: datetime.datetime) -> None:
        ...


class MemorySessionStore:
    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class MemoryCookieJar:
    def __init__(self, cookies: Optional[Dict[str, str]] = None):
        self.cookies: Dict[str, str] = dict(cookies or {})
        self.expires: Dict[str, datetime.datetime] = {}

    def get(self, name: str) -> Optional[str]:
        return self.cookies.get(name)

    def set(self, name: str, value: str, expires: datetime.datetime) -> None:
        self.cookies[name] = value
        self.expires[name] = expires


class RequestSessionStore:
    """SessionStore over Starlette's SessionMiddleware dict."""

    def __init__(self, request: Request):
        self.request = request

    def get(self, key: str) -> Optional[str]:
        value = self.request.session.get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self.request.session[key] = value

    def delete(self, key: str) -> None:
        self.request.session.pop(key, None)


PENDING_COOKIES_ATTR = "pending_cookies"


def _pending(request: Request) -> List[Tuple[str, str, datetime.datetime]]:
    pending = getattr(request.state, PENDING_COOKIES_ATTR, None)
    if pending is None:
        pending = []
        setattr(request.state, PENDING_COOKIES_ATTR, pending)
    return pending


class RequestCookieJar:
    """
    CookieJar over the inbound request cookies.

    Writes are queued on request.state and flushed by PendingCookieMiddleware.
    A value written earlier in the same request wins over the inbound one.
    """

    def __init__(self, request: Request):
        self.request = request

    def get(self, name: str) -> Optional[str]:
        for pending_name, value, _ in reversed(_pending(self.request)):
            if pending_name == name:
                return value
        return self.request.cookies.get(name)

    def set(self, name: str, value: str, expires: datetime.datetime) -> None:
        _pending(self.request).append((name, value, expires))


class PendingCookieMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, path: str = "/", same_site: str = "lax", https_only: bool = False):
        super().__init__(app)
        self.path = path
        self.same_site = same_site
        self.https_only = https_only

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        for name, value, expires in getattr(request.state, PENDING_COOKIES_ATTR, None) or []:
            response.set_cookie(
                name,
                value,
                expires=expires,
                path=self.path,
                samesite=self.same_site,
                secure=self.https_only,
            )
        return response
