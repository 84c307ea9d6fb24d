"""
SITE SERVICE
============
Per-request helpers used by pages and the sidebar.

FLOW:
- One SiteService is built per request (see app_context.get_site_service).
- Profile lives in the session, culture in a cookie, menu in the database.

HOW:
- Session and cookies are reached only through SessionStore / CookieJar.
- Menu rows come from fetch_menu_rows() and are shaped by as_hierarchy().
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import and_
from sqlalchemy.orm import Session

from .config import get_salt
from .culture import CULTURE_COOKIE_NAME, cookie_expiry, culture_from_cookie, make_cookie_value
from .hashing import encode_sha512
from .hierarchy import HierarchyNode, as_hierarchy
from .models import Language, Menu, MenuTranslation, MenuTree, User
from .schemas import MenuItem, UserProfile
from .site_logging import get_logger
from .stores import CookieJar, SessionStore

CURRENT_USER_KEY = "CurrentUser"

logger = get_logger("site.service")


def fetch_menu_rows(db: Session, culture: str) -> List[MenuItem]:
    """Menu entries joined with their translation for ``culture``, ordered by seq."""
    rows = (
        db.query(
            MenuTree.id,
            MenuTree.pid,
            MenuTree.ids,
            Menu.code,
            Menu.seq,
            Menu.icon,
            Menu.controller,
            Menu.action,
            Menu.is_enabled,
            MenuTranslation.name,
            MenuTranslation.description,
        )
        .join(Menu, Menu.id == MenuTree.id)
        .outerjoin(
            MenuTranslation,
            and_(MenuTranslation.menu_id == Menu.id, MenuTranslation.language_id == culture),
        )
        .order_by(Menu.seq, Menu.id)
        .all()
    )
    return [
        MenuItem(
            id=row.id,
            pid=row.pid or None,
            ids=row.ids,
            code=row.code,
            name=row.name or "",
            description=row.description or "",
            seq=row.seq,
            icon=row.icon,
            controller=row.controller,
            action=row.action,
            is_enabled=bool(row.is_enabled),
        )
        for row in rows
    ]


class SiteService:
    def __init__(
        self,
        db: Session,
        session_store: SessionStore,
        cookies: CookieJar,
        salt: Optional[str] = None,
    ):
        self.db = db
        self.session_store = session_store
        self.cookies = cookies
        self._salt = salt

    @property
    def salt(self) -> str:
        if self._salt is None:
            self._salt = get_salt()
        return self._salt

    # --- HASHING ---

    def encode_sha512(self, value: str) -> str:
        return encode_sha512(self.salt, value)

    # --- PROFILE ---

    def set_user_profile(self, user_id: str) -> UserProfile:
        user = self.db.get(User, user_id)
        profile = UserProfile(
            id=user.id if user else None,
            account=user.account if user else None,
            display_name=user.name if user else None,
            email=user.email if user else None,
        )
        self.session_store.set(CURRENT_USER_KEY, profile.model_dump_json(by_alias=True))
        logger.info("event=profile_set user_id=%s found=%s", user_id, user is not None)
        return profile

    def get_user_profile(self) -> Optional[UserProfile]:
        raw = self.session_store.get(CURRENT_USER_KEY)
        if not raw:
            return None
        try:
            return UserProfile.model_validate_json(raw)
        except ValidationError:
            logger.warning("event=profile_unreadable key=%s", CURRENT_USER_KEY)
            return None

    def clear_user_profile(self) -> None:
        self.session_store.delete(CURRENT_USER_KEY)
        logger.info("event=profile_cleared")

    # --- CULTURE ---

    def get_cultures(self) -> List[str]:
        """Enabled culture ids by seq. Assumed non-empty."""
        rows = (
            self.db.query(Language.id)
            .filter(Language.is_enabled == 1)
            .order_by(Language.seq, Language.id)
            .all()
        )
        return [row.id for row in rows]

    def set_culture(self, culture: Optional[str] = None) -> str:
        if not culture:
            raw = self.cookies.get(CULTURE_COOKIE_NAME)
            if raw is not None:
                culture = culture_from_cookie(raw)
            if not culture:
                culture = self.get_cultures()[0]
        self.cookies.set(CULTURE_COOKIE_NAME, make_cookie_value(culture), cookie_expiry())
        logger.info("event=culture_set culture=%s", culture)
        return culture

    def get_current_culture(self) -> str:
        cultures = self.get_cultures()
        current = cultures[0]
        raw = self.cookies.get(CULTURE_COOKIE_NAME)
        if raw is not None:
            current = culture_from_cookie(raw)
        if current not in cultures:
            logger.info("event=culture_fallback requested=%s culture=%s", current, cultures[0])
            current = cultures[0]
        return current

    # --- MENU ---

    def get_menu(self) -> List[HierarchyNode[MenuItem]]:
        culture = self.get_current_culture()
        rows = fetch_menu_rows(self.db, culture)
        forest = as_hierarchy(rows, lambda item: item.id, lambda item: item.pid)
        logger.info("event=menu_built culture=%s rows=%s roots=%s", culture, len(rows), len(forest))
        return forest
