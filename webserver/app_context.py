from pathlib import Path

from fastapi import Depends, HTTPException, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from .database import get_db
from .schemas import UserProfile
from .site_service import SiteService
from .stores import RequestCookieJar, RequestSessionStore

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_site_service(request: Request, db: Session = Depends(get_db)) -> SiteService:
    return SiteService(db, RequestSessionStore(request), RequestCookieJar(request))


def get_current_profile(site: SiteService = Depends(get_site_service)) -> UserProfile:
    profile = site.get_user_profile()
    if profile is None or not profile.id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return profile


def page_context(request: Request, site: SiteService, **extra) -> dict:
    """Shared template context: sidebar menu, profile and culture."""
    context = {
        "request": request,
        "menu": site.get_menu(),
        "profile": site.get_user_profile(),
        "culture": site.get_current_culture(),
        "cultures": site.get_cultures(),
    }
    context.update(extra)
    return context
