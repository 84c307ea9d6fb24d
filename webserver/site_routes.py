from typing import List, Optional
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from .app_context import get_current_profile, get_site_service, page_context, templates
from .auth import authenticate_user
from .database import get_db
from .hierarchy import HierarchyNode
from .schemas import MenuItem, UserProfile
from .site_logging import get_logger
from .site_service import SiteService

router = APIRouter()
logger = get_logger("site.access")


def _safe_next(target: Optional[str]) -> str:
    # same-site paths only; "\" and control characters can resolve off-site
    if not target or not target.startswith("/") or target.startswith("//"):
        return "/"
    if "\\" in target or any(ord(ch) < 32 or ord(ch) == 127 for ch in target):
        return "/"
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return "/"
    return target


def _menu_to_dict(node: HierarchyNode[MenuItem]) -> dict:
    item = node.entity
    return {
        "id": item.id,
        "pid": item.pid,
        "code": item.code,
        "name": item.name,
        "description": item.description,
        "seq": item.seq,
        "icon": item.icon,
        "controller": item.controller,
        "action": item.action,
        "is_enabled": item.is_enabled,
        "children": [_menu_to_dict(child) for child in node.children],
    }


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, site: SiteService = Depends(get_site_service)):
    return templates.TemplateResponse(request, "site/index.html", page_context(request, site))


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request, next: Optional[str] = None, site: SiteService = Depends(get_site_service)):
    return templates.TemplateResponse(
        request, "auth/login.html", page_context(request, site, next=_safe_next(next))
    )


@router.post("/login")
async def login_submit(
    request: Request,
    account: str = Form(...),
    password: str = Form(...),
    next: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    site: SiteService = Depends(get_site_service),
):
    user = authenticate_user(db, site, account, password)
    if not user:
        logger.info("event=login_failed account=%s", account)
        return templates.TemplateResponse(
            request,
            "auth/login.html",
            page_context(request, site, error="Invalid credentials", next=_safe_next(next)),
            status_code=401,
        )

    site.set_user_profile(user.id)
    logger.info("event=login_success user_id=%s", user.id)
    return RedirectResponse(_safe_next(next), status_code=303)


@router.get("/logout")
async def logout(request: Request, site: SiteService = Depends(get_site_service)):
    profile = site.get_user_profile()
    if profile is not None:
        logger.info("event=logout user_id=%s", profile.id)
    site.clear_user_profile()
    request.session.clear()
    return RedirectResponse("/login", status_code=303)


@router.get("/culture/{culture}")
async def switch_culture(
    culture: str,
    next: Optional[str] = None,
    site: SiteService = Depends(get_site_service),
):
    site.set_culture(culture)
    return RedirectResponse(_safe_next(next), status_code=303)


@router.post("/culture")
async def switch_culture_form(
    culture: Optional[str] = Form(None),
    next: Optional[str] = Form(None),
    site: SiteService = Depends(get_site_service),
):
    site.set_culture(culture)
    return RedirectResponse(_safe_next(next), status_code=303)


@router.get("/api/culture")
async def current_culture(site: SiteService = Depends(get_site_service)):
    return {"culture": site.get_current_culture(), "cultures": site.get_cultures()}


@router.get("/profile", response_class=HTMLResponse)
async def profile_page(
    request: Request,
    profile: UserProfile = Depends(get_current_profile),
    site: SiteService = Depends(get_site_service),
):
    return templates.TemplateResponse(request, "site/profile.html", page_context(request, site, account=profile))


@router.get("/api/profile")
async def current_profile(profile: UserProfile = Depends(get_current_profile)):
    return profile.model_dump()


@router.get("/api/menu")
async def menu(site: SiteService = Depends(get_site_service)) -> List[dict]:
    return [_menu_to_dict(node) for node in site.get_menu()]
