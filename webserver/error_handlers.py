"""
Error pages for browser requests, JSON for /api and everything else.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .app_context import templates
from .config import ConfigurationError
from .site_logging import get_logger

logger = get_logger("site.errors")

# status -> (title, what the visitor should know)
ERROR_PAGES = {
    401: ("Sign-in required", "Please log in to see this page."),
    404: ("Page not found", "This page does not exist or is no longer in the menu."),
    422: ("Invalid form", "Some fields were missing or not filled in correctly."),
    500: ("Site error", "The site could not complete this request."),
}
DEFAULT_PAGE = ("Request failed", "The request could not be completed.")


def wants_html(request: Request) -> bool:
    if request.url.path.startswith("/api"):
        return False
    return "text/html" in (request.headers.get("accept") or "").lower()


def first_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors() or []
    if not errors:
        return ""
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", []) if part != "body")
    msg = first.get("msg") or "Invalid input."
    return f"{field}: {msg}" if field else msg


def render_error_page(request: Request, status_code: int, detail: str = ""):
    title, reason = ERROR_PAGES.get(status_code, ERROR_PAGES[500] if status_code >= 500 else DEFAULT_PAGE)
    return templates.TemplateResponse(
        request,
        "common/error.html",
        {
            "status_code": status_code,
            "path": request.url.path,
            "detail": detail,
            "error_title": title,
            "error_reason": reason,
        },
        status_code=status_code,
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        if wants_html(request):
            return render_error_page(request, 422, first_validation_error(exc))
        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if wants_html(request):
            return render_error_page(request, exc.status_code, str(exc.detail or ""))
        return await http_exception_handler(request, exc)

    @app.exception_handler(ConfigurationError)
    async def configuration_error(request: Request, exc: ConfigurationError):
        logger.error("event=configuration_error path=%s error=%s", request.url.path, exc)
        if wants_html(request):
            return render_error_page(request, 500)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("event=unhandled_error path=%s", request.url.path)
        if wants_html(request):
            return render_error_page(request, 500)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
