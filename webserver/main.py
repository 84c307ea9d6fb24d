import time

from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from .config import SITE_SETTINGS, get_salt, get_session_secret
from .database import Base, SessionLocal, engine
from .error_handlers import register_error_handlers
from .seed import seed_all
from .site_logging import get_logger
from .site_routes import router as site_router
from .stores import PendingCookieMiddleware

access_logger = get_logger("site.access")


def create_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(PendingCookieMiddleware, https_only=SITE_SETTINGS["SESSION_HTTPS_ONLY"])
    app.add_middleware(
        SessionMiddleware,
        secret_key=get_session_secret(),
        max_age=SITE_SETTINGS["SESSION_MAX_AGE"],
        https_only=SITE_SETTINGS["SESSION_HTTPS_ONLY"],
    )

    app.include_router(site_router)
    register_error_handlers(app)

    @app.middleware("http")
    async def timing_middleware(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        access_logger.info(
            "method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )
        return response

    @app.on_event("startup")
    def startup_event():
        Base.metadata.create_all(bind=engine, checkfirst=True)
        if SITE_SETTINGS["SEED_ON_STARTUP"]:
            db = SessionLocal()
            try:
                seed_all(db, get_salt())
            finally:
                db.close()

    return app


app = create_app()
