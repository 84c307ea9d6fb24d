import hmac
from typing import Optional

from sqlalchemy.orm import Session

from .models import User
from .site_service import SiteService


def verify_password(site: SiteService, password: str, hashed: str) -> bool:
    return hmac.compare_digest(site.encode_sha512(password).encode("utf-8"), (hashed or "").encode("utf-8"))


def authenticate_user(db: Session, site: SiteService, account: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.account == account).first()
    if user and user.is_enabled and verify_password(site, password, user.password):
        return user
    return None
