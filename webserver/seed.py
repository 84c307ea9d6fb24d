"""
Create tables and load demo languages, menu entries and an admin account.
Usage: python -m webserver.seed
"""
import uuid

from sqlalchemy.orm import Session

from .config import get_salt
from .database import Base, SessionLocal, engine
from .hashing import encode_sha512
from .models import Language, Menu, MenuTranslation, MenuTree, User
from .site_logging import get_logger

logger = get_logger("site.seed")

LANGUAGES = [
    # (id, name, is_enabled, seq)
    ("zh-TW", "繁體中文", 1, 1),
    ("en-US", "English", 1, 2),
    ("ja-JP", "日本語", 0, 3),
]

# (code, parent code, seq, icon, controller, action, {culture: (name, description)})
MENUS = [
    ("home", None, 1, "fa-house", "Home", "Index", {
        "zh-TW": ("首頁", "網站首頁"),
        "en-US": ("Home", "Landing page"),
    }),
    ("system", None, 2, "fa-gear", None, None, {
        "zh-TW": ("系統管理", ""),
        "en-US": ("System", "Administration"),
    }),
    ("system.users", "system", 1, "fa-user", "User", "Index", {
        "zh-TW": ("使用者", "帳號維護"),
        "en-US": ("Users", "Account maintenance"),
    }),
    ("system.menus", "system", 2, "fa-list", "Menu", "Index", {
        "en-US": ("Menus", "Sidebar entries"),
    }),
    ("system.languages", "system", 3, "fa-language", "Language", "Index", {
        "zh-TW": ("語系", ""),
        "en-US": ("Languages", ""),
    }),
]


def menu_id(code: str) -> str:
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"menu:{code}"))


def seed_languages(db: Session) -> int:
    created = 0
    for language_id, name, is_enabled, seq in LANGUAGES:
        if db.get(Language, language_id):
            continue
        db.add(Language(id=language_id, name=name, is_enabled=is_enabled, seq=seq))
        created += 1
    return created


def seed_menus(db: Session) -> int:
    created = 0
    paths = {}
    for code, parent_code, seq, icon, controller, action, translations in MENUS:
        node_id = menu_id(code)
        parent_id = menu_id(parent_code) if parent_code else None
        paths[code] = f"{paths[parent_code]},{node_id}" if parent_code else node_id
        if db.get(Menu, node_id):
            continue
        db.add(Menu(id=node_id, code=code, seq=seq, icon=icon,
                    controller=controller, action=action, is_enabled=1))
        db.add(MenuTree(id=node_id, pid=parent_id, ids=paths[code]))
        for culture, (name, description) in translations.items():
            db.add(MenuTranslation(menu_id=node_id, language_id=culture,
                                   name=name, description=description))
        created += 1
    return created


def seed_admin(db: Session, salt: str, password: str = "admin") -> bool:
    if db.query(User).filter(User.account == "admin").first():
        return False
    db.add(User(id=str(uuid.uuid4()), account="admin", name="Administrator",
                email="admin@example.com", password=encode_sha512(salt, password)))
    return True


def seed_all(db: Session, salt: str) -> None:
    try:
        languages = seed_languages(db)
        db.flush()
        menus = seed_menus(db)
        admin = seed_admin(db, salt)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("event=seed languages=%s menus=%s admin=%s", languages, menus, admin)


def main():
    print("Creating tables (if missing)...")
    Base.metadata.create_all(bind=engine)
    print("Seeding demo data...")
    db = SessionLocal()
    try:
        seed_all(db, get_salt())
    finally:
        db.close()
    print("Seed complete.")


if __name__ == "__main__":
    main()
