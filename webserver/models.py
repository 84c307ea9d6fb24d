from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .database import Base

# --- USERS ---


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True)
    account = Column(String(100), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=True)
    # salted SHA-512 hex, see hashing.encode_sha512
    password = Column(String(128), nullable=False)
    is_enabled = Column(Integer, default=1)


# --- LOCALIZATION ---

class Language(Base):
    __tablename__ = "languages"
    id = Column(String(20), primary_key=True)
    name = Column(String(100), nullable=True)
    is_enabled = Column(Integer, default=1, nullable=False)
    seq = Column(Integer, default=0, nullable=False)


# --- NAVIGATION ---

class MenuTree(Base):
    # Node table: position of each menu entry in the tree
    __tablename__ = "menu_tree"
    id = Column(String(36), ForeignKey("menus.id"), primary_key=True)
    pid = Column(String(36), nullable=True, index=True)
    # Ancestor path, e.g. "root-id,child-id"
    ids = Column(String(1000), nullable=True)

    menu = relationship("Menu", back_populates="tree")


class Menu(Base):
    # Display metadata and handler for a menu entry
    __tablename__ = "menus"
    id = Column(String(36), primary_key=True)
    code = Column(String(50), nullable=False)
    seq = Column(Integer, default=0, nullable=False)
    icon = Column(String(100), nullable=True)
    controller = Column(String(100), nullable=True)
    action = Column(String(100), nullable=True)
    is_enabled = Column(Integer, default=1, nullable=False)

    tree = relationship("MenuTree", back_populates="menu", uselist=False)
    translations = relationship("MenuTranslation", back_populates="menu", cascade="all, delete-orphan")


class MenuTranslation(Base):
    __tablename__ = "menu_translations"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    menu_id = Column(String(36), ForeignKey("menus.id"), nullable=False)
    language_id = Column(String(20), ForeignKey("languages.id"), nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(String(255), nullable=True)

    __table_args__ = (
        UniqueConstraint("menu_id", "language_id", name="uix_menu_translations_menu_language"),
    )

    menu = relationship("Menu", back_populates="translations")
