from webserver.auth import authenticate_user, verify_password
from webserver.models import User


def add_user(db, password):
    db.add(User(id="u-1", account="alice", name="Alice", email=None, password=password))
    db.commit()


def test_correct_password(site, db):
    add_user(db, site.encode_sha512("secret"))
    assert authenticate_user(db, site, "alice", "secret").id == "u-1"


def test_wrong_password_or_account(site, db):
    add_user(db, site.encode_sha512("secret"))
    assert authenticate_user(db, site, "alice", "nope") is None
    assert authenticate_user(db, site, "bob", "secret") is None


def test_disabled_user_cannot_log_in(site, db):
    add_user(db, site.encode_sha512("secret"))
    db.query(User).filter(User.id == "u-1").update({"is_enabled": 0})
    db.commit()
    assert authenticate_user(db, site, "alice", "secret") is None


def test_non_ascii_stored_hash_is_a_mismatch(site, db):
    add_user(db, "é" * 128)
    assert verify_password(site, "secret", "é" * 128) is False
    assert authenticate_user(db, site, "alice", "secret") is None


def test_empty_stored_hash_is_a_mismatch(site):
    assert verify_password(site, "secret", None) is False
