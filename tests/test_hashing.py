import pytest

from webserver.config import ConfigurationError, get_salt
from webserver.hashing import encode_sha512
from webserver.site_service import SiteService
from webserver.stores import MemoryCookieJar, MemorySessionStore

ABC_SHA512 = (
    "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
    "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
)


def test_matches_known_digest_of_salt_plus_value():
    assert encode_sha512("", "abc") == ABC_SHA512
    assert encode_sha512("a", "bc") == ABC_SHA512


def test_digest_is_128_lowercase_hex_chars():
    digest = encode_sha512("salt", "password")
    assert len(digest) == 128
    assert digest == digest.lower()
    int(digest, 16)


def test_is_deterministic():
    assert encode_sha512("salt", "secret") == encode_sha512("salt", "secret")


def test_depends_on_input_and_salt():
    assert encode_sha512("salt", "x") != encode_sha512("salt", "y")
    assert encode_sha512("salt-1", "x") != encode_sha512("salt-2", "x")


def test_service_uses_its_salt(site):
    assert site.encode_sha512("password") == encode_sha512("test-salt", "password")


def test_missing_salt_is_a_configuration_error(monkeypatch):
    monkeypatch.delenv("SALT", raising=False)
    with pytest.raises(ConfigurationError):
        get_salt()


def test_blank_salt_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("SALT", "   ")
    with pytest.raises(ConfigurationError):
        get_salt()


def test_service_without_salt_fails_on_first_hash(monkeypatch, db):
    monkeypatch.delenv("SALT", raising=False)
    service = SiteService(db, MemorySessionStore(), MemoryCookieJar())
    with pytest.raises(ConfigurationError):
        service.encode_sha512("password")
