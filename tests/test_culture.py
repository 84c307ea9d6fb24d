import datetime

from webserver.culture import (
    CULTURE_COOKIE_NAME,
    cookie_expiry,
    culture_from_cookie,
    make_cookie_value,
    parse_cookie_value,
)


class TestCookieValue:
    def test_make_uses_culture_for_both_parts(self):
        assert make_cookie_value("de") == "c=de|uic=de"
        assert make_cookie_value("de", "en") == "c=de|uic=en"

    def test_parse_full_value(self):
        assert parse_cookie_value("c=de|uic=en") == ("de", "en")

    def test_parse_single_part_fills_the_other(self):
        assert parse_cookie_value("c=de") == ("de", "de")
        assert parse_cookie_value("uic=en") == ("en", "en")

    def test_parse_rejects_foreign_values(self):
        assert parse_cookie_value(None) is None
        assert parse_cookie_value("") is None
        assert parse_cookie_value("de") is None
        assert parse_cookie_value("c=|uic=") is None
        assert parse_cookie_value("c=de|uic=en|x=1") is None
        assert culture_from_cookie("garbage") is None

    def test_expiry_is_about_a_year(self):
        now = datetime.datetime(2026, 1, 1, tzinfo=datetime.timezone.utc)
        assert cookie_expiry(now) - now == datetime.timedelta(days=365)


class TestCultureResolver:
    def test_enabled_cultures_ordered_by_seq(self, site, languages):
        assert site.get_cultures() == ["de", "en"]

    def test_no_cookie_returns_first_enabled(self, site, languages):
        assert site.get_current_culture() == "de"

    def test_cookie_with_enabled_culture(self, site, cookies, languages):
        cookies.cookies[CULTURE_COOKIE_NAME] = make_cookie_value("en")
        assert site.get_current_culture() == "en"

    def test_unknown_cookie_culture_falls_back(self, site, cookies, languages):
        cookies.cookies[CULTURE_COOKIE_NAME] = make_cookie_value("xx")
        assert site.get_current_culture() == "de"

    def test_disabled_cookie_culture_falls_back(self, site, cookies, languages):
        cookies.cookies[CULTURE_COOKIE_NAME] = make_cookie_value("fr")
        assert site.get_current_culture() == "de"

    def test_corrupt_cookie_falls_back(self, site, cookies, languages):
        cookies.cookies[CULTURE_COOKIE_NAME] = "%%%not-a-culture"
        assert site.get_current_culture() == "de"

    def test_set_culture_writes_long_lived_cookie(self, site, cookies, languages):
        before = datetime.datetime.now(datetime.timezone.utc)
        assert site.set_culture("en") == "en"

        assert cookies.cookies[CULTURE_COOKIE_NAME] == "c=en|uic=en"
        assert cookies.expires[CULTURE_COOKIE_NAME] - before >= datetime.timedelta(days=364)
        assert site.get_current_culture() == "en"

    def test_set_culture_without_candidate_or_cookie_uses_default(self, site, cookies, languages):
        assert site.set_culture() == "de"
        assert cookies.cookies[CULTURE_COOKIE_NAME] == "c=de|uic=de"

    def test_set_culture_without_candidate_refreshes_cookie(self, site, cookies, languages):
        cookies.cookies[CULTURE_COOKIE_NAME] = "c=en|uic=en"
        assert site.set_culture() == "en"
        assert CULTURE_COOKIE_NAME in cookies.expires

    def test_set_culture_with_unreadable_cookie_uses_default(self, site, cookies, languages):
        cookies.cookies[CULTURE_COOKIE_NAME] = "junk"
        assert site.set_culture() == "de"

    def test_unknown_candidate_is_stored_but_not_trusted(self, site, cookies, languages):
        site.set_culture("xx")
        assert cookies.cookies[CULTURE_COOKIE_NAME] == "c=xx|uic=xx"
        assert site.get_current_culture() == "de"
