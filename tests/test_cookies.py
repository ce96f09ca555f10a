import pytest

from hivecmap.web.cookies import CookieError, CookieJar, parse_cookie_header


def test_parse_two_cookies():
    assert parse_cookie_header("lang=en; theme=dark") == {"lang": "en", "theme": "dark"}


def test_parse_strips_quotes_and_spaces():
    assert parse_cookie_header('  lang =  "en"  ') == {"lang": "en"}


def test_first_value_wins():
    assert parse_cookie_header("a=first; a=second") == {"a": "first"}


def test_without_equals_is_empty():
    assert parse_cookie_header("justtext") == {}


def test_trailing_empty_value_stops():
    assert parse_cookie_header("a=1; b=") == {"a": "1"}


def test_empty_value_before_semicolon():
    assert parse_cookie_header("a=;b=2") == {"a": "", "b": "2"}


def test_jar_load_and_get():
    jar = CookieJar()
    jar.load(["session=token"])
    assert jar.get_cookie("session") == "token"
    assert jar.get_cookie("missing") == ""


def test_jar_load_no_headers_leaves_empty():
    jar = CookieJar()
    jar.load([])
    assert jar.jar == {}


def test_jar_rejects_repeated_header():
    jar = CookieJar()
    with pytest.raises(CookieError) as info:
        jar.load(["a=1", "b=2"])
    assert info.value.status == 400


def test_set_cookie_headers():
    jar = CookieJar()
    jar.set_cookie("lang", "en")
    jar.set_cookie("cleared", "")
    jar.set_cookie("lang", "fr")
    assert jar.set_cookie_headers() == ["lang=en", 'cleared=""']


def test_roundtrip_through_header():
    jar = CookieJar()
    jar.set_cookie("x", "1")
    jar.set_cookie("y", "2")
    header = "; ".join(jar.set_cookie_headers())
    assert parse_cookie_header(header) == jar.cookies_to_add