import pytest

from hivecmap.web.querystring import (
    QueryString,
    decode_value,
    key_matches,
    scan_value,
    split_pairs,
)


def test_get_plain_values():
    qs = QueryString("/tile?z=3&x=4")
    assert qs.get("z") == "3"
    assert qs.get("x") == "4"


def test_get_missing_key_is_none():
    assert QueryString("/tile?z=3").get("y") is None


def test_no_query_has_no_pairs():
    assert QueryString("/tile").pairs() == []
    assert QueryString("").pairs() == []


def test_question_mark_alone_gives_one_empty_pair():
    assert QueryString("/tile?").pairs() == [""]


def test_key_without_value_is_empty_string():
    qs = QueryString("/p?flag&b=2")
    assert qs.get("flag") == ""
    assert qs.get("b") == "2"


def test_key_must_match_whole():
    assert QueryString("/p?ab=1").get("a") is None


def test_plus_and_percent_are_decoded():
    assert QueryString("/p?q=hello+world%21").get("q") == "hello world!"


def test_bad_escape_truncates_value():
    assert QueryString("/p?q=ab%zzcd").get("q") == "ab"


def test_decoded_nul_ends_value():
    assert QueryString("/p?a=x%00y").get("a") == "x"


def test_fragment_is_not_part_of_value():
    assert QueryString("/p?a=1#frag").get("a") == "1"


def test_encoded_key_matches():
    qs = QueryString("/p?a%20b=1")
    assert qs.get("a b") == "1"
    assert qs.get("a+b") == "1"


def test_first_value_wins():
    assert QueryString("/p?a=1&a=2").get("a") == "1"


def test_get_list():
    qs = QueryString("/p?x[]=1&y=3&x[]=2")
    assert qs.get_list("x") == ["1", "2"]
    assert qs.get_list("y") == []


def test_get_dict():
    qs = QueryString("/p?m[a]=1&m[b]=2")
    assert qs.get_dict("m") == {"a": "1", "b": "2"}


def test_get_dict_stops_at_malformed_entry():
    qs = QueryString("/p?m[a]=1&m]b[=2&m[c]=3")
    assert qs.get_dict("m") == {"a": "1"}


def test_get_dict_without_brackets_uses_empty_key():
    assert QueryString("/p?m=5").get_dict("m") == {"": "5"}


def test_split_pairs_respects_limit():
    assert split_pairs("/p?a=1&b=2&c=3", 2) == ["a=1", "b=2"]
    assert split_pairs("/p?a=1&b=2&c=3") == ["a=1", "b=2", "c=3"]


def test_split_pairs_zero_limit():
    assert split_pairs("/p?a=1", 0) == []


def test_str_lists_pairs():
    assert str(QueryString("/p?a=1&b=2")) == "[ a=1, b=2 ]"


def test_clear_removes_pairs():
    qs = QueryString("/p?a=1")
    qs.clear()
    assert qs.pairs() == []
    assert qs.get("a") is None


def test_decode_value_stops_at_separator():
    assert decode_value("abc&def") == "abc"
    assert decode_value("%41") == "A"


def test_decode_value_utf8():
    assert decode_value("%C3%A9") == "é"


@pytest.mark.parametrize(
    "key, pair, expected",
    [
        ("a", "a=1", True),
        ("a", "ab=1", False),
        ("a b", "a+b=1", True),
        ("a", "a", True),
        ("b", "a=1", False),
    ],
)
def test_key_matches(key, pair, expected):
    assert key_matches(key, pair) is expected


@pytest.mark.parametrize(
    "url, key",
    [("/p?a=1&b=x+y", "b"), ("/p?a=1&b=2", "a"), ("/p?q=ab%zzcd", "q")],
)
def test_scan_value_agrees_with_parse(url, key):
    assert scan_value(key, url) == QueryString(url).get(key)


def test_scan_value_missing_is_none():
    assert scan_value("z", "/p?a=1&b=2") is None


def test_scan_value_key_without_value():
    assert scan_value("a", "/p?a&b=2") == ""