import pytest
from pydantic import ValidationError

from app.models import Filter, Size
from app.services.filters import build_filter_url, encode_uri_component, parse_filter_input


@pytest.mark.parametrize("raw", [None, "", "Small", "LARGE", "xl", " small", "all"])
def test_unknown_size_defaults_to_small(raw):
    assert parse_filter_input(size=raw).size is Size.SMALL


@pytest.mark.parametrize("raw", ["small", "medium", "large"])
def test_valid_size_is_kept(raw):
    assert parse_filter_input(size=raw).size.value == raw


def test_empty_query_means_no_text_filter():
    assert parse_filter_input(query="").query is None
    assert parse_filter_input().query is None


def test_query_is_kept_verbatim():
    assert parse_filter_input(query="  Foo ").query == "  Foo "


def test_filter_is_immutable():
    f = parse_filter_input(size="large")
    with pytest.raises(ValidationError):
        f.size = Size.SMALL


def test_build_filter_url_with_query():
    f = Filter(size=Size.LARGE, query="foo bar")
    assert build_filter_url("/x", f) == "/x?size=large&query=foo%20bar"


def test_build_filter_url_without_query():
    assert build_filter_url("/x", Filter()) == "/x?size=small"


def test_build_filter_url_is_deterministic():
    f = Filter(size=Size.MEDIUM, query="a&b=c")
    assert build_filter_url("/x", f) == build_filter_url("/x", f)
    assert build_filter_url("/x", f) == "/x?size=medium&query=a%26b%3Dc"


def test_encode_uri_component_matches_javascript():
    assert encode_uri_component("it's (a)*!~_.-") == "it's (a)*!~_.-".replace(" ", "%20")
    assert encode_uri_component("/?#<é") == "%2F%3F%23%3C%C3%A9"
