from urllib.parse import parse_qsl, urlsplit

import pytest

from rest_manager import RestEntity
from rest_manager.url import add_url_query_parameters, encode_query_component


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/api/users",
        "https://example.com/api/users?keep=1",
        "not even a url",
    ],
)
def test_empty_parameters_leave_url_untouched(url: str) -> None:
    assert add_url_query_parameters(url, RestEntity()) == url


def test_single_parameter_is_appended() -> None:
    params = RestEntity({"page": "2"})
    assert add_url_query_parameters("https://example.com/api/users", params) == "https://example.com/api/users?page=2"


def test_existing_query_is_replaced() -> None:
    params = RestEntity({"page": "2"})
    result = add_url_query_parameters("https://example.com/api/users?page=1&sort=asc", params)
    assert result == "https://example.com/api/users?page=2"


def test_fragment_and_port_survive() -> None:
    params = RestEntity({"page": "2"})
    result = add_url_query_parameters("http://localhost:8080/a#top", params)
    assert result == "http://localhost:8080/a?page=2#top"


def test_multiple_parameters_compare_as_a_set() -> None:
    params = RestEntity({"page": "2", "per_page": "10", "q": "a b"})
    result = add_url_query_parameters("https://example.com/api/users", params)
    parts = urlsplit(result)
    assert parts.path == "/api/users"
    assert set(parse_qsl(parts.query)) == {("page", "2"), ("per_page", "10"), ("q", "a b")}
    assert " " not in result


def test_reserved_characters_are_escaped() -> None:
    params = RestEntity({"filter": "a=b&c/d?é"})
    result = add_url_query_parameters("https://example.com/search", params)
    assert result == "https://example.com/search?filter=a%3Db%26c%2Fd%3F%C3%A9"


def test_unreserved_characters_are_untouched() -> None:
    assert encode_query_component("Az09-._~") == "Az09-._~"
    assert encode_query_component("Frank Bara") == "Frank%20Bara"


def test_unparsable_url_is_returned_unchanged() -> None:
    url = "http://[::1/broken"
    params = RestEntity({"page": "2"})
    assert add_url_query_parameters(url, params) == url
