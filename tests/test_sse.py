import pytest
from starlette.requests import Request

from app.core.sse import is_datastar_request

FRAGMENT_ROUTES = ["/search-update-url-client-side", "/search-server-patch"]


def make_request(headers):
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
        }
    )


@pytest.mark.parametrize(
    "headers,expected",
    [
        ({"datastar-request": "true"}, True),
        ({"Datastar-Request": "true"}, True),
        ({"datastar-request": "false"}, False),
        ({}, False),
    ],
)
def test_is_datastar_request(headers, expected):
    assert is_datastar_request(make_request(headers)) is expected


@pytest.mark.parametrize("path", FRAGMENT_ROUTES)
def test_fragment_stream_is_not_cached(client, datastar_headers, path):
    response = client.get(path, headers=datastar_headers)
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.headers["cache-control"] == "no-cache"


@pytest.mark.parametrize("path", FRAGMENT_ROUTES)
def test_fragment_stream_patches_the_body_first(client, datastar_headers, path):
    response = client.get(path, params={"size": "medium"}, headers=datastar_headers)
    first_event = response.text.split("\n\n")[0]
    assert first_event.startswith("event: datastar-patch-elements")
    assert "data: elements <body>" in first_event
    assert "Great Tool 2 | medium" in first_event


@pytest.mark.parametrize("path", FRAGMENT_ROUTES)
@pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x85", "\r"])
def test_unusual_line_breaks_in_query_stay_on_one_data_line(client, datastar_headers, path, separator):
    response = client.get(path, params={"query": f"a{separator}b"}, headers=datastar_headers)
    value_line = next(line for line in response.text.split("\n") if 'name="query"' in line)
    assert f'value="a&#{ord(separator)};b"' in value_line
    assert value_line.startswith("data: elements ")
