"""Tests for SiteleafApi — HTTP client for document collections."""

from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from highlight_sync.api import SiteleafApi


@pytest.fixture
def api_with_mock_session() -> tuple[SiteleafApi, MagicMock]:
    """Create a SiteleafApi with a mocked requests.Session."""
    with patch("highlight_sync.api.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session.headers = {}
        mock_session_cls.return_value = mock_session
        api = SiteleafApi("key", "secret", timeout=10)

    return api, mock_session


def _make_response(data: Any) -> MagicMock:
    """Create a mock HTTP response with given JSON data."""
    response = MagicMock()
    response.json.return_value = data
    return response


def test_init_sets_basic_auth(api_with_mock_session: tuple[SiteleafApi, MagicMock]) -> None:
    _api, mock_session = api_with_mock_session

    assert mock_session.auth == ("key", "secret")


def test_list_documents_sends_limit(api_with_mock_session: tuple[SiteleafApi, MagicMock]) -> None:
    api, mock_session = api_with_mock_session
    mock_session.request.return_value = _make_response([{"id": "d1"}])

    result = api.list_documents("books", limit=9999)

    assert result == [{"id": "d1"}]
    mock_session.request.assert_called_once_with(
        "GET",
        "https://api.siteleaf.com/v1/collections/books/documents",
        params={"limit": 9999},
        json=None,
        timeout=10,
    )


def test_create_document_posts_json_body(api_with_mock_session: tuple[SiteleafApi, MagicMock]) -> None:
    api, mock_session = api_with_mock_session
    mock_session.request.return_value = _make_response({"id": "new", "title": "Foo"})

    result = api.create_document("books", {"title": "Foo"})

    assert result == {"id": "new", "title": "Foo"}
    args, kwargs = mock_session.request.call_args
    assert args == ("POST", "https://api.siteleaf.com/v1/collections/books/documents")
    assert kwargs["json"] == {"title": "Foo"}


def test_http_error_propagates(api_with_mock_session: tuple[SiteleafApi, MagicMock]) -> None:
    api, mock_session = api_with_mock_session
    mock_session.request.return_value.raise_for_status.side_effect = requests.HTTPError("503")

    with pytest.raises(requests.HTTPError, match="503"):
        api.create_document("highlights", {"body": "x"})


def test_invalid_json_raises(api_with_mock_session: tuple[SiteleafApi, MagicMock]) -> None:
    api, mock_session = api_with_mock_session
    response = MagicMock()
    response.json.side_effect = ValueError("no json")
    response.text = "<html>"
    mock_session.request.return_value = response

    with pytest.raises(RuntimeError, match="invalid JSON"):
        api.list_documents("books")


def test_listing_must_be_a_list(api_with_mock_session: tuple[SiteleafApi, MagicMock]) -> None:
    api, mock_session = api_with_mock_session
    mock_session.request.return_value = _make_response({"error": "nope"})

    with pytest.raises(RuntimeError, match="bad listing"):
        api.list_documents("books")


def test_create_must_return_an_object(api_with_mock_session: tuple[SiteleafApi, MagicMock]) -> None:
    api, mock_session = api_with_mock_session
    mock_session.request.return_value = _make_response([])

    with pytest.raises(RuntimeError, match="bad create response"):
        api.create_document("books", {"title": "Foo"})


def test_custom_base_url_gets_trailing_slash() -> None:
    with patch("highlight_sync.api.requests.Session"):
        api = SiteleafApi("k", "s", base_url="http://localhost:9000/v1")

    assert api.base_url == "http://localhost:9000/v1/"
