"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kvstore import KVStore, KVStoreOptions


@pytest.fixture
def api_url():
    return "https://api.example.com/connect"


@pytest.fixture
def options():
    return KVStoreOptions(access_token="test-token", store_name="test-store", db_name="test-db")


@pytest.fixture
def kv(api_url, options):
    return KVStore(api_url, options)


def _fake_response(body, ok=True, status_code=None):
    response = MagicMock()
    response.is_success = ok
    response.status_code = status_code or (200 if ok else 400)
    response.json.return_value = body
    return response


@pytest.fixture
def post():
    """Patch ``httpx.AsyncClient`` and return the mocked ``post`` coroutine."""
    with patch("httpx.AsyncClient") as mock_client:
        mock_post = AsyncMock(return_value=_fake_response({"success": True}))
        mock_client.return_value.__aenter__.return_value.post = mock_post
        yield mock_post


@pytest.fixture
def respond(post):
    """Set the body (and status) the next request receives."""

    def _respond(body, ok=True, status_code=None):
        post.return_value = _fake_response(body, ok=ok, status_code=status_code)

    return _respond


@pytest.fixture
def sent(post):
    """Return the JSON payload of the last request."""

    def _sent():
        return post.call_args.kwargs["json"]

    return _sent
