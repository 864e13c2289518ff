"""Unit tests for the Designer News HTTP client.

The requests session is replaced with mocks so no real HTTP requests are made.
"""

from unittest.mock import MagicMock

import pytest
import requests

from designernews.auth.token_store import MemoryTokenStore
from designernews.core.exceptions import AuthenticationRequiredError
from designernews.core.models import AccessToken, User
from designernews.providers.designernews.auth import TokenAuth
from designernews.providers.designernews.client import DesignerNewsClient


def _response(status_code=200, payload=None):
    r = MagicMock()
    r.status_code = status_code
    r.ok = status_code < 400
    r.content = b"{}" if payload is not None else b""
    r.json.return_value = payload
    return r


@pytest.fixture()
def store():
    return MemoryTokenStore()


@pytest.fixture()
def client(store):
    c = DesignerNewsClient(user_agent="test", auth=TokenAuth(store))
    c.session = MagicMock()
    return c


# ---------------------------------------------------------------------------
# login
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_login_posts_form_params(client):
    client.session.post.return_value = _response(
        200, {"access_token": "tok123", "token_type": "bearer"}
    )

    response = await client.login({"grant_type": "password"})

    assert response.is_successful
    assert response.body == AccessToken(access_token="tok123")
    args, kwargs = client.session.post.call_args
    assert args[0] == "https://www.designernews.co/oauth/token"
    assert kwargs["data"] == {"grant_type": "password"}
    assert kwargs["timeout"] == client.timeout


@pytest.mark.asyncio
async def test_login_error_status_has_no_body(client):
    client.session.post.return_value = _response(401, {"error": "invalid_grant"})

    response = await client.login({})

    assert response.status_code == 401
    assert not response.is_successful
    assert response.body is None


@pytest.mark.asyncio
async def test_login_payload_without_token_has_no_body(client):
    client.session.post.return_value = _response(200, {"token_type": "bearer"})

    response = await client.login({})

    assert response.is_successful
    assert response.body is None


@pytest.mark.asyncio
async def test_login_connection_error_propagates(client):
    client.session.post.side_effect = requests.ConnectionError("reset")

    with pytest.raises(requests.ConnectionError):
        await client.login({})


# ---------------------------------------------------------------------------
# get_authed_user
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_authed_user_unwraps_envelope(client, store):
    store.set("tok123")
    client.session.get.return_value = _response(
        200,
        {
            "users": [
                {"id": 7, "display_name": "Alice", "karma": 12},
                {"id": 8, "display_name": "Bob"},
            ]
        },
    )

    response = await client.get_authed_user()

    assert response.body == [
        User(id=7, display_name="Alice"),
        User(id=8, display_name="Bob"),
    ]
    args, kwargs = client.session.get.call_args
    assert args[0] == "https://www.designernews.co/api/v2/me"
    assert kwargs["headers"] == {"Authorization": "Bearer tok123"}


@pytest.mark.asyncio
async def test_get_authed_user_reads_token_at_request_time(client, store):
    client.session.get.return_value = _response(200, {"users": []})

    await client.get_authed_user()
    store.set("fresh")
    await client.get_authed_user()

    first, second = client.session.get.call_args_list
    assert first.kwargs["headers"] == {}
    assert second.kwargs["headers"] == {"Authorization": "Bearer fresh"}


@pytest.mark.asyncio
async def test_get_authed_user_missing_envelope(client):
    client.session.get.return_value = _response(200, {"data": []})

    response = await client.get_authed_user()

    assert response.body is None


@pytest.mark.asyncio
async def test_get_authed_user_malformed_user_is_transport_error(client):
    client.session.get.return_value = _response(200, {"users": [{"name": "x"}]})

    with pytest.raises(requests.RequestException):
        await client.get_authed_user()


# ---------------------------------------------------------------------------
# TokenAuth
# ---------------------------------------------------------------------------


def test_token_auth_without_token(store):
    auth = TokenAuth(store)
    assert not auth.is_authenticated()
    with pytest.raises(AuthenticationRequiredError):
        auth.get_credentials()


def test_token_auth_with_token(store):
    store.set("tok123")
    auth = TokenAuth(store)
    assert auth.is_authenticated()
    assert auth.get_credentials().headers == {"Authorization": "Bearer tok123"}
