"""Tests for reviewer authentication."""

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch
from src.services.auth import bearer_token, resolve_reviewer, sign_out
from src.utils.errors import AuthError


@pytest.fixture
def auth_client():
    """Patch the auth module's Supabase client."""
    client = MagicMock()
    with patch('src.services.auth.SupabaseClient') as mock_client_class:
        mock_client_class.return_value.__aenter__.return_value = client
        mock_client_class.return_value.__aexit__.return_value = None
        yield client


@pytest.mark.unit
@pytest.mark.parametrize("header,expected", [
    ("Bearer abc.def", "abc.def"),
    ("bearer   tok ", "tok"),
    ("Basic dXNlcg==", None),
    ("Bearer ", None),
    ("", None),
    (None, None),
])
def test_bearer_token(header, expected):
    """Test bearer token extraction."""
    assert bearer_token(header) == expected


@pytest.mark.unit
@pytest.mark.asyncio
async def test_resolve_reviewer(auth_client):
    """Test resolving a valid session to a reviewer."""
    auth_client.auth.get_user.return_value = SimpleNamespace(
        user=SimpleNamespace(id="user-1", email="rev@example.com")
    )
    
    reviewer = await resolve_reviewer("Bearer good-token")
    
    auth_client.auth.get_user.assert_called_once_with("good-token")
    assert reviewer.user_id == "user-1"
    assert reviewer.email == "rev@example.com"
    assert reviewer.access_token == "good-token"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_resolve_reviewer_missing_header(auth_client):
    """Test that requests without a token are rejected before any lookup."""
    with pytest.raises(AuthError):
        await resolve_reviewer(None)
    
    auth_client.auth.get_user.assert_not_called()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_resolve_reviewer_invalid_session(auth_client):
    """Test that an auth API failure becomes AuthError."""
    auth_client.auth.get_user.side_effect = Exception("invalid JWT")
    
    with pytest.raises(AuthError):
        await resolve_reviewer("Bearer expired")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_resolve_reviewer_no_user(auth_client):
    """Test that an empty user response is rejected."""
    auth_client.auth.get_user.return_value = SimpleNamespace(user=None)
    
    with pytest.raises(AuthError):
        await resolve_reviewer("Bearer token")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_sign_out(auth_client, reviewer):
    """Test that sign-out revokes the reviewer's token."""
    await sign_out(reviewer)
    
    auth_client.auth.admin.sign_out.assert_called_once_with(reviewer.access_token)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_sign_out_failure(auth_client, reviewer):
    """Test that sign-out failures surface as AuthError."""
    auth_client.auth.admin.sign_out.side_effect = Exception("network down")
    
    with pytest.raises(AuthError):
        await sign_out(reviewer)
