"""Tests for request authentication dependencies."""

import pytest
from starlette.requests import Request

from linkhub.core.exceptions import UnauthorizedError
from linkhub.features.accounts.deps import (
    DatabaseSessionResolver,
    extract_session_tokens,
    get_current_user,
)
from linkhub.features.accounts.schemas import SessionUser


def make_request(headers: dict[str, str] | None = None) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "query_string": b"", "headers": raw})


class StubAccountService:
    def __init__(self, user: SessionUser | None) -> None:
        self.user = user
        self.tokens: list[str] = []

    async def resolve_token(self, db, token):
        self.tokens.append(token)
        return self.user


class TokenTableService:
    def __init__(self, users: dict[str, SessionUser]) -> None:
        self.users = users
        self.tokens: list[str] = []

    async def resolve_token(self, db, token):
        self.tokens.append(token)
        return self.users.get(token)


class StubResolver:
    def __init__(self, user: SessionUser | None) -> None:
        self.user = user

    async def resolve(self, request):
        return self.user


class TestExtractSessionTokens:
    def test_cookie(self):
        assert extract_session_tokens(make_request({"Cookie": "linkhub_session=abc"})) == ["abc"]

    def test_bearer_header(self):
        assert extract_session_tokens(make_request({"Authorization": "Bearer abc"})) == ["abc"]

    def test_bearer_scheme_is_case_insensitive(self):
        assert extract_session_tokens(make_request({"Authorization": "bearer abc"})) == ["abc"]

    def test_cookie_comes_before_header(self):
        request = make_request({"Cookie": "linkhub_session=cookie", "Authorization": "Bearer header"})
        assert extract_session_tokens(request) == ["cookie", "header"]

    def test_same_token_is_listed_once(self):
        request = make_request({"Cookie": "linkhub_session=abc", "Authorization": "Bearer abc"})
        assert extract_session_tokens(request) == ["abc"]

    @pytest.mark.parametrize("value", ["Basic abc", "Bearer", "Bearer   ", "abc"])
    def test_other_authorization_values(self, value):
        assert extract_session_tokens(make_request({"Authorization": value})) == []

    def test_no_credentials(self):
        assert extract_session_tokens(make_request()) == []


class TestDatabaseSessionResolver:
    async def test_resolves_presented_token(self, mock_db, session_user):
        service = StubAccountService(session_user)
        resolver = DatabaseSessionResolver(mock_db, service=service)

        user = await resolver.resolve(make_request({"Authorization": "Bearer abc"}))

        assert user == session_user
        assert service.tokens == ["abc"]

    async def test_no_token_skips_lookup(self, mock_db, session_user):
        service = StubAccountService(session_user)
        resolver = DatabaseSessionResolver(mock_db, service=service)

        assert await resolver.resolve(make_request()) is None
        assert service.tokens == []

    async def test_stale_cookie_falls_back_to_bearer(self, mock_db, session_user):
        service = TokenTableService({"fresh": session_user})
        resolver = DatabaseSessionResolver(mock_db, service=service)
        request = make_request({"Cookie": "linkhub_session=stale", "Authorization": "Bearer fresh"})

        user = await resolver.resolve(request)

        assert user == session_user
        assert service.tokens == ["stale", "fresh"]

    async def test_valid_cookie_skips_bearer_lookup(self, mock_db, session_user):
        service = TokenTableService({"cookie": session_user})
        resolver = DatabaseSessionResolver(mock_db, service=service)
        request = make_request({"Cookie": "linkhub_session=cookie", "Authorization": "Bearer other"})

        assert await resolver.resolve(request) == session_user
        assert service.tokens == ["cookie"]

    async def test_no_valid_token_returns_none(self, mock_db):
        service = TokenTableService({})
        resolver = DatabaseSessionResolver(mock_db, service=service)
        request = make_request({"Cookie": "linkhub_session=stale", "Authorization": "Bearer gone"})

        assert await resolver.resolve(request) is None
        assert service.tokens == ["stale", "gone"]


class TestGetCurrentUser:
    async def test_returns_identity(self, session_user):
        user = await get_current_user(make_request(), resolver=StubResolver(session_user))
        assert user is session_user

    async def test_missing_identity_raises(self):
        with pytest.raises(UnauthorizedError):
            await get_current_user(make_request(), resolver=StubResolver(None))
