"""Unit tests for GetCurrentUserUseCase."""

import pytest

from gallery.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from gallery.config import AuthSettings, ModerationSettings, Settings
from gallery.util.jwt import JWTError
from tests.conftest import ADMIN_EMAIL, make_principal, make_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture(
    settings=Settings(
        environment="test", moderation=ModerationSettings(admins=[ADMIN_EMAIL])
    )
)


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_principal_from_token(self, unit_env):
        auth_settings = await unit_env.get(AuthSettings)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        principal = make_principal("Ada", email="ada@gallery.test")

        response = await use_case.execute(
            GetCurrentUserRequest(token=make_token(principal, auth_settings))
        )

        assert response.user_id == str(principal.id)
        assert response.display_name == "Ada"
        assert response.email == "ada@gallery.test"
        assert response.is_admin is False

    @pytest.mark.asyncio
    async def test_flags_administrators(self, unit_env, admin):
        auth_settings = await unit_env.get(AuthSettings)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        response = await use_case.execute(
            GetCurrentUserRequest(token=make_token(admin, auth_settings))
        )

        assert response.is_admin is True

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="garbage"))

    @pytest.mark.asyncio
    async def test_accepts_non_uuid_provider_uid(self, unit_env):
        auth_settings = await unit_env.get(AuthSettings)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        principal = make_principal("Ayse", user_id="Xk3fQ9aBcDeFgHiJkLmNoPqRsT12")

        response = await use_case.execute(
            GetCurrentUserRequest(token=make_token(principal, auth_settings))
        )

        assert response.user_id == "Xk3fQ9aBcDeFgHiJkLmNoPqRsT12"
