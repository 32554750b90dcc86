import pytest

from src.helpers.common_verification import verify_ok

pytestmark = [pytest.mark.e2e, pytest.mark.auth]


class TestAuth():
    @pytest.mark.smoke
    def test_create_token_returns_token(self, auth_api, env):
        response = auth_api.create_token(env.username, env.password)
        verify_ok(response)
        token = response.field("token")
        assert isinstance(token, str) and token

    def test_create_token_with_wrong_password_returns_no_token(self, auth_api, env):
        response = auth_api.create_token(env.username, env.password + "_wrong")
        assert not response.field("token")
