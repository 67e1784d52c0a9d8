"""
Tests for token handling and settings validation.
"""

import jwt
import pytest
from pydantic import ValidationError as PydanticValidationError

from core.config import Settings, get_settings, reload_settings
from core.security import create_token, verify_token


class TestTokens:
    """Test JWT issue/verify round trip and rejection."""

    def test_claims(self):
        claims = verify_token(create_token("test", is_admin=True))

        assert claims["username"] == "test"
        assert claims["isAdmin"] is True
        assert claims["exp"] > claims["iat"]

    def test_wrong_secret_rejected(self):
        token = jwt.encode({"username": "x", "iat": 0, "exp": 2**31}, "other-secret")

        with pytest.raises(jwt.InvalidTokenError):
            verify_token(token)

    def test_expired_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"username": "x", "isAdmin": True, "iat": 0, "exp": 1},
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

        with pytest.raises(jwt.ExpiredSignatureError):
            verify_token(token)


class TestSettings:
    """Test Settings validators."""

    def test_log_level_normalised(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            Settings(LOG_LEVEL="LOUD")

    def test_token_ttl_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            Settings(ACCESS_TOKEN_TTL=0)

    def test_database_url(self):
        settings = Settings(POSTGRES_USER="u", POSTGRES_PASSWORD="p", POSTGRES_DB="d")

        assert settings.get_database_url() == "postgresql+asyncpg://u:p@localhost:5432/d"
        assert settings.get_database_url(async_driver=False).startswith(
            "postgresql+psycopg2://"
        )

    def test_reload_picks_up_environment(self, monkeypatch):
        with monkeypatch.context() as m:
            m.setenv("ACCESS_TOKEN_TTL", "60")
            settings = reload_settings()

            assert settings.ACCESS_TOKEN_TTL == 60
            assert get_settings() is settings

        assert reload_settings().ACCESS_TOKEN_TTL != 60
