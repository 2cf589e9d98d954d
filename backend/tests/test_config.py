"""Settings — environment parsing and URL normalization."""

from user_service.config import Settings


def test_plain_postgres_url_is_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_are_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("JWT_TTL_MINUTES", "15")
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")
    settings = Settings()
    assert settings.jwt_ttl_minutes == 15
    assert settings.bcrypt_rounds == 5
