"""Tests for the typed AppConfig dataclass."""

from actionscribe.config import (
    AppConfig,
    AuthConfig,
    ProviderConfig,
    StorageConfig,
    parse_session_tokens,
)


class TestProviderConfig:
    def test_defaults(self):
        c = ProviderConfig()
        assert c.name == "openai"
        assert c.model == "gpt-4-turbo-preview"
        assert c.temperature == 0.7
        assert c.api_key == ""


class TestAuthConfig:
    def test_defaults(self):
        c = AuthConfig()
        assert c.session_tokens == {}
        assert c.auto_provision_users is True


class TestParseSessionTokens:
    def test_pairs(self):
        assert parse_session_tokens("a=alice@x.com, b=Bob@X.com") == {
            "a": "alice@x.com",
            "b": "bob@x.com",
        }

    def test_empty(self):
        assert parse_session_tokens("") == {}

    def test_malformed_skipped(self):
        assert parse_session_tokens("nope,=x@y.com,t=,ok=o@k.com") == {"ok": "o@k.com"}


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.port == 3000
        assert isinstance(c.provider, ProviderConfig)
        assert isinstance(c.storage, StorageConfig)
        assert isinstance(c.auth, AuthConfig)
        assert c.storage.database_url.startswith("sqlite")

    def test_from_env(self):
        c = AppConfig.from_env()
        assert c.provider.name in ("openai", "claude")
        assert c.provider.temperature >= 0

    def test_custom(self):
        c = AppConfig(port=8080, auth=AuthConfig(session_tokens={"t": "a@b.c"}))
        assert c.port == 8080
        assert c.auth.session_tokens["t"] == "a@b.c"
