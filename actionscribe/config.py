"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

SUPPORTED_AI_PROVIDERS = ("openai", "claude")
AI_PROVIDER = os.getenv("AI_PROVIDER", "openai").strip().lower()
if AI_PROVIDER not in SUPPORTED_AI_PROVIDERS:
    _stderr_print(f"Unsupported AI_PROVIDER={AI_PROVIDER!r}, falling back to 'openai'")
    AI_PROVIDER = "openai"

DEFAULT_MODELS = {
    "openai": os.getenv("OPENAI_MODEL", "gpt-4-turbo-preview"),
    "claude": os.getenv("CLAUDE_MODEL", "claude-sonnet-4-5-20250929"),
}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def parse_session_tokens(raw: str) -> Dict[str, str]:
    """Parse ``token=email,token=email`` into a token -> email map.

    Malformed pairs are skipped with a notice on stderr.
    """
    tokens: Dict[str, str] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        token, sep, email = pair.partition("=")
        token, email = token.strip(), email.strip().lower()
        if not sep or not token or not email:
            _stderr_print(f"Ignoring malformed SESSION_TOKENS entry: {pair!r}")
            continue
        tokens[token] = email
    return tokens


CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    "ai_provider": AI_PROVIDER,
    # Provider
    "openai_api_key": os.getenv("OPENAI_API_KEY", ""),
    "openai_base_url": os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
    "model": DEFAULT_MODELS[AI_PROVIDER],
    "temperature": float(os.getenv("AI_TEMPERATURE", "0.7")),
    "timeout_seconds": float(os.getenv("AI_TIMEOUT_SECONDS", "60")),
    # Storage
    "database_url": os.getenv("DATABASE_URL", "sqlite:///actionscribe.db"),
    # Sessions: bearer token -> user email
    "session_tokens": parse_session_tokens(os.getenv("SESSION_TOKENS", "")),
    "auto_provision_users": _env_flag("AUTO_PROVISION_USERS", "true"),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class ProviderConfig:
    name: str = "openai"
    api_key: str = ""
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4-turbo-preview"
    temperature: float = 0.7
    timeout_seconds: float = 60.0


@dataclass
class StorageConfig:
    database_url: str = "sqlite:///actionscribe.db"


@dataclass
class AuthConfig:
    session_tokens: Dict[str, str] = field(default_factory=dict)
    auto_provision_users: bool = True


@dataclass
class AppConfig:
    """Typed configuration passed explicitly into the app factory."""

    port: int = 3000
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            provider=ProviderConfig(
                name=CONFIG["ai_provider"],
                api_key=CONFIG["openai_api_key"],
                base_url=CONFIG["openai_base_url"],
                model=CONFIG["model"],
                temperature=CONFIG["temperature"],
                timeout_seconds=CONFIG["timeout_seconds"],
            ),
            storage=StorageConfig(database_url=CONFIG["database_url"]),
            auth=AuthConfig(
                session_tokens=dict(CONFIG["session_tokens"]),
                auto_provision_users=CONFIG["auto_provision_users"],
            ),
        )
