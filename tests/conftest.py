"""Shared fixtures: a fake provider and an app backed by a temp SQLite file."""

import pytest
from httpx import ASGITransport

from actionscribe.adapters.web.server import create_app
from actionscribe.config import AppConfig, AuthConfig, ProviderConfig, StorageConfig

ALICE = "tok-alice"
BOB = "tok-bob"


class FakeProvider:
    """LLMPort stand-in that records prompts and replays a canned response."""

    is_configured = True

    def __init__(self, response="NO_ACTIONS", error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def execute(self, message, model=None, temperature=None):
        self.calls.append({"message": message, "model": model, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def config(tmp_path):
    return AppConfig(
        provider=ProviderConfig(name="openai", api_key="sk-test"),
        storage=StorageConfig(database_url=f"sqlite:///{tmp_path / 'actions.db'}"),
        auth=AuthConfig(
            session_tokens={ALICE: "alice@example.com", BOB: "bob@example.com"},
        ),
    )


@pytest.fixture
def app(config, provider):
    return create_app(config, provider=provider)


@pytest.fixture
def transport(app):
    return ASGITransport(app=app)


@pytest.fixture
def make_provider():
    return FakeProvider
