"""Shared fixtures: settings without a fallback key, a stubbed Outline API, a test client."""

import httpx
import pytest
from fastapi.testclient import TestClient
from helpers import OutlineStub

from outline_mcp.config import Settings
from outline_mcp.context import RequestContext
from outline_mcp.server import create_app
from outline_mcp.services import outline_client
from outline_mcp.services.outline_client import OutlineClient, resolve_api_key


@pytest.fixture(autouse=True)
def clean_request_context():
    RequestContext.reset_instance()
    yield
    RequestContext.reset_instance()


@pytest.fixture
def outline_stub(monkeypatch) -> OutlineStub:
    stub = OutlineStub()

    def stub_client(context=None):
        return OutlineClient(
            resolve_api_key(context),
            base_url="https://outline.test/api",
            transport=httpx.MockTransport(stub.handler),
        )

    monkeypatch.setattr(outline_client, "get_outline_client", stub_client)
    monkeypatch.setattr(outline_client.settings, "outline_api_key", None)
    return stub


@pytest.fixture
def app_settings() -> Settings:
    return Settings(_env_file=None, outline_api_key=None)


@pytest.fixture
def client(app_settings, outline_stub) -> TestClient:
    return TestClient(create_app(app_settings=app_settings))

