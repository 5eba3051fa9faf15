"""End-to-end tests for POST /mcp and the service routes."""

import pytest
from fastapi.testclient import TestClient
from helpers import rpc
from pydantic import BaseModel

from outline_mcp.config import Settings
from outline_mcp.context import RequestContext
from outline_mcp.errors import CredentialMissingError
from outline_mcp.mcp.jsonrpc import SERVER_ERROR
from outline_mcp.mcp.transport import extract_api_key, resolve_credential
from outline_mcp.server import create_app
from outline_mcp.tools.registry import ToolDefinition, ToolRegistry

LIST_COLLECTIONS = rpc("tools/call", {"name": "listCollections", "arguments": {}}, id=1)


class EmptyParams(BaseModel):
    pass


class TestCredentialResolution:
    @pytest.mark.parametrize(
        "headers,expected",
        [
            ({"x-outline-api-key": "primary"}, "primary"),
            ({"outline-api-key": "secondary"}, "secondary"),
            ({"authorization": "Bearer token-1"}, "token-1"),
            ({"authorization": "bearer token-2"}, "token-2"),
            ({"authorization": "raw-token"}, "raw-token"),
            ({}, None),
        ],
    )
    def test_extract_api_key(self, headers, expected) -> None:
        assert extract_api_key(headers) == expected

    def test_header_priority(self) -> None:
        headers = {
            "authorization": "Bearer third",
            "outline-api-key": "second",
            "x-outline-api-key": "first",
        }
        assert extract_api_key(headers) == "first"
        del headers["x-outline-api-key"]
        assert extract_api_key(headers) == "second"

    def test_header_wins_over_fallback(self) -> None:
        assert resolve_credential({"x-outline-api-key": "header"}, fallback="env") == "header"

    def test_fallback_used_without_header(self) -> None:
        assert resolve_credential({}, fallback="env") == "env"

    def test_missing_everywhere(self) -> None:
        with pytest.raises(CredentialMissingError) as exc_info:
            resolve_credential({}, fallback=None)
        assert exc_info.value.code == SERVER_ERROR
        assert exc_info.value.message.startswith("credential required")


class TestMCPEndpoint:
    def test_tools_call_with_header(self, client: TestClient, outline_stub) -> None:
        response = client.post("/mcp", json=LIST_COLLECTIONS, headers={"x-outline-api-key": "secret123"})

        assert response.status_code == 200
        body = response.json()
        assert body["jsonrpc"] == "2.0"
        assert body["id"] == 1
        assert "error" not in body
        collections = body["result"]["structuredContent"]["collections"]
        assert [c["name"] for c in collections] == ["Engineering", "Product"]
        assert outline_stub.endpoints == ["collections.list"]
        assert outline_stub.authorizations == ["Bearer secret123"]

    def test_credential_not_reused_by_next_request(self, client: TestClient, outline_stub) -> None:
        first = client.post("/mcp", json=LIST_COLLECTIONS, headers={"x-outline-api-key": "secret123"})
        assert first.status_code == 200

        second = client.post("/mcp", json=rpc("tools/call", {"name": "listCollections"}, id=2))

        assert second.status_code == 405
        assert second.json() == {
            "jsonrpc": "2.0",
            "id": 2,
            "error": {"code": -32000, "message": CredentialMissingError().message},
        }
        assert len(outline_stub.requests) == 1

    def test_each_request_uses_its_own_credential(self, client: TestClient, outline_stub) -> None:
        for n in range(3):
            response = client.post(
                "/mcp", json=LIST_COLLECTIONS, headers={"authorization": f"Bearer key-{n}"}
            )
            assert response.status_code == 200
        assert outline_stub.authorizations == ["Bearer key-0", "Bearer key-1", "Bearer key-2"]

    def test_environment_fallback(self, outline_stub) -> None:
        app_settings = Settings(_env_file=None, outline_api_key="env-key")
        client = TestClient(create_app(app_settings=app_settings))

        response = client.post("/mcp", json=LIST_COLLECTIONS)

        assert response.status_code == 200
        assert outline_stub.authorizations == ["Bearer env-key"]

    def test_missing_credential_refused_before_dispatch(self, app_settings, outline_stub) -> None:
        dispatched = []

        async def spy(params, ctx):
            dispatched.append(ctx.get_credential())
            return "ok"

        registry = ToolRegistry()
        registry.register(
            ToolDefinition(
                name="listCollections",
                description="",
                input_model=EmptyParams,
                handler=spy,
            )
        )
        client = TestClient(create_app(app_settings=app_settings, registry=registry))

        response = client.post("/mcp", json=LIST_COLLECTIONS)

        assert response.json()["error"]["code"] == -32000
        assert dispatched == []

    def test_initialize(self, client: TestClient) -> None:
        response = client.post("/mcp", json=rpc("initialize", {}), headers={"x-outline-api-key": "k"})
        assert response.status_code == 200
        assert response.json()["result"]["capabilities"] == {"tools": {}}

    def test_tools_list(self, client: TestClient) -> None:
        response = client.post("/mcp", json=rpc("tools/list"), headers={"outline-api-key": "k"})
        tools = response.json()["result"]["tools"]
        assert tools[0]["name"] == "getDocument"
        assert len(tools) == 18

    def test_unknown_method_is_400(self, client: TestClient) -> None:
        response = client.post("/mcp", json=rpc("prompts/list", id=5), headers={"x-outline-api-key": "k"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == -32601
        assert response.json()["id"] == 5

    def test_unknown_tool_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/mcp",
            json=rpc("tools/call", {"name": "dropDatabase"}),
            headers={"x-outline-api-key": "k"},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == -32602

    def test_invalid_arguments_is_400(self, client: TestClient) -> None:
        response = client.post(
            "/mcp",
            json=rpc("tools/call", {"name": "getDocument", "arguments": {}}),
            headers={"x-outline-api-key": "k"},
        )
        assert response.status_code == 400
        assert "id" in response.json()["error"]["message"]

    def test_outline_failure_is_500(self, client: TestClient, outline_stub) -> None:
        outline_stub.status_code = 401
        outline_stub.error_body = {"ok": False, "error": "authentication_required", "message": "Invalid API key"}

        response = client.post("/mcp", json=LIST_COLLECTIONS, headers={"x-outline-api-key": "bad"})

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == -32603
        assert "Invalid API key" in error["message"]

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/mcp",
            content=b"{not json",
            headers={"x-outline-api-key": "k", "content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32700, "message": "Parse error"},
        }

    def test_malformed_json_without_credential_is_refused(self, client: TestClient) -> None:
        response = client.post(
            "/mcp", content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 405
        assert response.json() == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32000, "message": CredentialMissingError().message},
        }

    def test_move_document_without_target_is_400(self, client: TestClient, outline_stub) -> None:
        response = client.post(
            "/mcp",
            json=rpc("tools/call", {"name": "moveDocument", "arguments": {"id": "doc-1"}}),
            headers={"x-outline-api-key": "k"},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == -32602
        assert outline_stub.requests == []

    def test_float_request_id_echoed(self, client: TestClient) -> None:
        response = client.post(
            "/mcp", json=rpc("tools/list", id=1.5), headers={"x-outline-api-key": "k"}
        )
        assert response.status_code == 200
        assert response.json()["id"] == 1.5

    def test_context_reset_once_per_request(self, client: TestClient, outline_stub, monkeypatch) -> None:
        resets: list[str | None] = []
        original_reset = RequestContext.reset_instance.__func__

        def counting_reset(cls) -> None:
            resets.append(cls.get_instance().get_credential())
            original_reset(cls)

        monkeypatch.setattr(RequestContext, "reset_instance", classmethod(counting_reset))

        client.post("/mcp", json=LIST_COLLECTIONS, headers={"x-outline-api-key": "ok-key"})
        assert resets == ["ok-key"]

        outline_stub.status_code = 500
        response = client.post("/mcp", json=LIST_COLLECTIONS, headers={"x-outline-api-key": "fail-key"})
        assert response.json()["error"]["code"] == -32603
        assert resets == ["ok-key", "fail-key"]

        response = client.post("/mcp", json=LIST_COLLECTIONS)
        assert response.status_code == 405
        assert resets == ["ok-key", "fail-key", None]

        response = client.post(
            "/mcp", content=b"{not json", headers={"x-outline-api-key": "parse-key"}
        )
        assert response.json()["error"]["code"] == -32700
        assert resets == ["ok-key", "fail-key", None, "parse-key"]


class TestServiceRoutes:
    def test_health(self, client: TestClient) -> None:
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["service"] == "outline-mcp-server"
        assert body["timestamp"]

    def test_root(self, client: TestClient) -> None:
        body = client.get("/").json()
        assert "/mcp" in body["endpoints"]

    def test_cors_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/mcp",
            headers={
                "Origin": "https://agent.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "x-outline-api-key",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_unknown_path(self, client: TestClient) -> None:
        assert client.get("/nowhere").status_code == 404
