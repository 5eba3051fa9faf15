"""Test helpers: JSON-RPC request builder and an in-memory Outline API."""

import json

import httpx

OUTLINE_RESPONSES = {
    "collections.list": {
        "data": [{"id": "col-1", "name": "Engineering"}, {"id": "col-2", "name": "Product"}],
        "pagination": {"offset": 0, "limit": 25, "nextPath": None},
    },
    "collections.info": {"data": {"id": "col-1", "name": "Engineering"}},
    "documents.info": {"data": {"id": "doc-1", "title": "Runbook", "text": "# Runbook"}},
    "documents.list": {
        "data": [{"id": "doc-1", "title": "Runbook"}],
        "pagination": {"offset": 0, "limit": 25},
    },
    "documents.search": {
        "data": [{"ranking": 1.2, "context": "on-call", "document": {"id": "doc-1"}}]
    },
    "documents.answerQuestion": {
        "documents": [{"id": "doc-1"}],
        "search": {"answer": "Page the on-call engineer."},
    },
    "documents.create": {"data": {"id": "doc-2", "title": "New"}},
    "documents.delete": {"success": True},
    "comments.create": {"data": {"id": "cmt-1"}},
    "users.list": {
        "data": [{"id": "usr-1", "name": "Ada"}],
        "pagination": {"offset": 0, "limit": 25},
    },
}


def rpc(method: str, params: dict | None = None, id: int | float | str | None = 1) -> dict:
    body = {"jsonrpc": "2.0", "method": method, "id": id}
    if params is not None:
        body["params"] = params
    return body


class OutlineStub:
    """Records Outline requests and answers them from OUTLINE_RESPONSES."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.error_body: dict | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json=self.error_body or {"ok": False})
        endpoint = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(200, json=OUTLINE_RESPONSES.get(endpoint, {"data": {}}))

    @property
    def endpoints(self) -> list[str]:
        return [request.url.path.rsplit("/", 1)[-1] for request in self.requests]

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    @property
    def authorizations(self) -> list[str]:
        return [request.headers["authorization"] for request in self.requests]
