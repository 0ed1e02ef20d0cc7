"""Tests for ApiClient against an in-process httpx transport."""

import json

import httpx
import pytest

from taller.domain.exceptions import EntityNotFoundError, GatewayError, PermissionDeniedError
from taller.infrastructure.http.api_client import ApiClient


def _client(handler, token: str | None = "secret") -> ApiClient:
    return ApiClient(
        base_url="http://backend.test/api/",
        token=token,
        transport=httpx.MockTransport(handler),
    )


class TestRequests:

    def test_get_sends_bearer_token_and_parses_json(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"idServicio": 1}])

        assert _client(handler).get("/servicios") == [{"idServicio": 1}]
        assert seen[0].url.path == "/api/servicios"
        assert seen[0].headers["Authorization"] == "Bearer secret"

    def test_no_token_no_header(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        _client(handler, token=None).get("/servicios")
        assert "Authorization" not in seen[0].headers

    def test_post_sends_json_body(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"id": 9})

        assert _client(handler).post("/repuestos", {"codigo": "X"}) == {"id": 9}
        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"codigo": "X"}

    def test_empty_body_returns_none(self):
        client = _client(lambda request: httpx.Response(204))
        assert client.delete("/servicios/1") is None


class TestErrors:

    def test_403_is_permission_denied(self):
        client = _client(lambda request: httpx.Response(403, json={"message": "Acceso denegado"}))
        with pytest.raises(PermissionDeniedError, match="Acceso denegado") as info:
            client.get("/servicios")
        assert info.value.status_code == 403

    def test_403_without_body_gets_default_message(self):
        client = _client(lambda request: httpx.Response(403))
        with pytest.raises(PermissionDeniedError, match="Permission denied"):
            client.get("/servicios")

    def test_404_is_not_found(self):
        client = _client(lambda request: httpx.Response(404))
        with pytest.raises(EntityNotFoundError):
            client.get("/servicios/99")

    def test_500_is_gateway_error_with_status(self):
        client = _client(lambda request: httpx.Response(500, json={"error": "Internal"}))
        with pytest.raises(GatewayError, match="Internal") as info:
            client.put("/servicios/1", {})
        assert info.value.status_code == 500

    def test_plain_text_error_body(self):
        client = _client(lambda request: httpx.Response(400, text="Codigo invalido"))
        with pytest.raises(GatewayError, match="Codigo invalido"):
            client.post("/servicios", {})

    def test_transport_failure_is_gateway_error_without_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GatewayError, match="unreachable") as info:
            _client(handler).get("/servicios")
        assert info.value.status_code is None

    def test_invalid_json(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(GatewayError, match="Invalid JSON"):
            client.get("/servicios")
