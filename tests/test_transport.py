"""Tests for the backend transport adapter."""

import json

import httpx
import pytest

from inciscope.exceptions import DecodeError, TransportError
from inciscope.transport import BackendClient, TransportResult, resolve_report_url

from conftest import BASE_URL, WATER


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_ok(self, mock_backend) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/health"
            return httpx.Response(200, json={"ok": True})

        async with mock_backend(handler) as backend:
            result = await backend.health()

        assert result.success is True
        assert result.value.ok is True
        assert result.error is None

    @pytest.mark.asyncio
    async def test_health_non_boolean_ok_is_decode_error(self, mock_backend) -> None:
        async with mock_backend(lambda r: httpx.Response(200, json={"ok": "yes"})) as backend:
            result = await backend.health()

        assert result.success is False
        assert isinstance(result.error, DecodeError)


class TestSearch:
    @pytest.mark.asyncio
    async def test_search_sends_encoded_query(self, mock_backend) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"results": [WATER]})

        async with mock_backend(handler) as backend:
            result = await backend.search("rose & aqua")

        assert seen[0].url.path == "/search"
        assert seen[0].url.params["query"] == "rose & aqua"
        assert result.success is True
        item = result.value.results[0]
        assert item.source_id == "1"
        assert item.display_name == "Water"
        assert item.functions == ["solvent"]
        assert item.combined_score == 0.85

    @pytest.mark.asyncio
    async def test_search_missing_results_field(self, mock_backend) -> None:
        async with mock_backend(lambda r: httpx.Response(200, json={})) as backend:
            result = await backend.search("Aqua")

        assert result.success is True
        assert result.value.results == []

    @pytest.mark.asyncio
    async def test_non_2xx_carries_status(self, mock_backend) -> None:
        async with mock_backend(lambda r: httpx.Response(503)) as backend:
            result = await backend.search("Aqua")

        assert result.success is False
        assert isinstance(result.error, TransportError)
        assert result.error.status_code == 503
        assert str(result.error) == "Backend error: 503 Service Unavailable"

    @pytest.mark.asyncio
    async def test_rate_limit_status(self, mock_backend) -> None:
        async with mock_backend(lambda r: httpx.Response(429, json={})) as backend:
            result = await backend.search("Aqua")

        assert result.error.status_code == 429
        assert str(result.error).startswith("Backend error: 429")

    @pytest.mark.asyncio
    async def test_network_failure(self, mock_backend) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with mock_backend(handler) as backend:
            result = await backend.search("Aqua")

        assert result.success is False
        assert result.error.status_code is None
        assert "connection refused" in str(result.error)

    @pytest.mark.asyncio
    async def test_timeout(self, mock_backend) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        async with mock_backend(handler) as backend:
            result = await backend.search("Aqua")

        assert result.success is False
        assert "timed out" in str(result.error)

    @pytest.mark.asyncio
    async def test_invalid_json_is_decode_error(self, mock_backend) -> None:
        async with mock_backend(lambda r: httpx.Response(200, text="<html>oops</html>")) as backend:
            result = await backend.search("Aqua")

        assert result.success is False
        assert isinstance(result.error, DecodeError)
        assert result.error.status_code == 200


class TestValidate:
    @pytest.mark.asyncio
    async def test_validate_posts_json_body(self, mock_backend) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/validate"
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200,
                json={
                    "results": [
                        {"ingredient": "Aqua", "concentration": "40%", "status": "✅ Compliant"}
                    ],
                    "summary": "All clear.",
                    "pdf_url": "/reports/cream.pdf",
                },
            )

        async with mock_backend(handler) as backend:
            result = await backend.validate("Cream", {"Aqua": "40%"})

        assert bodies == [{"name": "Cream", "ingredients": {"Aqua": "40%"}}]
        assert result.success is True
        assert result.value.summary == "All clear."
        assert result.value.pdf_url == "/reports/cream.pdf"
        assert result.value.results[0].passed is True

    @pytest.mark.asyncio
    async def test_validate_optional_fields_absent(self, mock_backend) -> None:
        async with mock_backend(lambda r: httpx.Response(200, json={"results": []})) as backend:
            result = await backend.validate("Cream", {"Aqua": "40%"})

        assert result.success is True
        assert result.value.summary is None
        assert result.value.pdf_url is None


class TestReportUrl:
    def test_relative_reference(self) -> None:
        assert resolve_report_url(BASE_URL, "/reports/a.pdf") == f"{BASE_URL}/reports/a.pdf"

    def test_reference_without_leading_slash(self) -> None:
        assert resolve_report_url(BASE_URL + "/", "reports/a.pdf") == f"{BASE_URL}/reports/a.pdf"

    def test_absolute_reference_unchanged(self) -> None:
        url = "https://cdn.example.com/a.pdf"
        assert resolve_report_url(BASE_URL, url) == url

    def test_missing_reference(self) -> None:
        assert resolve_report_url(BASE_URL, None) is None
        assert resolve_report_url(BASE_URL, "") is None

    def test_client_strips_trailing_slash(self) -> None:
        backend = BackendClient("http://localhost:8000/")
        assert backend.base_url == "http://localhost:8000"
        assert backend.report_url("/r.pdf") == "http://localhost:8000/r.pdf"


class TestTransportResult:
    def test_ok(self) -> None:
        result = TransportResult.ok(42)
        assert result.success is True
        assert result.value == 42

    def test_fail(self) -> None:
        error = TransportError("boom", status_code=500)
        result = TransportResult.fail(error)
        assert result.success is False
        assert result.value is None
        assert result.error is error
