"""Tests for the /fetch-html, /analyze and /health endpoints.

Network access is replaced with ``AsyncMock`` patches on the router modules.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routers.analyze import limiter as analyze_limiter
from app.routers.fetch import limiter as fetch_limiter

client = TestClient(app)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the slowapi in-memory counters before every test."""
    analyze_limiter._storage.reset()
    fetch_limiter._storage.reset()
    yield


_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Portfolio of Jo</title><style>body{color:#123}</style></head>
<body>
  <header>Jo</header>
  <main><h1>Selected work</h1><section></section></main>
  <footer>Contact</footer>
</body>
</html>"""


def _fetch(url: str = "https://example.com"):
    return client.get("/fetch-html", params={"url": url})


class TestFetchHtml:
    def test_returns_inlined_html(self):
        with patch("app.routers.fetch.fetch_url", new=AsyncMock(return_value="<html>raw</html>")), patch(
            "app.routers.fetch.inline_stylesheets",
            new=AsyncMock(return_value="<html>inlined!</html>"),
        ) as inline:
            resp = _fetch()

        assert resp.status_code == 200
        data = resp.json()
        assert data["html"] == "<html>inlined!</html>"
        assert data["originalSize"] == len("<html>raw</html>")
        assert data["inlinedSize"] == len("<html>inlined!</html>")
        assert data["warning"] is None
        inline.assert_awaited_once_with("<html>raw</html>", "https://example.com")

    def test_large_html_warning(self):
        big = "<html>" + "x" * 500_001 + "</html>"
        with patch("app.routers.fetch.fetch_url", new=AsyncMock(return_value=big)), patch(
            "app.routers.fetch.inline_stylesheets", new=AsyncMock(return_value=big)
        ):
            resp = _fetch()
        assert resp.json()["warning"] == "Large HTML detected"

    def test_missing_url_is_rejected(self):
        assert client.get("/fetch-html").status_code == 422

    def test_blocked_url_returns_400(self):
        with patch(
            "app.routers.fetch.fetch_url",
            new=AsyncMock(side_effect=ValueError("Requests to private/internal addresses are not allowed.")),
        ):
            resp = _fetch("http://127.0.0.1")
        assert resp.status_code == 400
        assert "private" in resp.json()["detail"]

    def test_timeout_returns_504(self):
        with patch("app.routers.fetch.fetch_url", new=AsyncMock(side_effect=httpx.ConnectTimeout("slow"))):
            resp = _fetch()
        assert resp.status_code == 504

    def test_http_status_error_returns_502(self):
        request = httpx.Request("GET", "https://example.com")
        error = httpx.HTTPStatusError(
            "not found", request=request, response=httpx.Response(404, request=request)
        )
        with patch("app.routers.fetch.fetch_url", new=AsyncMock(side_effect=error)):
            resp = _fetch()
        assert resp.status_code == 502
        assert resp.json()["detail"] == "Target URL returned HTTP 404."

    def test_oversized_body_returns_502(self):
        with patch(
            "app.routers.fetch.fetch_url",
            new=AsyncMock(side_effect=RuntimeError("Response body exceeds the maximum allowed size.")),
        ):
            resp = _fetch()
        assert resp.status_code == 502


class TestAnalyze:
    def test_returns_summary_and_templates(self):
        resp = client.post("/analyze", json={"html": _PAGE, "url": "https://jo.example/"})
        assert resp.status_code == 200
        data = resp.json()

        summary = data["websiteSummary"]
        assert summary["metadata"]["title"] == "Portfolio of Jo"
        assert summary["metadata"]["domain"] == "jo.example"
        assert summary["content"]["type"] == "portfolio"
        assert summary["structure"]["layoutType"] == "simple-page"
        assert summary["design"]["colors"] == ["#123"]
        assert summary["accessibility"]["colorContrast"] == "unknown"

        assert "<h1>Selected work</h1>" in data["cleanTemplate"]
        assert data["templateSize"] == len(data["cleanTemplate"])
        assert data["originalSize"] == len(_PAGE)
        assert "scroll-behavior: smooth" in data["enhancedHtml"]
        assert data["processingMethod"] == "summary-based-fallback"

    def test_url_is_optional(self):
        resp = client.post("/analyze", json={"html": "<p>Hello</p>"})
        assert resp.status_code == 200
        assert resp.json()["websiteSummary"]["metadata"]["domain"] == ""

    def test_empty_html_is_rejected(self):
        assert client.post("/analyze", json={"html": ""}).status_code == 422

    def test_missing_html_is_rejected(self):
        assert client.post("/analyze", json={"url": "https://example.com"}).status_code == 422


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "OK"
