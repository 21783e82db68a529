"""Shared fixtures."""

from pathlib import Path

import httpx
import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def china_stocks_html() -> str:
    return (FIXTURES_DIR / "china_stocks.html").read_text(encoding="utf-8")


@pytest.fixture
def page_transport(china_stocks_html):
    """Mock transport serving the fixture page and recording requests."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text=china_stocks_html)

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run in an empty directory with no TARGET_URL override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TARGET_URL", raising=False)
    return tmp_path
