import csv

import httpx
import pytest
from typer.testing import CliRunner

from marketmap.cli import commands
from marketmap.cli.main import app
from marketmap.fetchers.companiesmarketcap import CompaniesMarketCapClient, MarketCapFetchError
from marketmap.models.config import DEFAULT_URL, AppConfig

runner = CliRunner()


@pytest.fixture
def mocked_client(monkeypatch, page_transport):
    """Route the CLI's HTTP client through the fixture page."""
    def factory(config, transport=None):
        return CompaniesMarketCapClient(config, transport=page_transport)

    monkeypatch.setattr(commands, "CompaniesMarketCapClient", factory)
    return page_transport


def test_end_to_end(workdir, page_transport, monkeypatch):
    monkeypatch.setenv("TARGET_URL", "http://127.0.0.1:8765/")
    config = AppConfig()

    stocks = commands.run_fetch(config, transport=page_transport)

    assert len(stocks) == 5
    assert str(page_transport.requests[0].url) == "http://127.0.0.1:8765/"
    csv_path = workdir / "top_100_china_stocks.csv"
    assert csv_path.exists()
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[1] == ["1", "Tencent", "TCEHY", "612250000000", "$66.92", "China"]

    html_path = commands.run_generate_html(config)

    assert html_path == workdir / "market_map.html"
    assert "Tencent" in html_path.read_text(encoding="utf-8")


def test_run_fetch_status_error(workdir):
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    with pytest.raises(MarketCapFetchError):
        commands.run_fetch(AppConfig(), transport=transport)

    assert not (workdir / "top_100_china_stocks.csv").exists()


def test_fetch_command(workdir, mocked_client):
    result = runner.invoke(app, ["fetch"])

    assert result.exit_code == 0, result.output
    assert "Found 5 stocks" in result.output
    assert (workdir / "top_100_china_stocks.csv").exists()


def test_fetch_command_failure(workdir, monkeypatch):
    not_found = httpx.MockTransport(lambda request: httpx.Response(404))

    def factory(config, transport=None):
        return CompaniesMarketCapClient(config, transport=not_found)

    monkeypatch.setattr(commands, "CompaniesMarketCapClient", factory)

    result = runner.invoke(app, ["fetch"])

    assert result.exit_code == 1
    assert "status code error: 404" in result.output
    assert not (workdir / "top_100_china_stocks.csv").exists()


def test_generate_html_command(workdir, mocked_client):
    assert runner.invoke(app, ["fetch"]).exit_code == 0

    result = runner.invoke(app, ["generate_html"])

    assert result.exit_code == 0, result.output
    assert "HTML generated" in result.output
    assert "Kweichow Moutai" in (workdir / "market_map.html").read_text(encoding="utf-8")


def test_generate_html_without_csv(workdir):
    result = runner.invoke(app, ["generate_html"])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not (workdir / "market_map.html").exists()


def test_show_command(workdir, mocked_client):
    assert runner.invoke(app, ["fetch"]).exit_code == 0

    result = runner.invoke(app, ["show", "--limit", "2"])

    assert result.exit_code == 0, result.output
    assert "TCEHY" in result.output
    assert "PDD" not in result.output


def test_unknown_command():
    result = runner.invoke(app, ["frobnicate"])

    assert result.exit_code != 0


def test_fetch_prints_status_lines_unwrapped(workdir, mocked_client):
    result = runner.invoke(app, ["fetch"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert f"Fetching URL: {DEFAULT_URL}" in lines
    assert "Found 5 stocks" in lines
    assert "Data saved to top_100_china_stocks.csv" in lines


def test_fetch_prints_target_url_verbatim(workdir, mocked_client, monkeypatch):
    monkeypatch.setenv("TARGET_URL", "http://h/?a=[b]x&c=[/x]")

    result = runner.invoke(app, ["fetch"])

    assert result.exit_code == 0, result.output
    assert "Fetching URL: http://h/?a=[b]x&c=[/x]" in result.output.splitlines()


def test_fetch_verbose(workdir, mocked_client):
    result = runner.invoke(app, ["fetch", "-v"])

    assert result.exit_code == 0, result.output
    assert (workdir / "top_100_china_stocks.csv").exists()


def test_no_arguments_prints_help():
    result = runner.invoke(app, [])

    assert "fetch" in result.output
    assert "generate_html" in result.output
    assert "show" in result.output


def _interrupt(*args, **kwargs):
    raise KeyboardInterrupt


def test_fetch_interrupted(workdir, monkeypatch):
    monkeypatch.setattr(commands, "run_fetch", _interrupt)

    assert runner.invoke(app, ["fetch"]).exit_code == 130


def test_generate_html_interrupted(workdir, monkeypatch):
    monkeypatch.setattr(commands, "run_generate_html", _interrupt)

    assert runner.invoke(app, ["generate_html"]).exit_code == 130


def test_show_interrupted(workdir, monkeypatch):
    monkeypatch.setattr(commands, "load_stocks", _interrupt)

    assert runner.invoke(app, ["show"]).exit_code == 130
