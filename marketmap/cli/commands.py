"""Fetch and render CLI commands."""

import logging
from pathlib import Path
from typing import Annotated

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from marketmap.config import load_config
from marketmap.fetchers.companiesmarketcap import CompaniesMarketCapClient, parse_stocks
from marketmap.models.config import AppConfig
from marketmap.models.stock import Stock
from marketmap.render import render_treemap
from marketmap.storage import load_stocks, save_stocks


console = Console()
logger = logging.getLogger(__name__)

# Status lines carry URLs and paths verbatim on one line
PLAIN = {"soft_wrap": True, "markup": False, "highlight": False}


VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging"),
]


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def load_app_config() -> AppConfig:
    """Load the bundled configuration."""
    return AppConfig.from_yaml(load_config())


def run_fetch(
    config: AppConfig,
    transport: httpx.BaseTransport | None = None,
) -> list[Stock]:
    """Fetch the ranking page, parse it and save the CSV file."""
    url = config.fetch.resolve_url()
    console.print(f"Fetching URL: {url}", **PLAIN)

    with CompaniesMarketCapClient(config.fetch, transport=transport) as client:
        html = client.fetch_page(url)

    stocks = parse_stocks(html)
    console.print(f"Found {len(stocks)} stocks", **PLAIN)

    save_stocks(stocks, config.output.csv_path)
    console.print(f"Data saved to {config.output.csv_path}", **PLAIN)
    return stocks


def run_generate_html(config: AppConfig) -> Path:
    """Render the treemap page from the saved CSV file."""
    stocks = load_stocks(config.output.csv_path)
    path = render_treemap(stocks, config.output.html_path, config.render)
    console.print(f"HTML generated: {path}", **PLAIN)
    return path


def _fail(message: str, exc: Exception) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    logger.debug(message, exc_info=exc)
    return typer.Exit(1)


def fetch(verbose: VerboseOption = False) -> None:
    """Scrape the ranking page and save it to CSV.

    The page URL can be overridden with the TARGET_URL environment variable.

    Example:
        marketmap fetch
    """
    setup_logging(verbose)

    try:
        config = load_app_config()
        run_fetch(config)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        raise _fail("Fetch failed", e)


def generate_html(verbose: VerboseOption = False) -> None:
    """Generate the treemap HTML page from the saved CSV.

    Example:
        marketmap generate_html
    """
    setup_logging(verbose)

    try:
        config = load_app_config()
        run_generate_html(config)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        raise _fail("HTML generation failed", e)


def show(
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", min=1, help="Number of rows to show"),
    ] = 20,
    verbose: VerboseOption = False,
) -> None:
    """Print the saved CSV as a table."""
    setup_logging(verbose)

    try:
        config = load_app_config()
        stocks = load_stocks(config.output.csv_path)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        raise _fail("Show failed", e)

    table = Table(title=f"{config.output.csv_path} ({len(stocks)} records)")
    table.add_column("Rank", justify="right")
    table.add_column("Name")
    table.add_column("Symbol")
    table.add_column("Market Cap", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Country")

    for stock in stocks[:limit]:
        table.add_row(
            escape(stock.rank),
            escape(stock.name),
            escape(stock.symbol),
            f"${stock.market_cap / 1e9:,.2f} B",
            escape(stock.price),
            escape(stock.country),
        )

    console.print(table)
