"""CLI entry point for marketmap."""

import typer

from .commands import fetch, generate_html, show

app = typer.Typer(
    name="marketmap",
    help="Market-cap ranking scraper and treemap generator.",
    no_args_is_help=True,
)

# Register commands
app.command("fetch", help="Scrape data and save to CSV")(fetch)
app.command("generate_html", help="Generate HTML visualization from CSV")(generate_html)
app.command("show", help="Print the saved CSV as a table")(show)


if __name__ == "__main__":
    app()
