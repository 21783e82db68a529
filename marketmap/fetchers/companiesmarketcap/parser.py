"""Ranking table extraction from companiesmarketcap.com pages.

Row layout (``table.marketcap-table tbody tr``)::

    td[0]  favourite toggle
    td[1]  rank
    td[2]  .name-div > a (company name + .company-code)
    td[3]  market cap
    td[4]  price
    td[5]  today's change
    td[6]  30-day sparkline
    td[7]  country
"""

import logging
from typing import IO

from bs4 import BeautifulSoup, Tag

from marketmap.models.stock import Stock
from marketmap.normalizers.market_cap import clean_text, parse_market_cap


logger = logging.getLogger(__name__)

ROW_SELECTOR = "table.marketcap-table tbody tr"

RANK_COL = 1
NAME_COL = 2
MARKET_CAP_COL = 3
PRICE_COL = 4
COUNTRY_COL = 7


def _text(elements: list[Tag]) -> str:
    return "".join(el.get_text() for el in elements).strip()


def _cell(cells: list[Tag], index: int) -> Tag | None:
    return cells[index] if index < len(cells) else None


def _cell_text(cells: list[Tag], index: int) -> str:
    cell = _cell(cells, index)
    return cell.get_text().strip() if cell is not None else ""


def _parse_name_cell(cell: Tag | None) -> tuple[str, str]:
    """Return (name, symbol) from the name cell."""
    if cell is None:
        return "", ""

    name_div = cell.select(".name-div")
    symbol = _text([code for div in name_div for code in div.select(".company-code")])
    name = _text([link for div in name_div for link in div.select("a")])

    # The link text also contains the ticker
    if symbol and name.endswith(symbol):
        name = name[: -len(symbol)].strip()

    return name, symbol


def _parse_country(row: Tag, cells: list[Tag]) -> str:
    country = _cell_text(cells, COUNTRY_COL)
    if not country:
        hidden = row.select(".responsive-hidden")
        if hidden:
            country = hidden[-1].get_text().strip()
    return clean_text(country)


def parse_row(row: Tag) -> Stock | None:
    """Extract a stock from one table row, or None for non-stock rows."""
    cells = row.select("td")

    rank = _cell_text(cells, RANK_COL)
    if not rank:
        return None

    name, symbol = _parse_name_cell(_cell(cells, NAME_COL))

    return Stock(
        rank=rank,
        name=name,
        symbol=symbol,
        market_cap=parse_market_cap(_cell_text(cells, MARKET_CAP_COL)),
        price=_cell_text(cells, PRICE_COL),
        country=_parse_country(row, cells),
    )


def parse_stocks(html: str | bytes | IO) -> list[Stock]:
    """Extract all stock rows from a ranking page, in page order.

    Args:
        html: Page markup or an open file

    Returns:
        Parsed stocks; empty if the page has no ranking table
    """
    soup = BeautifulSoup(html, "html.parser")

    stocks: list[Stock] = []
    skipped = 0
    for row in soup.select(ROW_SELECTOR):
        stock = parse_row(row)
        if stock is None:
            skipped += 1
            continue
        stocks.append(stock)

    logger.debug(f"Parsed {len(stocks)} stock rows, skipped {skipped} rows without rank")
    return stocks
