"""companiesmarketcap.com fetcher module."""

from .client import CompaniesMarketCapClient, MarketCapFetchError
from .parser import parse_stocks

__all__ = ["CompaniesMarketCapClient", "MarketCapFetchError", "parse_stocks"]
