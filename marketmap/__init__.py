"""Market-cap ranking scraper and treemap renderer."""

__version__ = "0.1.0"
