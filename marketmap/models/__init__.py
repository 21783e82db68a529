"""Data models for stock records and configuration."""

from .stock import CSV_HEADER, Stock
from .config import AppConfig, FetchConfig, OutputConfig, RenderConfig

__all__ = [
    "CSV_HEADER",
    "Stock",
    "AppConfig",
    "FetchConfig",
    "OutputConfig",
    "RenderConfig",
]
