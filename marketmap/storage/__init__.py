"""Storage layer for stock snapshots."""

from .csv_store import StorageError, load_stocks, save_stocks

__all__ = ["StorageError", "load_stocks", "save_stocks"]
