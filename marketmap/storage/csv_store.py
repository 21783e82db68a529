"""CSV persistence for parsed stock records.

The file is rewritten on every fetch::

    Rank,Name,Symbol,Market Cap,Price,Country
    1,Tencent,TCEHY,612250000000,$66.92,China
"""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from marketmap.models.stock import CSV_HEADER, Stock


logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Stock file could not be read or written."""


def save_stocks(stocks: Iterable[Stock], path: Path | str) -> int:
    """Overwrite ``path`` with a header row and one row per stock.

    Returns:
        Number of records written
    """
    path = Path(path)
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for stock in stocks:
            writer.writerow(stock.to_csv_row())
            count += 1

    logger.info(f"Wrote {count} records to {path}")
    return count


def load_stocks(path: Path | str) -> list[Stock]:
    """Read records written by :func:`save_stocks`.

    Rows with fewer than six columns are skipped.

    Raises:
        StorageError: If the file is missing or holds no records
    """
    path = Path(path)
    try:
        with open(path, newline="", encoding="utf-8") as f:
            records = list(csv.reader(f))
    except OSError as e:
        raise StorageError(
            f"failed to open CSV file: {e}. Did you run 'fetch' first?"
        ) from e
    except csv.Error as e:
        raise StorageError(f"failed to read CSV file {path}: {e}") from e

    if len(records) < 2:
        raise StorageError("CSV file is empty or invalid")

    stocks = []
    for line_no, record in enumerate(records[1:], start=2):
        if len(record) < len(CSV_HEADER):
            logger.debug(f"Skipping short row at line {line_no}: {record}")
            continue
        stocks.append(Stock.from_csv_row(record))

    logger.debug(f"Loaded {len(stocks)} records from {path}")
    return stocks
