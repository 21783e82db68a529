"""Stock record model."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from marketmap.normalizers.market_cap import parse_number


CSV_HEADER = ["Rank", "Name", "Symbol", "Market Cap", "Price", "Country"]


class Stock(BaseModel):
    """One row of the market-cap ranking table.

    Only ``market_cap`` is normalized; the other fields keep the text shown
    on the page.
    """

    rank: str = Field(description="Position in the ranking (e.g., '1')")
    name: str = Field(description="Company display name (e.g., 'Tencent')")
    symbol: str = Field(description="Ticker symbol (e.g., 'TCEHY')")
    market_cap: float = Field(description="Market capitalization in currency units")
    price: str = Field(description="Share price as displayed (e.g., '$66.92')")
    country: str = Field(description="Country as displayed")

    def to_csv_row(self) -> list[str]:
        """Serialize to a CSV row in ``CSV_HEADER`` order."""
        return [
            self.rank,
            self.name,
            self.symbol,
            f"{self.market_cap:.0f}",
            self.price,
            self.country,
        ]

    @classmethod
    def from_csv_row(cls, row: Sequence[str]) -> "Stock":
        """Build a record from a CSV row in ``CSV_HEADER`` order."""
        return cls(
            rank=row[0],
            name=row[1],
            symbol=row[2],
            market_cap=parse_number(row[3]),
            price=row[4],
            country=row[5],
        )
