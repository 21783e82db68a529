"""Configuration models for the scraper pipeline."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


TARGET_URL_ENV = "TARGET_URL"

DEFAULT_URL = "https://companiesmarketcap.com/china/largest-companies-in-china-by-market-cap/"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class FetchConfig(BaseModel):
    """Ranking page request configuration."""

    url: str = Field(default=DEFAULT_URL)
    headers: dict[str, str] = Field(
        default_factory=lambda: {"User-Agent": DEFAULT_USER_AGENT}
    )
    timeout: float = Field(default=30.0, ge=1.0)

    def resolve_url(self, environ: Mapping[str, str] | None = None) -> str:
        """Return the page URL, honouring the TARGET_URL override."""
        if environ is None:
            environ = os.environ
        return environ.get(TARGET_URL_ENV) or self.url


class OutputConfig(BaseModel):
    """Output file locations, relative to the working directory."""

    csv_path: Path = Field(default=Path("top_100_china_stocks.csv"))
    html_path: Path = Field(default=Path("market_map.html"))


class RenderConfig(BaseModel):
    """Treemap page labels."""

    title: str = Field(default="China Top Stocks Market Cap Treemap")
    heading: str = Field(default="China Market Map")
    subtitle: str = Field(default="Top Publicly Traded Companies by Market Cap")
    root_id: str = Field(default="China Market")
    root_label: str = Field(default="China Top Stocks")


class AppConfig(BaseModel):
    """Top-level application configuration."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @classmethod
    def from_yaml(cls, data: dict[str, Any] | None) -> "AppConfig":
        """Create config from parsed YAML data."""
        data = data or {}
        config_data: dict[str, Any] = {}

        if data.get("fetch"):
            fetch_data = dict(data["fetch"])
            # Header values may come from folded YAML scalars
            headers = fetch_data.get("headers") or {}
            fetch_data["headers"] = {k: str(v).strip() for k, v in headers.items()}
            if not fetch_data["headers"]:
                del fetch_data["headers"]
            config_data["fetch"] = FetchConfig(**fetch_data)
        if data.get("output"):
            config_data["output"] = OutputConfig(**data["output"])
        if data.get("render"):
            config_data["render"] = RenderConfig(**data["render"])

        return cls(**config_data)
