"""companiesmarketcap.com ranking page client."""

import logging
from typing import Any

import httpx

from marketmap.models.config import FetchConfig


logger = logging.getLogger(__name__)


class MarketCapFetchError(Exception):
    """Ranking page request error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CompaniesMarketCapClient:
    """Client for a single companiesmarketcap.com ranking page.

    One GET per call, no retries. Anything but HTTP 200 is an error.
    """

    def __init__(
        self,
        config: FetchConfig,
        transport: httpx.BaseTransport | None = None,
    ):
        self.config = config
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.config.timeout,
                headers=dict(self.config.headers),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "CompaniesMarketCapClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch_page(self, url: str | None = None) -> str:
        """Fetch the ranking page HTML.

        Args:
            url: Page URL (default: configured URL with TARGET_URL override)

        Returns:
            Response body as text

        Raises:
            MarketCapFetchError: If the response status is not 200
            httpx.HTTPError: On transport failures
        """
        url = url or self.config.resolve_url()
        logger.debug(f"GET {url}")

        response = self._get_client().get(url)
        if response.status_code != 200:
            raise MarketCapFetchError(
                f"status code error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        logger.debug(f"Received {len(response.content)} bytes from {url}")
        return response.text
