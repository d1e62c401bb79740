"""HTTP client for the random cat image and cat fact APIs."""

import json
import logging
from typing import Any

import httpx

from ..config import AppConfig
from ..errors import RemoteError
from ..models import NO_FACT_FALLBACK, FetchedImage

logger = logging.getLogger(__name__)


def parse_image_url(payload: Any) -> str | None:
    """Extract the first image's `url` from an image search payload.

    Returns None when the payload is not a non-empty list or the first
    element has no string `url`.
    """
    if not isinstance(payload, list) or not payload:
        return None
    first = payload[0]
    if not isinstance(first, dict):
        return None
    url = first.get("url")
    return url if isinstance(url, str) else None


def parse_fact(payload: Any) -> str | None:
    """Extract the `fact` field from a fact payload, None if missing or blank."""
    if not isinstance(payload, dict):
        return None
    fact = payload.get("fact")
    if not isinstance(fact, str) or not fact.strip():
        return None
    return fact


def _status_category(status_code: int) -> str:
    if status_code == 429:
        return "rate_limited"
    if status_code >= 500:
        return "server_error"
    return "client_error"


class RemoteCatSource:
    """Fetches random cat image URLs, cat facts and image bytes over HTTPS.

    Every non-success status and transport failure is raised as RemoteError.
    Nothing is retried or cached.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self._owns_client = client is None
        if client is None:
            headers = {"x-api-key": self.config.api_key} if self.config.api_key else None
            client = httpx.AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=True,
                headers=headers,
            )
        self._client = client

    async def __aenter__(self) -> "RemoteCatSource":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get(self, url: str) -> httpx.Response:
        """GET a URL, raising RemoteError for transport failures and bad statuses."""
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise RemoteError(
                f"Request to {url} timed out after {self.config.timeout}s",
                category="timeout",
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise RemoteError(f"Request to {url} failed: {e}", category="transport") from e

        if not response.is_success:
            raise RemoteError(
                f"Response status code does not indicate success: "
                f"{response.status_code} ({response.reason_phrase})",
                status_code=response.status_code,
                category=_status_category(response.status_code),
            )

        return response

    async def _get_json(self, url: str) -> Any:
        response = await self._get(url)
        if not response.content.strip():
            raise RemoteError(
                f"Empty response body from {url}",
                status_code=response.status_code,
                category="empty_payload",
            )
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug("Unparseable JSON from %s, treating as no value", url)
            return None

    async def fetch_random_image_url(self) -> str:
        """Return the URL of a random cat image, or "" if the payload has none."""
        payload = await self._get_json(self.config.image_endpoint)
        return parse_image_url(payload) or ""

    async def fetch_random_fact(self) -> str:
        """Return a random cat fact, or the fallback text if the payload has none."""
        payload = await self._get_json(self.config.fact_endpoint)
        return parse_fact(payload) or NO_FACT_FALLBACK

    async def fetch_image(self, url: str) -> FetchedImage:
        """Download an image along with its reported content type."""
        response = await self._get(url)
        content_type = response.headers.get("content-type")
        return FetchedImage(
            data=response.content,
            content_type=content_type.split(";")[0].strip() if content_type else None,
        )

    async def fetch_image_bytes(self, url: str) -> bytes:
        """Download raw image bytes from an arbitrary URL."""
        image = await self.fetch_image(url)
        return image.data
