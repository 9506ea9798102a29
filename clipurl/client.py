"""HTTP client for the shorten form.

Collects a long URL and a desired alias, calls ``POST /api/shorten`` and
reports the short URL or an error message fit for display.
"""

from typing import Optional

import httpx
from loguru import logger
from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError

EMPTY_URL_MESSAGE = "Please enter a URL"
INVALID_URL_MESSAGE = "Please enter a valid URL"
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."

_url_adapter = TypeAdapter(AnyUrl)


class ShortenResult(BaseModel):
    """Outcome of one shorten attempt."""
    short_url: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.short_url is not None


def is_valid_url(url: str) -> bool:
    """True for an absolute URL with a scheme."""
    try:
        _url_adapter.validate_python(url)
    except ValidationError:
        return False
    return True


class ShortenerClient:
    """
    Client side of the shorten flow.

    Args:
        api_url: Backend base address, e.g. ``http://localhost:5000``
        http_client: Optional preconfigured ``httpx.Client``
        timeout: Request timeout in seconds when no client is given
    """

    def __init__(
        self,
        api_url: str,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.api_url = api_url.rstrip("/")
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=timeout)

    def shorten(self, long_url: str, alias: str = "") -> ShortenResult:
        """Validate input locally, then request a short URL."""
        if not long_url or not long_url.strip():
            return ShortenResult(error=EMPTY_URL_MESSAGE)
        if not is_valid_url(long_url):
            return ShortenResult(error=INVALID_URL_MESSAGE)

        try:
            response = self.http_client.post(
                f"{self.api_url}/api/shorten",
                json={"originalUrl": long_url, "customAlias": alias},
            )
        except httpx.HTTPError as e:
            logger.warning(f"Shorten request failed: {e!r}")
            return ShortenResult(error=GENERIC_ERROR_MESSAGE)

        if response.status_code == httpx.codes.OK:
            try:
                return ShortenResult(short_url=response.json()["shortUrl"], status_code=200)
            except (ValueError, KeyError, TypeError):
                return ShortenResult(error=GENERIC_ERROR_MESSAGE, status_code=200)

        return ShortenResult(
            error=self._error_message(response),
            status_code=response.status_code,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            message = response.json().get("error")
        except (ValueError, AttributeError):
            message = None
        return message if isinstance(message, str) and message else GENERIC_ERROR_MESSAGE

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "ShortenerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
