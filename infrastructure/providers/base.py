import logging
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

import httpx

from domain.exceptions.rate import ProviderError
from domain.models.rate import ConversionRequest, RateResult

logger = logging.getLogger(__name__)


class ExchangeRateProvider(ABC):
    """Contract every rate source implements. `query` must not raise."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def query(self, request: ConversionRequest) -> RateResult:
        ...

    async def close(self) -> None:
        pass


class BaseAPIProvider(ExchangeRateProvider):
    """A base class for HTTP providers, handling common request and error logic."""

    ENDPOINT: str = "/"
    CONTENT_TYPE: str = "application/json"

    def __init__(
        self, base_url: str, client: httpx.AsyncClient | None = None, timeout: float = 10
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @abstractmethod
    def _build_payload(self, request: ConversionRequest) -> str:
        ...

    @abstractmethod
    def _parse_rate(self, response: httpx.Response) -> Decimal:
        """Extract the rate, raising ProviderError when the payload is invalid."""
        ...

    async def query(self, request: ConversionRequest) -> RateResult:
        start_time = datetime.now()
        url = f"{self.base_url}{self.ENDPOINT}"
        try:
            response = await self._client.post(
                url,
                content=self._build_payload(request),
                headers={"Content-Type": self.CONTENT_TYPE},
            )
            response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
            return RateResult(provider_name=self.name, rate=self._parse_rate(response))

        except httpx.HTTPStatusError as e:
            logger.debug(f"{self.name} returned HTTP {e.response.status_code}")
            error_message = "Non-success status code"
        except httpx.RequestError as e:
            # Network errors (timeout, connection error, etc.)
            error_message = f"Request failed: {e.__class__.__name__}"
        except ProviderError as e:
            error_message = str(e)
        except Exception as e:
            # Unexpected payload problems (e.g., JSON or XML parsing)
            error_message = f"Response parsing error: {e}"

        response_time_ms = int((datetime.now() - start_time).total_seconds() * 1000)
        logger.warning(
            f"Provider {self.name} failed at {self.ENDPOINT} after {response_time_ms}ms: {error_message}"
        )
        return RateResult.failure(self.name, error_message)

    async def close(self):
        """Cleanly close the HTTP client."""
        await self._client.aclose()
