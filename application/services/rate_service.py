import asyncio
import logging
import time
from collections.abc import Iterable, Sequence

from domain.models.rate import ConversionRequest, RateResult
from infrastructure.monitoring.logger import ProductionLogger, get_production_logger
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

ALL_PROVIDERS = "AllProviders"
NULL_REQUEST_MESSAGE = "Request cannot be null."
ALL_FAILED_MESSAGE = "All providers failed to return a valid rate."
PROVIDER_EXCEPTION_MESSAGE = "Provider exception"


class RateService:
    """Queries every provider concurrently and returns the best successful rate.

    The provider order given at construction is fixed and is the tie-break key:
    when several providers report the same highest rate, the earliest one wins.
    """

    def __init__(
        self,
        providers: Sequence[ExchangeRateProvider],
        event_logger: ProductionLogger | None = None,
    ):
        self.providers: tuple[ExchangeRateProvider, ...] = tuple(providers)
        self.event_logger = event_logger or get_production_logger()

    @property
    def provider_names(self) -> list[str]:
        return [provider_name(p) for p in self.providers]

    async def get_best_rate(self, request: ConversionRequest | None) -> RateResult:
        if request is None:
            logger.warning("Null request received")
            return RateResult.failure(ALL_PROVIDERS, NULL_REQUEST_MESSAGE)

        logger.info(
            f"Starting exchange rate comparison for {request.source_currency} -> "
            f"{request.target_currency}, amount: {request.amount}"
        )
        start_time = time.perf_counter()

        # gather keeps registration order regardless of completion order
        results = await asyncio.gather(
            *(self._query_provider(provider, request) for provider in self.providers)
        )
        total_duration_ms = (time.perf_counter() - start_time) * 1000

        best = self._select_best(results)
        successful = sum(1 for r in results if r.is_success)
        self.event_logger.log_rate_selection(
            source_currency=request.source_currency,
            target_currency=request.target_currency,
            provider_name=best.provider_name,
            rate=best.rate,
            success=best.is_success,
            successful_providers=successful,
            failed_providers=len(results) - successful,
            total_duration_ms=total_duration_ms,
        )
        return best

    async def _query_provider(
        self, provider: ExchangeRateProvider, request: ConversionRequest
    ) -> RateResult:
        name = provider_name(provider)
        try:
            result = await provider.query(request)
        except Exception as e:
            self.event_logger.log_provider_query(
                name, success=False, error_message=str(e), exc_info=e
            )
            return RateResult.failure(name, PROVIDER_EXCEPTION_MESSAGE)

        if not isinstance(result, RateResult):
            self.event_logger.log_provider_query(
                name, success=False, error_message=f"Unexpected result type {type(result).__name__}"
            )
            return RateResult.failure(name, PROVIDER_EXCEPTION_MESSAGE)

        self.event_logger.log_provider_query(
            result.provider_name,
            success=result.is_success,
            rate=result.rate if result.is_success else None,
            error_message=result.error_message,
        )
        return result

    @staticmethod
    def _select_best(results: Iterable[RateResult]) -> RateResult:
        successes = [r for r in results if r.is_success]
        if not successes:
            return RateResult.failure(ALL_PROVIDERS, ALL_FAILED_MESSAGE)

        # max() returns the first maximal element, so ties keep registration order
        return max(successes, key=lambda r: r.rate)


def provider_name(provider: ExchangeRateProvider) -> str:
    try:
        name = provider.name
    except Exception:
        name = None
    return name if isinstance(name, str) else type(provider).__name__
