import logging

from application.services import RateService
from config.settings import Settings, get_settings
from infrastructure.providers import (
	ExchangeRateProvider,
	FirstApiProvider,
	SecondApiProvider,
	ThirdApiProvider,
)

logger = logging.getLogger(__name__)

class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	providers: list[ExchangeRateProvider] | None = None
	rate_service: RateService | None = None

deps = AppDependencies()

def build_providers(settings: Settings) -> list[ExchangeRateProvider]:
	# Order matters: equal rates resolve to the earliest provider
	return [
		FirstApiProvider(settings.FIRST_API_BASE_URL, timeout=settings.PROVIDER_TIMEOUT),
		SecondApiProvider(settings.SECOND_API_BASE_URL, timeout=settings.PROVIDER_TIMEOUT),
		ThirdApiProvider(settings.THIRD_API_BASE_URL, timeout=settings.PROVIDER_TIMEOUT),
	]

def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.providers = build_providers(settings)
	deps.rate_service = RateService(providers=deps.providers)
	logger.info(f'Registered providers: {deps.rate_service.provider_names}')

async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.providers:
		for provider in deps.providers:
			await provider.close()

	deps.providers = None
	deps.rate_service = None
	logger.info('Cleanup complete')


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service
