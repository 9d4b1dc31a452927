import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, deps, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import health, rates
from config.settings import get_settings
from infrastructure.monitoring.logger import configure_logging, get_production_logger

logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	configure_logging(console_level=settings.LOG_LEVEL, log_directory=settings.LOG_DIRECTORY)
	logger.info(f'Starting {settings.APP_NAME}...')

	init_dependencies()

	get_production_logger().log_service_lifecycle(
		'started', {'app_name': settings.APP_NAME, 'providers': deps.rate_service.provider_names}
	)

	yield

	get_production_logger().log_service_lifecycle('stopping', {'app_name': settings.APP_NAME})
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)


app.include_router(health.router)
app.include_router(rates.router)
register_exception_handlers(app)
