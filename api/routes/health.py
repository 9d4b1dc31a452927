from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_service
from api.schemas import HealthResponse, MessageResponse
from application.services import RateService
from config.settings import get_settings

router = APIRouter(tags=['health'])


@router.get('/', response_model=MessageResponse, summary='Service banner')
async def root() -> MessageResponse:
	return MessageResponse(message=get_settings().APP_NAME)


@router.get(
	'/health',
	response_model=HealthResponse,
	status_code=status.HTTP_200_OK,
	summary='Liveness check',
)
async def health_check(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> HealthResponse:
	return HealthResponse(
		status='healthy',
		timestamp=datetime.now(UTC),
		providers=service.provider_names,
	)
