import time
from typing import Annotated

from fastapi import APIRouter, Body, Depends, status

from api.dependencies import get_rate_service
from api.schemas import BestRateRequest, RateResultResponse
from application.services import RateService
from infrastructure.monitoring.logger import get_production_logger

router = APIRouter(prefix='/api/v1', tags=['rates'])


@router.post(
	'/best-rate',
	response_model=RateResultResponse,
	status_code=status.HTTP_200_OK,
	summary='Best exchange rate across all providers',
)
async def get_best_rate(
	service: Annotated[RateService, Depends(get_rate_service)],
	payload: Annotated[BestRateRequest | None, Body()] = None,
) -> RateResultResponse:
	"""
	Query every provider for the same conversion and return the highest rate.

	Failures are reported in the body (`is_success` false) with HTTP 200;
	a missing body yields an `AllProviders` failure.
	"""
	start_time = time.perf_counter()

	result = await service.get_best_rate(payload.to_domain() if payload is not None else None)

	get_production_logger().log_user_request(
		endpoint='/api/v1/best-rate',
		request_data=payload.model_dump(mode='json') if payload is not None else {},
		success=result.is_success,
		response_time_ms=(time.perf_counter() - start_time) * 1000,
		error_message=result.error_message,
	)
	return RateResultResponse.from_domain(result)
