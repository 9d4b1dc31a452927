from .requests import BestRateRequest
from .responses import HealthResponse, MessageResponse, RateResultResponse

__all__ = [
	'BestRateRequest',
	'HealthResponse',
	'MessageResponse',
	'RateResultResponse',
]
