from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.rate import RateResult


class RateResultResponse(BaseModel):
	provider_name: str = Field(..., description='Provider that produced the result')
	rate: Decimal = Field(..., description='Best exchange rate, zero on failure')
	is_success: bool = Field(..., description='Whether any provider returned a valid rate')
	error_message: str | None = Field(None, description='Failure reason, absent on success')

	model_config = ConfigDict(
		json_schema_extra={
			'examples': [
				{'provider_name': 'Api2', 'rate': '0.90', 'is_success': True, 'error_message': None},
				{
					'provider_name': 'AllProviders',
					'rate': '0',
					'is_success': False,
					'error_message': 'All providers failed to return a valid rate.',
				},
			]
		}
	)

	@classmethod
	def from_domain(cls, result: RateResult) -> 'RateResultResponse':
		return cls(
			provider_name=result.provider_name,
			rate=result.rate,
			is_success=result.is_success,
			error_message=result.error_message,
		)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service status')
	timestamp: datetime = Field(..., description='Time of the check (UTC)')
	providers: list[str] = Field(default_factory=list, description='Registered providers in order')


class MessageResponse(BaseModel):
	message: str
