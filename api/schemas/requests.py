from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.rate import ConversionRequest


class BestRateRequest(BaseModel):
	"""Inbound conversion request. Codes and amount are forwarded unchecked."""

	source_currency: str = Field(..., description='Source currency code')
	target_currency: str = Field(..., description='Target currency code')
	amount: Decimal = Field(..., description='Amount to convert')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {'source_currency': 'USD', 'target_currency': 'EUR', 'amount': 100.00}
		}
	)

	def to_domain(self) -> ConversionRequest:
		return ConversionRequest(
			source_currency=self.source_currency,
			target_currency=self.target_currency,
			amount=self.amount,
		)
