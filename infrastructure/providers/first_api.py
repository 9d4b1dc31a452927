from decimal import Decimal

import httpx

from domain.exceptions.rate import ProviderError
from domain.models.rate import ConversionRequest
from infrastructure.json_encoding import dumps_payload, plain_decimal
from infrastructure.providers.base import BaseAPIProvider


class FirstApiProvider(BaseAPIProvider):
	ENDPOINT = '/api1/rate'
	CONTENT_TYPE = 'application/json'

	@property
	def name(self) -> str:
		return 'Api1'

	def _build_payload(self, request: ConversionRequest) -> str:
		return dumps_payload(
			{
				'from': request.source_currency,
				'to': request.target_currency,
				'value': Decimal(plain_decimal(request.amount)),
			}
		)

	def _parse_rate(self, response: httpx.Response) -> Decimal:
		data = response.json(parse_float=Decimal)
		rate = data.get('rate') if isinstance(data, dict) else None

		# bool is an int subclass, so exclude it explicitly
		if isinstance(rate, bool) or not isinstance(rate, int | Decimal) or rate <= 0:
			raise ProviderError('Invalid or missing rate')

		return Decimal(rate)
