from decimal import Decimal

import httpx

from domain.exceptions.rate import ProviderError
from domain.models.rate import ConversionRequest
from infrastructure.json_encoding import dumps_payload, plain_decimal
from infrastructure.providers.base import BaseAPIProvider

MIN_STATUS_CODE = 100


class ThirdApiProvider(BaseAPIProvider):
    ENDPOINT = "/ThirdApiProvider/rate"
    CONTENT_TYPE = "application/json"

    @property
    def name(self) -> str:
        return "ThirdApiProvider"

    def _build_payload(self, request: ConversionRequest) -> str:
        return dumps_payload(
            {
                "exchange": {
                    "sourceCurrency": request.source_currency,
                    "targetCurrency": request.target_currency,
                    "quantity": Decimal(plain_decimal(request.amount)),
                }
            }
        )

    def _parse_rate(self, response: httpx.Response) -> Decimal:
        data = response.json(parse_float=Decimal)
        if not isinstance(data, dict):
            raise ProviderError("Invalid data or missing total")

        status_code = data.get("statusCode")
        payload = data.get("data")
        total = payload.get("total") if isinstance(payload, dict) else None

        if not _is_integer(status_code) or status_code < MIN_STATUS_CODE:
            raise ProviderError("Invalid data or missing total")
        if not _is_number(total) or total <= 0:
            raise ProviderError("Invalid data or missing total")

        return Decimal(total)


def _is_number(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, int | Decimal)


def _is_integer(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, int)
