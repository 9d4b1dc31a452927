import xml.etree.ElementTree as ET
from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.rate import ProviderError
from domain.models.rate import ConversionRequest
from infrastructure.json_encoding import plain_decimal
from infrastructure.providers.base import BaseAPIProvider


class SecondApiProvider(BaseAPIProvider):
    """XML provider. Any finite decimal in <Result> is accepted, zero included."""

    ENDPOINT = "/api2/rate"
    CONTENT_TYPE = "application/xml"

    @property
    def name(self) -> str:
        return "Api2"

    def _build_payload(self, request: ConversionRequest) -> str:
        root = ET.Element("XML")
        ET.SubElement(root, "From").text = request.source_currency
        ET.SubElement(root, "To").text = request.target_currency
        ET.SubElement(root, "Amount").text = plain_decimal(request.amount)
        return ET.tostring(root, encoding="unicode")

    def _parse_rate(self, response: httpx.Response) -> Decimal:
        root = ET.fromstring(response.text)
        result = root.findtext("Result")

        try:
            rate = Decimal(result.strip())
        except (AttributeError, InvalidOperation) as e:
            raise ProviderError("Invalid XML or missing result") from e

        if not rate.is_finite():
            raise ProviderError("Invalid XML or missing result")
        return rate
