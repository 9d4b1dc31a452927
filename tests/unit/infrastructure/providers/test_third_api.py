# nosec B101

import json
from decimal import Decimal

import httpx
import pytest

from domain.models.rate import ConversionRequest, RateResult
from infrastructure.providers.third_api import ThirdApiProvider

BASE_URL = "https://api3.example.com"
INVALID = RateResult.failure("ThirdApiProvider", "Invalid data or missing total")


def third_api_response(status_code=200, total=0.85, **overrides) -> str:
    body = {"statusCode": status_code, "message": "Success", "data": {"total": total}}
    body.update(overrides)
    return json.dumps(body)


@pytest.mark.asyncio
async def test_query_success_returns_total(mock_client, make_response, conversion_request):
    mock_client.post.return_value = make_response(third_api_response())
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    result = await provider.query(conversion_request)

    assert result == RateResult(provider_name="ThirdApiProvider", rate=Decimal("0.85"))


@pytest.mark.asyncio
async def test_query_status_code_100_is_accepted(mock_client, make_response, conversion_request):
    mock_client.post.return_value = make_response(third_api_response(status_code=100))
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    result = await provider.query(conversion_request)

    assert result.is_success is True
    assert result.rate == Decimal("0.85")


@pytest.mark.asyncio
async def test_query_sends_nested_json(mock_client, make_response, conversion_request):
    mock_client.post.return_value = make_response(third_api_response())
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    await provider.query(conversion_request)

    call_args = mock_client.post.call_args
    assert call_args[0][0] == "https://api3.example.com/ThirdApiProvider/rate"
    assert call_args[1]["headers"]["Content-Type"] == "application/json"
    body = json.loads(call_args[1]["content"], parse_float=Decimal)
    assert body == {
        "exchange": {
            "sourceCurrency": "USD",
            "targetCurrency": "EUR",
            "quantity": Decimal("100.0"),
        }
    }


@pytest.mark.asyncio
async def test_query_sends_quantity_as_json_number(mock_client, make_response):
    mock_client.post.return_value = make_response(third_api_response())
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    await provider.query(ConversionRequest("USD", "EUR", Decimal("100.50")))

    content = mock_client.post.call_args[1]["content"]
    assert '"quantity": 100.50}' in content
    assert isinstance(json.loads(content)["exchange"]["quantity"], float)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        third_api_response(total=0),
        third_api_response(total=-1.5),
        third_api_response(status_code=99),
        third_api_response(status_code=200.5),
        third_api_response(status_code="200"),
        third_api_response(status_code=None),
        third_api_response(data=None),
        json.dumps({"statusCode": 200, "message": "Success"}),
        json.dumps({"statusCode": 200, "data": {}}),
        "[]",
    ],
)
async def test_query_invalid_data_returns_failure(body, mock_client, make_response, conversion_request):
    mock_client.post.return_value = make_response(body)
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    result = await provider.query(conversion_request)

    assert result == INVALID


@pytest.mark.asyncio
async def test_query_invalid_json_returns_failure(mock_client, make_response, conversion_request):
    mock_client.post.return_value = make_response("{ invalid json }")
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    result = await provider.query(conversion_request)

    assert result.is_success is False
    assert result.provider_name == "ThirdApiProvider"
    assert "parsing error" in result.error_message.lower()


@pytest.mark.asyncio
async def test_query_http_error_returns_failure(mock_client, make_response, conversion_request):
    mock_client.post.return_value = make_response("Error", status_code=500)
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    result = await provider.query(conversion_request)

    assert result == RateResult.failure("ThirdApiProvider", "Non-success status code")


@pytest.mark.asyncio
async def test_query_network_error_returns_failure(mock_client, conversion_request):
    mock_client.post.side_effect = httpx.ConnectError("Network error")
    provider = ThirdApiProvider(BASE_URL, client=mock_client)

    result = await provider.query(conversion_request)

    assert result == RateResult.failure("ThirdApiProvider", "Request failed: ConnectError")
