"""Unit tests for the OpenSea stats client."""

import pytest

from core.config import OpenSeaSettings
from infrastructure.operations import OperationResult, OperationStatus
from integrations.opensea import OpenSeaClient


@pytest.mark.unit
def test_returns_stats_object(mock_http_client):
    stats = {"total_volume": 10.0}
    mock_http_client.get.return_value = OperationResult.success(data={"stats": stats})
    client = OpenSeaClient(mock_http_client, api_url="https://api.example/")

    result = client.get_collection_stats()

    assert result.is_success
    assert result.data == stats
    mock_http_client.get.assert_called_once_with(
        "https://api.example/collection/tableland-rigs/stats", headers=None
    )


@pytest.mark.unit
def test_sends_api_key_header(mock_http_client):
    mock_http_client.get.return_value = OperationResult.success(data={"stats": {}})
    client = OpenSeaClient(mock_http_client, api_key="secret")

    client.get_collection_stats()

    _, kwargs = mock_http_client.get.call_args
    assert kwargs["headers"] == {"X-API-KEY": "secret"}


@pytest.mark.unit
def test_missing_stats_object(mock_http_client):
    mock_http_client.get.return_value = OperationResult.success(data={"detail": "x"})

    result = OpenSeaClient(mock_http_client).get_collection_stats()

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "INVALID_RESPONSE"


@pytest.mark.unit
def test_failure_is_passed_through(mock_http_client):
    failure = OperationResult.transient_error("down", error_code="HTTP_503")
    mock_http_client.get.return_value = failure

    assert OpenSeaClient(mock_http_client).get_collection_stats() is failure


@pytest.mark.unit
def test_from_settings(mock_http_client):
    settings = OpenSeaSettings(
        OPENSEA_API_URL="https://api.example",
        OPENSEA_COLLECTION_SLUG="other",
        OPENSEA_API_KEY="key",
    )

    client = OpenSeaClient.from_settings(mock_http_client, settings)

    assert client.api_url == "https://api.example"
    assert client.collection_slug == "other"
    assert client.api_key == "key"
