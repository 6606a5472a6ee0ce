"""Unit tests for the Rigs GraphQL client."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus
from integrations.rigs import Rig, RigsClient


def _token_payload(**overrides):
    token = {
        "tokenId": "42",
        "name": "Rig #42",
        "description": "A Tableland Rig",
        "owner": "0xowner",
        "image": {"url": "https://img.example/42.png"},
        "attributes": [
            {"traitType": "Fleet", "value": "Titans"},
            {"traitType": "Color", "value": "Red"},
        ],
    }
    token.update(overrides)
    return {"data": {"token": {"token": token}}}


@pytest.fixture
def rigs_client(mock_http_client):
    return RigsClient(
        mock_http_client,
        graphql_url="https://graphql.example",
        contract_address="0xcontract",
    )


@pytest.mark.unit
def test_get_rig(rigs_client, mock_http_client):
    mock_http_client.post.return_value = OperationResult.success(data=_token_payload())

    result = rigs_client.get_rig(42)

    assert result.is_success
    rig = result.data
    assert isinstance(rig, Rig)
    assert rig.token_id == 42
    assert rig.name == "Rig #42"
    assert rig.owner == "0xowner"
    assert rig.image_url == "https://img.example/42.png"
    assert rig.attributes == [("Fleet", "Titans"), ("Color", "Red")]


@pytest.mark.unit
def test_sends_graphql_query(rigs_client, mock_http_client):
    mock_http_client.post.return_value = OperationResult.success(data=_token_payload())

    rigs_client.get_rig(42)

    args, kwargs = mock_http_client.post.call_args
    assert args == ("https://graphql.example",)
    body = kwargs["json_data"]
    assert "token(token:" in body["query"]
    assert body["variables"] == {"address": "0xcontract", "tokenId": "42"}


@pytest.mark.unit
def test_missing_token_is_not_found(rigs_client, mock_http_client):
    mock_http_client.post.return_value = OperationResult.success(
        data={"data": {"token": None}}
    )

    result = rigs_client.get_rig(99999)

    assert result.status == OperationStatus.NOT_FOUND
    assert result.message == "Rig #99999 not found"


@pytest.mark.unit
def test_graphql_errors(rigs_client, mock_http_client):
    mock_http_client.post.return_value = OperationResult.success(
        data={"errors": [{"message": "rate limited"}], "data": None}
    )

    result = rigs_client.get_rig(1)

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "GRAPHQL_ERROR"
    assert result.message == "rate limited"


@pytest.mark.unit
def test_response_without_data(rigs_client, mock_http_client):
    mock_http_client.post.return_value = OperationResult.success(data={})

    result = rigs_client.get_rig(1)

    assert result.error_code == "GRAPHQL_ERROR"


@pytest.mark.unit
def test_transport_failure_is_passed_through(rigs_client, mock_http_client):
    failure = OperationResult.transient_error("timeout", error_code="TIMEOUT")
    mock_http_client.post.return_value = failure

    assert rigs_client.get_rig(1) is failure


@pytest.mark.unit
def test_rig_defaults_for_sparse_token():
    rig = Rig.from_token(7, {"attributes": None, "image": None})

    assert rig.name == "Rig #7"
    assert rig.image_url is None
    assert rig.attributes == []
