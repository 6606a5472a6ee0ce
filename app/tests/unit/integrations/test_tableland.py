"""Unit tests for the Tableland integration."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus
from integrations.tableland import (
    SUPPORTED_CHAINS,
    TableName,
    TableNameError,
    TablelandClient,
    UnsupportedChainError,
    created_at,
    find_chain,
    get_chain,
    schema_columns,
)
from integrations.tableland.chains import LOCAL, MAINNET, TESTNET


@pytest.fixture
def tableland(mock_http_client):
    return TablelandClient(
        mock_http_client,
        mainnet_url="https://main.example",
        testnet_url="https://test.example/",
        local_url="http://localhost:8080",
        render_url="https://render.example",
    )


class TestTableName:
    @pytest.mark.unit
    def test_parse(self):
        table = TableName.parse("healthbot_80001_1")

        assert table.prefix == "healthbot"
        assert table.chain_id == 80001
        assert table.table_id == "1"
        assert str(table) == "healthbot_80001_1"

    @pytest.mark.unit
    def test_prefix_may_contain_underscores(self):
        table = TableName.parse("my_rigs_table_1_42")

        assert table.prefix == "my_rigs_table"
        assert table.chain_id == 1
        assert table.table_id == "42"

    @pytest.mark.unit
    def test_empty_prefix(self):
        assert TableName.parse("_5_7").prefix == ""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name", ["", "healthbot", "healthbot_5", "healthbot_x_1", "a_1_b", "a_1_"]
    )
    def test_invalid_names(self, name):
        with pytest.raises(TableNameError, match="Invalid table name"):
            TableName.parse(name)


class TestChains:
    @pytest.mark.unit
    def test_lookup_by_int_and_string(self):
        assert get_chain(1).phrase == "Ethereum Mainnet"
        assert get_chain("80001").name == "maticmum"

    @pytest.mark.unit
    def test_network(self):
        assert get_chain(137).network == MAINNET
        assert get_chain(11155111).network == TESTNET
        assert get_chain(31337).network == LOCAL

    @pytest.mark.unit
    def test_unknown_chain(self):
        with pytest.raises(UnsupportedChainError, match="Invalid chain provided"):
            get_chain(999)

    @pytest.mark.unit
    def test_find_chain_returns_none_for_garbage(self):
        assert find_chain("abc") is None
        assert find_chain(None) is None  # type: ignore[arg-type]

    @pytest.mark.unit
    def test_chain_ids_are_unique(self):
        assert all(chain.chain_id == key for key, chain in SUPPORTED_CHAINS.items())


class TestTablelandClient:
    @pytest.mark.unit
    def test_gateway_depends_on_network(self, tableland):
        assert tableland.gateway_url(get_chain(1)) == "https://main.example"
        assert tableland.gateway_url(get_chain(80001)) == "https://test.example"
        assert tableland.gateway_url(get_chain(31337)) == "http://localhost:8080"

    @pytest.mark.unit
    def test_urls(self, tableland):
        chain = get_chain(80001)

        assert tableland.table_url(chain, "1") == (
            "https://test.example/api/v1/tables/80001/1"
        )
        assert tableland.render_table_url(80001, "1") == (
            "https://render.example/80001/1"
        )
        assert tableland.query_url("select * from t_80001_1", chain) == (
            "https://test.example/api/v1/query"
            "?statement=select+%2A+from+t_80001_1&format=objects"
        )

    @pytest.mark.unit
    def test_query_returns_rows(self, tableland, mock_http_client):
        rows = [{"id": 1}, {"id": 2}]
        mock_http_client.get.return_value = OperationResult.success(data=rows)

        result = tableland.query("select * from t_1_1", get_chain(1))

        assert result.is_success
        assert result.data == rows
        mock_http_client.get.assert_called_once_with(
            "https://main.example/api/v1/query",
            params={"statement": "select * from t_1_1", "format": "objects"},
        )

    @pytest.mark.unit
    def test_query_single_object_becomes_list(self, tableland, mock_http_client):
        mock_http_client.get.return_value = OperationResult.success(data={"id": 1})

        result = tableland.query("select * from t_1_1", get_chain(1))

        assert result.data == [{"id": 1}]

    @pytest.mark.unit
    def test_query_not_found_is_empty(self, tableland, mock_http_client):
        mock_http_client.get.return_value = OperationResult.error(
            OperationStatus.NOT_FOUND, "Row not found", error_code="HTTP_404"
        )

        result = tableland.query("select * from t_1_1", get_chain(1))

        assert result.is_success
        assert result.data == []

    @pytest.mark.unit
    def test_query_failure_is_passed_through(self, tableland, mock_http_client):
        failure = OperationResult.transient_error("timeout", error_code="TIMEOUT")
        mock_http_client.get.return_value = failure

        assert tableland.query("select 1", get_chain(1)) is failure

    @pytest.mark.unit
    def test_query_unexpected_body(self, tableland, mock_http_client):
        mock_http_client.get.return_value = OperationResult.success(data="rows")

        result = tableland.query("select 1", get_chain(1))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_RESPONSE"

    @pytest.mark.unit
    def test_get_table(self, tableland, mock_http_client):
        metadata = {"name": "healthbot_80001_1"}
        mock_http_client.get.return_value = OperationResult.success(data=metadata)

        result = tableland.get_table(get_chain(80001), "1")

        assert result.data == metadata
        mock_http_client.get.assert_called_once_with(
            "https://test.example/api/v1/tables/80001/1"
        )

    @pytest.mark.unit
    def test_get_table_unexpected_body(self, tableland, mock_http_client):
        mock_http_client.get.return_value = OperationResult.success(data=[])

        result = tableland.get_table(get_chain(80001), "1")

        assert result.status == OperationStatus.PERMANENT_ERROR


class TestMetadataHelpers:
    @pytest.mark.unit
    def test_created_at(self):
        metadata = {
            "attributes": [
                {"display_type": "date", "trait_type": "created", "value": 1657113720}
            ]
        }
        assert created_at(metadata) == 1657113720

    @pytest.mark.unit
    def test_created_at_missing(self):
        assert created_at({}) is None
        assert created_at({"attributes": [{"trait_type": "created"}]}) is None

    @pytest.mark.unit
    def test_schema_columns(self):
        columns = [{"name": "id", "type": "integer", "constraints": []}]

        assert schema_columns({"schema": {"columns": columns}}) == columns
        assert schema_columns({}) == []
