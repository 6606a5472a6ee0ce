"""Tableland gateway REST client.

Wraps the two gateway endpoints the bot needs:

- ``GET /api/v1/query?statement=...&format=objects`` runs a read query and
  returns the rows as a list of ``{column: value}`` objects
- ``GET /api/v1/tables/{chainId}/{tableId}`` returns the TABLE NFT metadata
  (``attributes`` with the ``created`` timestamp, ``schema.columns``)

Which gateway host serves a request depends on the table's chain (see
``chains.Chain.network``).
"""

from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from core.config import TablelandSettings
from core.logging import get_module_logger
from infrastructure.clients.http import HttpClient
from infrastructure.operations import OperationResult, OperationStatus
from integrations.tableland.chains import LOCAL, TESTNET, Chain

logger = get_module_logger()


class TablelandClient:
    """Read-only client for the Tableland gateways.

    Args:
        http: Shared HTTP client (requests are sent to absolute URLs)
        mainnet_url: Gateway serving mainnet tables
        testnet_url: Gateway serving testnet tables
        local_url: Gateway of a local development network
        render_url: Base URL of the TABLE NFT renderer
    """

    def __init__(
        self,
        http: HttpClient,
        mainnet_url: str = "https://tableland.network",
        testnet_url: str = "https://testnets.tableland.network",
        local_url: str = "http://localhost:8080",
        render_url: str = "https://render.tableland.xyz",
    ):
        self.http = http
        self.mainnet_url = mainnet_url.rstrip("/")
        self.testnet_url = testnet_url.rstrip("/")
        self.local_url = local_url.rstrip("/")
        self.render_url = render_url.rstrip("/")

    @classmethod
    def from_settings(
        cls, http: HttpClient, settings: TablelandSettings
    ) -> "TablelandClient":
        return cls(
            http,
            mainnet_url=settings.MAINNET_GATEWAY_URL,
            testnet_url=settings.TESTNET_GATEWAY_URL,
            local_url=settings.LOCAL_GATEWAY_URL,
            render_url=settings.RENDER_URL,
        )

    def gateway_url(self, chain: Chain) -> str:
        if chain.network == LOCAL:
            return self.local_url
        if chain.network == TESTNET:
            return self.testnet_url
        return self.mainnet_url

    def query_url(self, statement: str, chain: Chain) -> str:
        """Gateway URL that runs ``statement``; shown to users as a link."""
        params = urlencode({"statement": statement, "format": "objects"})
        return f"{self.gateway_url(chain)}/api/v1/query?{params}"

    def table_url(self, chain: Chain, table_id: str) -> str:
        """Metadata URL of a table."""
        return f"{self.gateway_url(chain)}/api/v1/tables/{chain.chain_id}/{table_id}"

    def render_table_url(self, chain_id: int, table_id: str) -> str:
        """URL of the rendered TABLE NFT image."""
        return f"{self.render_url}/{chain_id}/{table_id}"

    def query(self, statement: str, chain: Chain) -> OperationResult:
        """Run a read statement against the chain's gateway.

        Returns:
            OperationResult whose data is the list of row objects. A gateway
            404 ("Row not found") is an empty result, not an error.
        """
        result = self.http.get(
            f"{self.gateway_url(chain)}/api/v1/query",
            params={"statement": statement, "format": "objects"},
        )

        if result.status == OperationStatus.NOT_FOUND:
            logger.debug("tableland_query_empty", chain_id=chain.chain_id)
            return OperationResult.success(data=[], message="no rows")

        if not result.is_success:
            logger.warning(
                "tableland_query_failed",
                chain_id=chain.chain_id,
                status=result.status.value,
                error=result.message,
            )
            return result

        rows = _rows(result.data)
        if rows is None:
            return OperationResult.permanent_error(
                message="Unexpected query response from the Tableland gateway",
                error_code="INVALID_RESPONSE",
            )
        return OperationResult.success(data=rows, message=result.message)

    def get_table(self, chain: Chain, table_id: str) -> OperationResult:
        """Fetch the TABLE NFT metadata of a table.

        Returns:
            OperationResult whose data is the metadata object
        """
        result = self.http.get(self.table_url(chain, table_id))
        if not result.is_success:
            logger.warning(
                "tableland_table_lookup_failed",
                chain_id=chain.chain_id,
                table_id=table_id,
                status=result.status.value,
                error=result.message,
            )
            return result

        if not isinstance(result.data, dict):
            return OperationResult.permanent_error(
                message="Unexpected table response from the Tableland gateway",
                error_code="INVALID_RESPONSE",
            )
        return result


def _rows(data: Any) -> Optional[List[Dict[str, Any]]]:
    # A query matching a single row may come back as a bare object
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(row, dict) for row in data):
        return data
    return None


def created_at(metadata: Dict[str, Any]) -> Optional[int]:
    """``created`` timestamp (unix seconds) from table metadata."""
    for attribute in metadata.get("attributes") or []:
        if attribute.get("trait_type") == "created":
            try:
                return int(attribute.get("value"))
            except (TypeError, ValueError):
                return None
    return None


def schema_columns(metadata: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Column definitions from table metadata."""
    schema = metadata.get("schema") or {}
    return list(schema.get("columns") or [])
