"""OpenSea collection stats client."""

from typing import Optional

from core.config import OpenSeaSettings
from core.logging import get_module_logger
from infrastructure.clients.http import HttpClient
from infrastructure.operations import OperationResult

logger = get_module_logger()


class OpenSeaClient:
    """Fetch marketplace stats for one collection.

    Args:
        http: Shared HTTP client
        api_url: OpenSea API base URL
        collection_slug: Collection slug (e.g. "tableland-rigs")
        api_key: Optional API key sent as ``X-API-KEY``
    """

    def __init__(
        self,
        http: HttpClient,
        api_url: str = "https://api.opensea.io",
        collection_slug: str = "tableland-rigs",
        api_key: Optional[str] = None,
    ):
        self.http = http
        self.api_url = api_url.rstrip("/")
        self.collection_slug = collection_slug
        self.api_key = api_key

    @classmethod
    def from_settings(
        cls, http: HttpClient, settings: OpenSeaSettings
    ) -> "OpenSeaClient":
        return cls(
            http,
            api_url=settings.API_URL,
            collection_slug=settings.COLLECTION_SLUG,
            api_key=settings.API_KEY,
        )

    def get_collection_stats(self) -> OperationResult:
        """Fetch ``/collection/{slug}/stats``.

        Returns:
            OperationResult whose data is the ``stats`` object of the response
        """
        headers = {"X-API-KEY": self.api_key} if self.api_key else None
        result = self.http.get(
            f"{self.api_url}/collection/{self.collection_slug}/stats",
            headers=headers,
        )
        if not result.is_success:
            logger.warning(
                "opensea_stats_failed",
                collection=self.collection_slug,
                status=result.status.value,
                error=result.message,
            )
            return result

        stats = result.data.get("stats") if isinstance(result.data, dict) else None
        if not isinstance(stats, dict):
            return OperationResult.permanent_error(
                message="OpenSea response has no stats object",
                error_code="INVALID_RESPONSE",
            )
        return OperationResult.success(data=stats, message=result.message)
