"""Tableland Rigs metadata over a GraphQL NFT API."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from core.config import RigsSettings
from core.logging import get_module_logger
from infrastructure.clients.http import HttpClient
from infrastructure.operations import OperationResult, OperationStatus

logger = get_module_logger()

TOKEN_QUERY = """
query Rig($address: String!, $tokenId: String!) {
  token(token: {address: $address, tokenId: $tokenId}) {
    token {
      tokenId
      name
      description
      owner
      image {
        url
      }
      attributes {
        traitType
        value
      }
    }
  }
}
"""


class GraphQLError(Exception):
    """The API answered with an ``errors`` list or an unexpected shape."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


@dataclass(frozen=True)
class Rig:
    """One Rig token.

    Attributes:
        token_id: Rig number
        name: Token name (e.g. "Rig #42")
        description: Token description
        owner: Owner address
        image_url: Rendered image
        attributes: ``(trait, value)`` pairs in API order
    """

    token_id: int
    name: str
    description: str = ""
    owner: str = ""
    image_url: Optional[str] = None
    attributes: List[Tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_token(cls, token_id: int, token: Dict[str, Any]) -> "Rig":
        image = token.get("image") or {}
        return cls(
            token_id=token_id,
            name=token.get("name") or f"Rig #{token_id}",
            description=token.get("description") or "",
            owner=token.get("owner") or "",
            image_url=image.get("url"),
            attributes=[
                (str(attr.get("traitType")), str(attr.get("value")))
                for attr in token.get("attributes") or []
                if attr.get("traitType") is not None
            ],
        )


class RigsClient:
    """Look up Rigs by token id.

    Args:
        http: Shared HTTP client
        graphql_url: GraphQL endpoint
        contract_address: Rigs contract address
    """

    def __init__(
        self,
        http: HttpClient,
        graphql_url: str = "https://api.zora.co/graphql",
        contract_address: str = "0x8EAa9AE1Ac89B1c8C8a8104D08C045f78Aadb42D",
    ):
        self.http = http
        self.graphql_url = graphql_url
        self.contract_address = contract_address

    @classmethod
    def from_settings(cls, http: HttpClient, settings: RigsSettings) -> "RigsClient":
        return cls(
            http,
            graphql_url=settings.GRAPHQL_URL,
            contract_address=settings.CONTRACT_ADDRESS,
        )

    def get_rig(self, token_id: int) -> OperationResult:
        """Fetch one Rig.

        Returns:
            OperationResult with a ``Rig`` on success, NOT_FOUND when the
            token does not exist, an error result otherwise
        """
        result = self.http.post(
            self.graphql_url,
            json_data={
                "query": TOKEN_QUERY,
                "variables": {
                    "address": self.contract_address,
                    "tokenId": str(token_id),
                },
            },
        )
        if not result.is_success:
            logger.warning(
                "rigs_lookup_failed",
                token_id=token_id,
                status=result.status.value,
                error=result.message,
            )
            return result

        try:
            token = _unwrap_token(result.data)
        except GraphQLError as e:
            logger.warning(
                "rigs_graphql_error", token_id=token_id, error=str(e), errors=e.errors
            )
            return OperationResult.permanent_error(
                message=str(e), error_code="GRAPHQL_ERROR"
            )

        if token is None:
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                message=f"Rig #{token_id} not found",
                error_code="TOKEN_NOT_FOUND",
            )
        return OperationResult.success(data=Rig.from_token(token_id, token))


def _unwrap_token(payload: Any) -> Optional[Dict[str, Any]]:
    """Token object from a GraphQL response body.

    Raises:
        GraphQLError: If the response carries errors or has no data
    """
    if not isinstance(payload, dict):
        raise GraphQLError("GraphQL response is not an object")

    errors = payload.get("errors")
    if errors:
        first = errors[0] if isinstance(errors, list) else errors
        message = first.get("message") if isinstance(first, dict) else str(first)
        raise GraphQLError(message or "GraphQL request failed", errors=errors)

    data = payload.get("data")
    if not isinstance(data, dict):
        raise GraphQLError("GraphQL response has no data")

    wrapper = data.get("token") or {}
    return wrapper.get("token")
