"""Operation status enumeration.

Outcome codes attached to every call made to an external collaborator
(gateway, stats API, GraphQL API) so command handlers can tell a bad request
apart from a service that is simply unreachable.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Call completed and returned a usable body
        TRANSIENT_ERROR: Network failure, timeout or 5xx; worth trying again later
        PERMANENT_ERROR: Request was rejected (4xx, malformed body)
        UNAUTHORIZED: Missing or rejected API credentials
        NOT_FOUND: Requested table, collection or token does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
