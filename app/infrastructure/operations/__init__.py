"""Operation result types and status enums.

Standardized result types returned by integration clients, plus the
classifiers that turn HTTP failures into those results.
"""

from infrastructure.operations.classifiers import (
    classify_http_status,
    classify_request_exception,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_http_status",
    "classify_request_exception",
]
