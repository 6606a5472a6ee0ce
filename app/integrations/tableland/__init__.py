"""Tableland integration module."""

from .chains import (
    SUPPORTED_CHAINS,
    Chain,
    UnsupportedChainError,
    find_chain,
    get_chain,
)
from .client import TablelandClient, created_at, schema_columns
from .tables import TableName, TableNameError

__all__ = [
    "SUPPORTED_CHAINS",
    "Chain",
    "UnsupportedChainError",
    "find_chain",
    "get_chain",
    "TablelandClient",
    "created_at",
    "schema_columns",
    "TableName",
    "TableNameError",
]
