"""SQL parser integration module."""

from .parser import (
    ACL,
    CREATE,
    READ,
    WRITE,
    NormalizedStatement,
    SqlParser,
    SqlParserError,
    SqlParserNotInitializedError,
)

__all__ = [
    "ACL",
    "CREATE",
    "READ",
    "WRITE",
    "NormalizedStatement",
    "SqlParser",
    "SqlParserError",
    "SqlParserNotInitializedError",
]
