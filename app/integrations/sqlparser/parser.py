"""SQL validator/normalizer built on sqlglot.

``SqlParser`` is an explicit handle: construct it, call ``initialize()`` once
during startup, then pass it to whoever needs to validate statements.
``normalize`` on an uninitialized handle raises
``SqlParserNotInitializedError`` instead of silently loading state.

Syntax errors are reported as ``syntax error at position N near '<token>'``
where N is the 1-based character offset of the offending token. The
``parse`` and ``read`` commands rely on that format to highlight the error in
the user's statement.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import re

import sqlglot
from sqlglot import exp
from sqlglot.dialects.dialect import Dialect
from sqlglot.errors import ParseError, TokenError

from core.logging import get_module_logger

logger = get_module_logger()

READ = "read"
WRITE = "write"
CREATE = "create"
ACL = "acl"

_READ_EXPRESSIONS: Tuple[type, ...] = (
    exp.Select,
    exp.Union,
    exp.Intersect,
    exp.Except,
)
_WRITE_EXPRESSIONS: Tuple[type, ...] = (exp.Insert, exp.Update, exp.Delete)
_ACL_KEYWORDS = ("GRANT", "REVOKE")
_CLASS_REPR = re.compile(r"<class '(?:[\w.]+\.)?(\w+)'>")


class SqlParserError(Exception):
    """Statement rejected by the validator. ``str(err)`` is the diagnostic."""


class SqlParserNotInitializedError(RuntimeError):
    """normalize() was called before initialize()."""


@dataclass(frozen=True)
class NormalizedStatement:
    """Result of a successful normalization.

    Attributes:
        type: One of "read", "write", "create", "acl"
        statements: Normalized SQL, one entry per input statement
        tables: Referenced table names in order of first appearance
    """

    type: str
    statements: List[str] = field(default_factory=list)
    tables: List[str] = field(default_factory=list)


class SqlParser:
    """Validate, classify and normalize SQL statements.

    Example:
        parser = SqlParser(dialect="sqlite")
        parser.initialize()

        result = parser.normalize("select * from healthbot_5_1")
        result.type        # "read"
        result.statements  # ["SELECT * FROM healthbot_5_1"]
    """

    def __init__(self, dialect: str = "sqlite"):
        self.dialect_name = dialect
        self._dialect: Optional[Dialect] = None

    @property
    def initialized(self) -> bool:
        return self._dialect is not None

    def initialize(self) -> "SqlParser":
        """Resolve the dialect. Safe to call more than once.

        Raises:
            ValueError: If sqlglot does not know the dialect
        """
        if self._dialect is None:
            self._dialect = Dialect.get_or_raise(self.dialect_name)
            logger.info("sql_parser_initialized", dialect=self.dialect_name)
        return self

    def normalize(self, statement: str) -> NormalizedStatement:
        """Validate and normalize one or more ``;``-separated statements.

        Args:
            statement: Raw SQL from the user

        Returns:
            NormalizedStatement

        Raises:
            SqlParserNotInitializedError: If initialize() was not called
            SqlParserError: If the statement is invalid or not supported
        """
        if self._dialect is None:
            raise SqlParserNotInitializedError(
                "SqlParser.initialize() must be called before normalize()"
            )

        if not statement or not statement.strip():
            raise SqlParserError("empty statement")

        expressions = self._parse(statement)
        if not expressions:
            raise SqlParserError("empty statement")

        kinds = [self._classify(expression) for expression in expressions]
        kind = kinds[0]
        if any(other != kind for other in kinds[1:]):
            raise SqlParserError(
                f"mixed statement types are not allowed: {', '.join(kinds)}"
            )
        if kind == READ and len(expressions) > 1:
            raise SqlParserError("only one read statement is allowed per query")

        return NormalizedStatement(
            type=kind,
            statements=[
                expression.sql(dialect=self._dialect) for expression in expressions
            ],
            tables=_table_names(expressions),
        )

    def _parse(self, statement: str) -> List[exp.Expression]:
        try:
            parsed = sqlglot.parse(
                statement,
                read=self._dialect,
                error_message_context=len(statement) + 1,
            )
        except ParseError as e:
            raise SqlParserError(_describe_parse_error(e)) from e
        except TokenError as e:
            raise SqlParserError(f"syntax error: {e}") from e

        return [expression for expression in parsed if expression is not None]

    def _classify(self, expression: exp.Expression) -> str:
        if isinstance(expression, _READ_EXPRESSIONS):
            return READ
        if isinstance(expression, _WRITE_EXPRESSIONS):
            return WRITE
        if isinstance(expression, exp.Create):
            return CREATE
        if isinstance(expression, exp.Command):
            keyword = str(expression.this).upper()
            if keyword in _ACL_KEYWORDS:
                return ACL
            raise SqlParserError(f"unsupported statement: {keyword}")
        if expression.key.upper() in _ACL_KEYWORDS:
            return ACL
        raise SqlParserError(f"unsupported statement: {expression.key.upper()}")


def _describe_parse_error(error: ParseError) -> str:
    """Turn a sqlglot ParseError into a positional diagnostic."""
    if not error.errors:
        return f"syntax error: {error}"

    first = error.errors[0]
    start_context = first.get("start_context") or ""
    token = first.get("highlight") or ""
    description = _CLASS_REPR.sub(
        r"\1", first.get("description") or "invalid syntax"
    )

    position = len(start_context) + 1
    message = f"syntax error at position {position}"
    if token:
        message += f" near '{token}'"
    return f"{message}: {description}"


def _table_names(expressions: List[exp.Expression]) -> List[str]:
    """Names of stored tables, skipping references to CTEs."""
    names: List[str] = []
    for expression in expressions:
        ctes = {cte.alias for cte in expression.find_all(exp.CTE)}
        for table in expression.find_all(exp.Table):
            if table.name in ctes:
                continue
            if table.name and table.name not in names:
                names.append(table.name)
    return names
