"""``/read``: run a read query against Tableland and summarize the table.

The statement is validated locally first. Its first table name
(``{prefix}_{chainId}_{tableId}``) decides which chain, and therefore which
gateway, serves the query. The reply shows the query, a data sample and the
table's metadata in one card.
"""

import asyncio
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import discord

from core.logging import get_module_logger
from infrastructure.commands import (
    Argument,
    Author,
    Card,
    CommandContext,
    CommandRegistry,
)
from infrastructure.platforms.formatters.discord import (
    BLANK,
    MAX_CONTENT_LENGTH,
    MAX_FIELD_VALUE_LENGTH,
    bold,
    code_block,
    hyperlink,
)
from integrations.sqlparser import READ, SqlParser, SqlParserError
from integrations.tableland import (
    Chain,
    TableName,
    TableNameError,
    TablelandClient,
    UnsupportedChainError,
    created_at,
    get_chain,
    schema_columns,
)
from modules.branding import tablebot_footer
from modules.tableland.colors import find_color
from modules.tableland.parse import invalid_message

logger = get_module_logger()

QUERY_ERROR_MESSAGE = "Error querying Tableland. Please try again."
NOT_A_READ_MESSAGE = "Statement provided is not a read query"
NO_TABLE_MESSAGE = "Statement provided does not read from a table"
NO_ROWS_MESSAGE = "No rows returned"


class ReadValidationError(ValueError):
    """A syntactically valid statement that ``/read`` cannot run."""


@dataclass(frozen=True)
class ReadTarget:
    """Where a read statement has to be sent."""

    table: TableName
    chain: Chain


def resolve_target(statement: str, parser: SqlParser) -> ReadTarget:
    """Validate ``statement`` and work out its table and chain.

    Raises:
        SqlParserError: Invalid SQL
        ReadValidationError: Not a read query, or no table referenced
        TableNameError: Table name is not ``{prefix}_{chainId}_{tableId}``
        UnsupportedChainError: Tableland is not deployed on the chain
    """
    normalized = parser.normalize(statement)
    if normalized.type != READ:
        raise ReadValidationError(NOT_A_READ_MESSAGE)
    if not normalized.tables:
        raise ReadValidationError(NO_TABLE_MESSAGE)

    table = TableName.parse(normalized.tables[0])
    return ReadTarget(table=table, chain=get_chain(table.chain_id))


def _json_sample(row: Dict[str, Any]) -> str:
    text = json.dumps(row, indent=2, default=str)
    return code_block(text, "json", limit=MAX_FIELD_VALUE_LENGTH)


def _schema_text(columns: List[Dict[str, Any]]) -> str:
    lines = []
    for column in columns:
        constraints = " ".join(column.get("constraints") or [])
        name = column.get("name", "")
        kind = column.get("type", "")
        lines.append(f"{name} {kind} {constraints}".strip())
    return code_block("\n".join(lines), "sql", limit=MAX_FIELD_VALUE_LENGTH)


def _created_at_text(metadata: Dict[str, Any]) -> str:
    timestamp = created_at(metadata)
    if timestamp is None:
        return "Unknown"
    return discord.utils.format_dt(
        datetime.fromtimestamp(timestamp, tz=timezone.utc), style="D"
    )


def build_read_card(
    statement: str,
    target: ReadTarget,
    rows: List[Dict[str, Any]],
    metadata: Dict[str, Any],
    tableland: TablelandClient,
    now: Optional[datetime] = None,
) -> Card:
    """Card summarizing a query result and the table it came from."""
    chain = target.chain
    table = target.table
    columns = schema_columns(metadata)
    column_count = len(rows[0]) if rows else len(columns)

    card = Card(
        title="See more at the Tableland gateway",
        url=tableland.query_url(statement, chain),
        color=find_color(len(rows)),
        author=Author(
            name=table.name, url=tableland.table_url(chain, table.table_id)
        ),
        footer=tablebot_footer(),
        timestamp=now or datetime.now(timezone.utc),
    )
    card.add_field("Data Sample", _json_sample(rows[0]) if rows else NO_ROWS_MESSAGE)
    card.add_field("Table Schema", _schema_text(columns) if columns else "Unknown")
    card.add_field("# Rows", str(len(rows)), short=True)
    card.add_field("# Columns", str(column_count), short=True)
    card.add_field("Created At", _created_at_text(metadata), short=True)
    card.add_field("Chain", chain.phrase, short=True)
    card.add_field(
        BLANK,
        hyperlink(
            "See the TABLE NFT",
            tableland.render_table_url(chain.chain_id, table.table_id),
        ),
    )
    return card


def query_content(statement: str) -> str:
    header = bold("Query: ")
    footer = "\n" + bold("Response: ")
    limit = MAX_CONTENT_LENGTH - len(header) - len(footer)
    return header + code_block(statement, limit=limit) + footer


async def handle_read(
    ctx: CommandContext,
    statement: str,
    parser: SqlParser,
    tableland: TablelandClient,
):
    """Run ``statement`` and reply with a summary card."""
    await ctx.defer()

    try:
        target = resolve_target(statement, parser)
    except (
        SqlParserError,
        ReadValidationError,
        TableNameError,
        UnsupportedChainError,
    ) as e:
        logger.info("read_statement_rejected", error=str(e))
        await ctx.respond(content=invalid_message(str(e), statement))
        return

    log = logger.bind(
        table=target.table.name,
        chain_id=target.chain.chain_id,
        correlation_id=ctx.correlation_id,
    )

    rows_result = await asyncio.to_thread(tableland.query, statement, target.chain)
    if not rows_result.is_success:
        log.warning(
            "read_query_failed",
            status=rows_result.status.value,
            error=rows_result.message,
        )
        await ctx.respond(content=QUERY_ERROR_MESSAGE)
        return

    table_result = await asyncio.to_thread(
        tableland.get_table, target.chain, target.table.table_id
    )
    if not table_result.is_success:
        log.warning(
            "read_table_lookup_failed",
            status=table_result.status.value,
            error=table_result.message,
        )
        await ctx.respond(content=QUERY_ERROR_MESSAGE)
        return

    rows = rows_result.data
    card = build_read_card(statement, target, rows, table_result.data, tableland)
    log.info("read_query_succeeded", rows=len(rows))
    await ctx.respond(content=query_content(statement), cards=[card])


def register(
    registry: CommandRegistry, parser: SqlParser, tableland: TablelandClient
) -> None:
    async def read(ctx: CommandContext, statement: str):
        await handle_read(ctx, statement, parser, tableland)

    registry.register(
        "read",
        read,
        description="Returns the results from a Tableland read query",
        args=[
            Argument(
                "statement",
                description="A SQL compliant SELECT statement",
            )
        ],
    )
