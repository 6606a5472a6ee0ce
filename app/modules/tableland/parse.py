"""``/parse``: tell the user whether a statement is valid Tableland SQL."""

from core.logging import get_module_logger
from infrastructure.commands import Argument, CommandContext, CommandRegistry
from infrastructure.platforms.formatters.discord import (
    MAX_CONTENT_LENGTH,
    bold,
    code_block,
    truncate,
)
from integrations.sqlparser import SqlParser, SqlParserError
from modules.tableland.highlight import highlight

logger = get_module_logger()

MAX_ERROR_LENGTH = 500


def invalid_message(error: str, statement: str) -> str:
    """``**Invalid: **<error>`` followed by the statement with the error marked.

    A long statement is cut inside its code block so the message stays under
    Discord's content limit with the block closed.
    """
    header = bold("Invalid: ") + truncate(error, MAX_ERROR_LENGTH)
    marked = highlight(error, statement)
    return header + code_block(marked, limit=MAX_CONTENT_LENGTH - len(header))


async def handle_parse(ctx: CommandContext, statement: str, parser: SqlParser):
    """Validate ``statement`` and answer privately."""
    try:
        result = parser.normalize(statement)
    except SqlParserError as e:
        logger.info("parse_statement_invalid", error=str(e))
        await ctx.respond(content=invalid_message(str(e), statement), ephemeral=True)
        return

    logger.info("parse_statement_valid", statement_type=result.type)
    await ctx.respond(
        content=f"{bold('Valid Tableland SQL!')} Statement type: `{result.type}`",
        ephemeral=True,
    )


def register(registry: CommandRegistry, parser: SqlParser) -> None:
    async def parse(ctx: CommandContext, statement: str):
        await handle_parse(ctx, statement, parser)

    registry.register(
        "parse",
        parse,
        description="Returns whether or not a SQL statement is valid",
        args=[
            Argument(
                "statement",
                description="An attempted SQL read or mutating query",
            )
        ],
    )
