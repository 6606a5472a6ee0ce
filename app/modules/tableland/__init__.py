"""Tableland commands: ``/parse`` and ``/read``."""

from infrastructure.commands import CommandRegistry
from integrations.sqlparser import SqlParser
from integrations.tableland import TablelandClient
from modules.tableland import parse, read


def register_commands(
    registry: CommandRegistry, parser: SqlParser, tableland: TablelandClient
) -> None:
    """Register the Tableland commands on ``registry``."""
    parse.register(registry, parser)
    read.register(registry, parser, tableland)
