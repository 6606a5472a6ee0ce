"""Assemble the bot's command table."""

from dataclasses import dataclass
from typing import Mapping

from infrastructure.commands import Command, CommandRegistry
from integrations.opensea import OpenSeaClient
from integrations.rigs import RigsClient
from integrations.sqlparser import SqlParser
from integrations.tableland import TablelandClient
from modules import rigs, tableland


@dataclass(frozen=True)
class BotServices:
    """Service handles the command handlers are bound to.

    Built once at startup; the parser must already be initialized.
    """

    parser: SqlParser
    tableland: TablelandClient
    opensea: OpenSeaClient
    rigs: RigsClient
    marketplace_url: str = "https://opensea.io/assets/ethereum"


def build_command_registry(services: BotServices) -> Mapping[str, Command]:
    """Register every command and return the frozen name -> Command mapping."""
    registry = CommandRegistry(namespace="tablebot")
    tableland.register_commands(registry, services.parser, services.tableland)
    rigs.register_commands(
        registry, services.rigs, services.opensea, services.marketplace_url
    )
    return registry.freeze()
