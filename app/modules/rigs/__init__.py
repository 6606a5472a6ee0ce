"""Tableland Rigs commands: ``/rigs`` and ``/rigs-stats``."""

from infrastructure.commands import CommandRegistry
from integrations.opensea import OpenSeaClient
from integrations.rigs import RigsClient
from modules.rigs import lookup, stats


def register_commands(
    registry: CommandRegistry,
    rigs: RigsClient,
    opensea: OpenSeaClient,
    marketplace_url: str,
) -> None:
    """Register the Rigs commands on ``registry``."""
    lookup.register(registry, rigs, marketplace_url)
    stats.register(registry, opensea)
