"""Command adapters for platform-specific integrations."""

from infrastructure.commands.adapters.discord import (
    DiscordCommandAdapter,
    DiscordResponseChannel,
)

__all__ = [
    "DiscordCommandAdapter",
    "DiscordResponseChannel",
]
