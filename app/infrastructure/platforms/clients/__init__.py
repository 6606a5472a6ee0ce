"""Platform clients package.

Modules:
    discord: discord.Client subclass with explicit event subscriptions
"""

from infrastructure.platforms.clients.discord import DiscordBot

__all__ = ["DiscordBot"]
