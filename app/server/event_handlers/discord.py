"""Discord gateway event handlers."""

from typing import Any

import discord

from core.logging import get_module_logger
from infrastructure.commands import CommandDispatcher
from infrastructure.commands.adapters import DiscordCommandAdapter
from infrastructure.platforms.clients import DiscordBot

logger = get_module_logger()


async def on_ready(bot: discord.Client) -> None:
    user: Any = bot.user
    logger.info(
        "discord_bot_ready",
        user=str(user) if user is not None else None,
        user_id=getattr(user, "id", None),
        guilds=len(bot.guilds),
    )


async def on_interaction(
    interaction: discord.Interaction,
    dispatcher: CommandDispatcher,
    adapter: DiscordCommandAdapter,
) -> None:
    """Route slash command invocations to the dispatcher.

    Anything that is not an application command (buttons, autocomplete, ...)
    is ignored.
    """
    if not adapter.is_command(interaction):
        return
    ctx = adapter.create_context(interaction)
    await dispatcher.dispatch(ctx.command_name, ctx)


async def on_guild_join(guild: discord.Guild) -> None:
    logger.info("discord_guild_joined", guild=guild.name, guild_id=guild.id)


async def on_guild_remove(guild: discord.Guild) -> None:
    logger.info("discord_guild_left", guild=guild.name, guild_id=guild.id)


def register(
    bot: DiscordBot,
    dispatcher: CommandDispatcher,
    adapter: DiscordCommandAdapter,
) -> None:
    """Subscribe the handlers to ``bot``'s events."""

    async def ready() -> None:
        await on_ready(bot)

    async def interaction(event: discord.Interaction) -> None:
        await on_interaction(event, dispatcher, adapter)

    bot.subscribe("ready", ready, once=True)
    bot.subscribe("interaction", interaction)
    bot.subscribe("guild_join", on_guild_join)
    bot.subscribe("guild_remove", on_guild_remove)
    logger.info("discord_event_handlers_registered")
