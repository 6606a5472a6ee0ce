"""Discord-specific command adapter implementation."""

from typing import Any, Dict, Optional

import discord

from core.logging import get_module_logger
from infrastructure.commands.context import CommandContext, ResponseChannel
from infrastructure.commands.responses.models import Reply
from infrastructure.platforms.formatters.discord import DiscordEmbedFormatter

logger = get_module_logger()


class DiscordResponseChannel(ResponseChannel):
    """Answer a Discord interaction.

    The first reply goes through ``interaction.response``. A deferred
    interaction is completed by editing the original response; anything after
    that is sent as a followup message.
    """

    def __init__(
        self,
        interaction: discord.Interaction,
        formatter: Optional[DiscordEmbedFormatter] = None,
    ):
        """Initialize Discord responder.

        Args:
            interaction: Interaction being answered
            formatter: Embed formatter (defaults to DiscordEmbedFormatter)
        """
        self.interaction = interaction
        self.formatter = formatter or DiscordEmbedFormatter()
        self._deferred = False
        self._sent = False

    def is_acknowledged(self) -> bool:
        """Whether Discord already received a defer or a reply."""
        return self.interaction.response.is_done()

    async def defer(self, ephemeral: bool = False) -> None:
        """Show the "thinking..." state; the reply follows later."""
        await self.interaction.response.defer(ephemeral=ephemeral, thinking=True)
        self._deferred = True

    async def send(self, reply: Reply) -> None:
        """Send the reply through whichever channel is still open."""
        message = self.formatter.format_reply(reply)

        if not self.interaction.response.is_done():
            await self.interaction.response.send_message(
                content=message["content"],
                embeds=message["embeds"],
                ephemeral=reply.ephemeral,
            )
        elif self._deferred and not self._sent:
            await self.interaction.edit_original_response(
                content=message["content"],
                embeds=message["embeds"],
            )
        else:
            await self.interaction.followup.send(
                content=message["content"],
                embeds=message["embeds"],
                ephemeral=reply.ephemeral,
            )
        self._sent = True


class DiscordCommandAdapter:
    """Bridge discord.py interactions to the platform-agnostic context.

    Example::

        adapter = DiscordCommandAdapter()

        async def on_interaction(interaction):
            if adapter.is_command(interaction):
                ctx = adapter.create_context(interaction)
                await dispatcher.dispatch(ctx.command_name, ctx)
    """

    platform = "discord"

    def __init__(self, formatter: Optional[DiscordEmbedFormatter] = None):
        self.formatter = formatter or DiscordEmbedFormatter()

    def is_command(self, interaction: discord.Interaction) -> bool:
        """True for slash command invocations (not buttons, autocomplete...)."""
        return interaction.type == discord.InteractionType.application_command

    def extract_command_name(self, interaction: discord.Interaction) -> str:
        """Command name from the interaction payload."""
        data = interaction.data or {}
        return str(data.get("name", ""))

    def extract_options(self, interaction: discord.Interaction) -> Dict[str, Any]:
        """Flatten interaction options into ``{name: value}``.

        Options of subcommands are nested one level deeper in the payload;
        they are flattened into the same mapping.
        """
        data = interaction.data or {}
        return _flatten_options(data.get("options", []))

    def create_context(self, interaction: discord.Interaction) -> CommandContext:
        """Create CommandContext from a Discord interaction.

        Args:
            interaction: Application command interaction

        Returns:
            CommandContext with a DiscordResponseChannel attached
        """
        user = interaction.user
        ctx = CommandContext(
            command_name=self.extract_command_name(interaction),
            platform=self.platform,
            user_id=str(user.id) if user is not None else "",
            channel_id=(
                str(interaction.channel_id) if interaction.channel_id else ""
            ),
            guild_id=str(interaction.guild_id) if interaction.guild_id else None,
            options=self.extract_options(interaction),
        )
        ctx._responder = DiscordResponseChannel(interaction, self.formatter)
        return ctx


def _flatten_options(options: Any) -> Dict[str, Any]:
    flattened: Dict[str, Any] = {}
    for option in options or []:
        if "options" in option:
            flattened.update(_flatten_options(option["options"]))
        elif "name" in option:
            flattened[option["name"]] = option.get("value")
    return flattened
