"""Discord Embed response formatter.

Renders platform-agnostic ``Reply``/``Card`` objects into the keyword
arguments discord.py expects (``content``, ``embeds``, ``ephemeral``) and
provides the small markdown helpers the command handlers use.

Discord limits enforced here (longer values are truncated):
- message content: 2000 characters
- embed title: 256, description: 4096
- field name: 256, field value: 1024, 25 fields per embed
- footer text: 2048, author name: 256

Reference:
- Discord Embed Documentation: https://discord.com/developers/docs/resources/channel#embed-object
"""

from typing import Any, Dict, List, Optional

import discord
import structlog

from infrastructure.commands.responses.models import Card, Reply

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 2000
MAX_TITLE_LENGTH = 256
MAX_DESCRIPTION_LENGTH = 4096
MAX_FIELD_NAME_LENGTH = 256
MAX_FIELD_VALUE_LENGTH = 1024
MAX_FIELDS = 25
MAX_FOOTER_LENGTH = 2048
MAX_EMBEDS = 10

# Discord rejects empty field names and values
BLANK = "\u200b"


def bold(text: str) -> str:
    """Wrap text in bold markdown."""
    return f"**{text}**"


def italic(text: str) -> str:
    """Wrap text in italic markdown."""
    return f"_{text}_"


def code_block(
    text: str, language: Optional[str] = None, limit: Optional[int] = None
) -> str:
    """Wrap text in a fenced code block.

    Triple backticks inside ``text`` are broken up so they cannot close the
    block early. With ``limit`` the text is truncated so the whole block,
    fences included, fits in ``limit`` characters.
    """
    safe = text.replace("```", "`\u200b``")
    opening = f"```{language or ''}\n"
    closing = "\n```"
    if limit is not None:
        safe = truncate(safe, limit - len(opening) - len(closing))
    return f"{opening}{safe}{closing}"


def hyperlink(text: str, url: str) -> str:
    """Masked markdown link."""
    return f"[{text}]({url})"


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


class DiscordEmbedFormatter:
    """Convert replies and cards into discord.py message arguments."""

    def __init__(self):
        self._logger = logger.bind(formatter=self.__class__.__name__)

    def format_card(self, card: Card) -> discord.Embed:
        """Render a Card as a discord.Embed.

        Args:
            card: Card to render

        Returns:
            discord.Embed with limits applied
        """
        embed = discord.Embed(
            title=truncate(card.title, MAX_TITLE_LENGTH) if card.title else None,
            description=(
                truncate(card.text, MAX_DESCRIPTION_LENGTH) if card.text else None
            ),
            url=card.url,
            color=card.color,
            timestamp=card.timestamp,
        )

        if card.author is not None:
            embed.set_author(
                name=truncate(card.author.name, MAX_TITLE_LENGTH),
                url=card.author.url,
            )

        if len(card.fields) > MAX_FIELDS:
            self._logger.warning(
                "embed_fields_truncated",
                title=card.title,
                field_count=len(card.fields),
            )

        for item in card.fields[:MAX_FIELDS]:
            embed.add_field(
                name=truncate(item.title or BLANK, MAX_FIELD_NAME_LENGTH),
                value=truncate(item.value or BLANK, MAX_FIELD_VALUE_LENGTH),
                inline=item.short,
            )

        if card.footer is not None:
            embed.set_footer(
                text=truncate(card.footer.text, MAX_FOOTER_LENGTH),
                icon_url=card.footer.icon_url,
            )

        if card.image_url:
            embed.set_image(url=card.image_url)

        return embed

    def format_reply(self, reply: Reply) -> Dict[str, Any]:
        """Render a Reply as keyword arguments for discord.py send/edit calls.

        Args:
            reply: Reply to render

        Returns:
            Dict with ``content`` and ``embeds`` keys
        """
        content = reply.content
        if content is not None:
            content = truncate(content, MAX_CONTENT_LENGTH)

        embeds: List[discord.Embed] = [
            self.format_card(card) for card in reply.cards[:MAX_EMBEDS]
        ]

        return {"content": content, "embeds": embeds}
