"""Response formatters for Discord messages (content + embeds)."""

from infrastructure.platforms.formatters.discord import (
    DiscordEmbedFormatter,
    bold,
    code_block,
    hyperlink,
    italic,
    truncate,
)

__all__ = [
    "DiscordEmbedFormatter",
    "bold",
    "code_block",
    "hyperlink",
    "italic",
    "truncate",
]
