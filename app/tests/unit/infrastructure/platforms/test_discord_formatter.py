"""Unit tests for the Discord embed formatter and markdown helpers."""

from datetime import datetime, timezone

import discord
import pytest

from infrastructure.commands import Author, Card, Footer, Reply
from infrastructure.platforms.formatters.discord import (
    BLANK,
    MAX_CONTENT_LENGTH,
    MAX_FIELD_VALUE_LENGTH,
    MAX_FIELDS,
    DiscordEmbedFormatter,
    bold,
    code_block,
    hyperlink,
    italic,
    truncate,
)


class TestMarkdownHelpers:
    @pytest.mark.unit
    def test_bold_and_italic(self):
        assert bold("Invalid: ") == "**Invalid: **"
        assert italic("Weekly") == "_Weekly_"

    @pytest.mark.unit
    def test_code_block(self):
        assert code_block("select 1") == "```\nselect 1\n```"
        assert code_block("{}", "json") == "```json\n{}\n```"

    @pytest.mark.unit
    def test_code_block_cannot_be_closed_early(self):
        block = code_block("a ``` b")

        assert block.count("```") == 2

    @pytest.mark.unit
    def test_code_block_limit_keeps_closing_fence(self):
        block = code_block("x" * 5000, "sql", limit=100)

        assert len(block) == 100
        assert block.startswith("```sql\n")
        assert block.endswith("…\n```")

    @pytest.mark.unit
    def test_code_block_limit_leaves_short_text_alone(self):
        assert code_block("select 1", limit=100) == "```\nselect 1\n```"

    @pytest.mark.unit
    def test_hyperlink(self):
        assert hyperlink("See", "https://x.example") == "[See](https://x.example)"

    @pytest.mark.unit
    def test_truncate(self):
        assert truncate("abc", 3) == "abc"
        assert truncate("abcdef", 4) == "abc…"


class TestDiscordEmbedFormatter:
    @pytest.mark.unit
    def test_format_card(self):
        timestamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        card = Card(
            title="See more at the Tableland gateway",
            url="https://gateway.example",
            color=0x452858,
            author=Author(name="healthbot_5_1", url="https://meta.example"),
            footer=Footer(text="❤️ TableBot", icon_url="https://icon.example"),
            image_url="https://img.example",
            timestamp=timestamp,
        )
        card.add_field("# Rows", "1", short=True)
        card.add_field("", "link")

        embed = DiscordEmbedFormatter().format_card(card)

        assert isinstance(embed, discord.Embed)
        assert embed.title == "See more at the Tableland gateway"
        assert embed.url == "https://gateway.example"
        assert embed.color.value == 0x452858
        assert embed.author.name == "healthbot_5_1"
        assert embed.author.url == "https://meta.example"
        assert embed.footer.text == "❤️ TableBot"
        assert embed.image.url == "https://img.example"
        assert embed.timestamp == timestamp
        assert embed.fields[0].name == "# Rows"
        assert embed.fields[0].inline is True
        assert embed.fields[1].name == BLANK

    @pytest.mark.unit
    def test_field_limits(self):
        card = Card(title="t")
        for i in range(MAX_FIELDS + 5):
            card.add_field(f"f{i}", "x" * (MAX_FIELD_VALUE_LENGTH + 10))

        embed = DiscordEmbedFormatter().format_card(card)

        assert len(embed.fields) == MAX_FIELDS
        assert len(embed.fields[0].value) == MAX_FIELD_VALUE_LENGTH

    @pytest.mark.unit
    def test_format_reply(self):
        reply = Reply(content="x" * (MAX_CONTENT_LENGTH + 1), cards=[Card(title="t")])

        message = DiscordEmbedFormatter().format_reply(reply)

        assert len(message["content"]) == MAX_CONTENT_LENGTH
        assert len(message["embeds"]) == 1

    @pytest.mark.unit
    def test_format_reply_without_content(self):
        message = DiscordEmbedFormatter().format_reply(Reply(cards=[]))

        assert message == {"content": None, "embeds": []}
