"""Unit tests for the /parse command."""

import pytest

from infrastructure.commands import CommandRegistry
from infrastructure.platforms.formatters.discord import MAX_CONTENT_LENGTH
from modules.tableland import parse
from modules.tableland.highlight import MARKER


@pytest.mark.unit
async def test_valid_statement(sql_parser, command_context_factory, responder):
    ctx = command_context_factory(responder=responder)

    await parse.handle_parse(ctx, "select * from healthbot_5_1", sql_parser)

    reply = responder.last
    assert reply.ephemeral is True
    assert reply.content.startswith("**Valid Tableland SQL!**")
    assert "read" in reply.content


@pytest.mark.unit
async def test_write_statement_is_valid(sql_parser, command_context_factory, responder):
    ctx = command_context_factory(responder=responder)

    await parse.handle_parse(ctx, "insert into healthbot_5_1 values (1)", sql_parser)

    assert "write" in responder.last.content


@pytest.mark.unit
async def test_invalid_statement_shows_diagnostic_and_highlight(
    sql_parser, command_context_factory, responder
):
    ctx = command_context_factory(responder=responder)

    await parse.handle_parse(ctx, "select (1", sql_parser)

    reply = responder.last
    assert reply.ephemeral is True
    assert reply.content.startswith("**Invalid: **syntax error at position ")
    assert MARKER in reply.content
    assert reply.content.endswith("\n```")


@pytest.mark.unit
async def test_rejection_without_position_shows_statement_unchanged(
    sql_parser, command_context_factory, responder
):
    ctx = command_context_factory(responder=responder)

    await parse.handle_parse(ctx, "select 1; select 2", sql_parser)

    content = responder.last.content
    assert content.startswith("**Invalid: **only one read statement")
    assert content.endswith("```\nselect 1; select 2\n```")


@pytest.mark.unit
def test_invalid_message():
    message = parse.invalid_message(
        "syntax error at position 5 near 'T'", "SELECT* FROM t"
    )

    assert message == (
        "**Invalid: **syntax error at position 5 near 'T'"
        "```\nSELEC⚠️T* FROM t\n```"
    )


@pytest.mark.unit
def test_invalid_message_for_long_statement_stays_closed():
    statement = "select " + "a" * 5000

    message = parse.invalid_message("syntax error at position 3 near 'l'", statement)

    assert len(message) <= MAX_CONTENT_LENGTH
    assert "sel" + MARKER in message
    assert message.endswith("…\n```")


@pytest.mark.unit
async def test_registered_handler_uses_bound_parser(
    sql_parser, command_context_factory, responder
):
    registry = CommandRegistry("test")
    parse.register(registry, sql_parser)
    cmd = registry.get_command("parse")
    ctx = command_context_factory(responder=responder)

    await cmd.handler(ctx, statement="select 1")

    assert [arg.name for arg in cmd.args] == ["statement"]
    assert responder.last.content.startswith("**Valid Tableland SQL!**")
