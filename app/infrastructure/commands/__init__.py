"""Command framework for slash command handling.

This framework provides:
- CommandRegistry: Register commands at startup and freeze the table
- CommandDispatcher: Route invocations by name with failure isolation
- CommandContext: Platform-agnostic execution context
- CommandParser: Bind and validate command options

Example:
    from infrastructure.commands import (
        Argument, CommandContext, CommandDispatcher, CommandRegistry
    )

    registry = CommandRegistry("tablebot")

    async def hello_command(ctx: CommandContext, name: str):
        await ctx.respond(f"Hello, {name}!")

    registry.register(
        "hello",
        hello_command,
        description="Say hello to someone",
        args=[Argument("name")],
    )

    dispatcher = CommandDispatcher(registry.freeze())
"""

from infrastructure.commands.models import (
    Argument,
    ArgumentType,
    Command,
)
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.parser import CommandParser, CommandParseError
from infrastructure.commands.context import CommandContext, ResponseChannel
from infrastructure.commands.dispatcher import (
    CommandDispatcher,
    GENERIC_FAILURE_MESSAGE,
)
from infrastructure.commands.responses import (
    Author,
    Card,
    Field,
    Footer,
    Reply,
)

__all__ = [
    # Models
    "Argument",
    "ArgumentType",
    "Command",
    # Core
    "CommandRegistry",
    "CommandParser",
    "CommandParseError",
    "CommandContext",
    "CommandDispatcher",
    "GENERIC_FAILURE_MESSAGE",
    "ResponseChannel",
    # Responses
    "Author",
    "Card",
    "Field",
    "Footer",
    "Reply",
]
