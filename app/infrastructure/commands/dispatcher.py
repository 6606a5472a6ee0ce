"""Command dispatcher: name -> handler invocation with failure isolation."""

from typing import Mapping, Optional

from structlog.stdlib import BoundLogger

from core.logging import get_module_logger
from infrastructure.commands.context import CommandContext
from infrastructure.commands.models import Command
from infrastructure.commands.parser import CommandParser, CommandParseError

logger = get_module_logger()

GENERIC_FAILURE_MESSAGE = "Something went wrong while running this command."


class CommandDispatcher:
    """Route command invocations to their registered handlers.

    The dispatcher holds a read-only mapping built once at startup (see
    ``CommandRegistry.freeze``). Each ``dispatch`` call is independent: a
    handler that raises is logged, the user gets one generic failure reply if
    nothing was sent yet, and the dispatcher itself is left untouched. There
    are no retries and no timeouts.

    Example:
        registry = CommandRegistry("tablebot")
        ...
        dispatcher = CommandDispatcher(registry.freeze())

        await dispatcher.dispatch("parse", ctx)
    """

    def __init__(
        self,
        commands: Mapping[str, Command],
        parser: Optional[CommandParser] = None,
    ):
        """Initialize dispatcher.

        Args:
            commands: Read-only command mapping
            parser: Option binder (defaults to CommandParser)
        """
        self._commands = commands
        self._parser = parser or CommandParser()

    @property
    def commands(self) -> Mapping[str, Command]:
        """The command mapping this dispatcher routes to."""
        return self._commands

    async def dispatch(self, name: str, ctx: CommandContext) -> bool:
        """Invoke the handler registered under ``name``.

        Args:
            name: Command name from the platform event
            ctx: Per-invocation context

        Returns:
            True if the handler completed, False otherwise
        """
        log = logger.bind(
            command=name,
            platform=ctx.platform,
            correlation_id=ctx.correlation_id,
        )

        command = self._commands.get(name)
        if command is None:
            log.warning("command_not_found", available=sorted(self._commands))
            await self._send_failure(ctx, log)
            return False

        try:
            arguments = self._parser.bind(command, ctx.options)
        except CommandParseError as e:
            await self._send_reply(
                ctx, f"Invalid options for `/{name}`: {e}", log
            )
            return False

        log.info(
            "dispatching_command",
            user_id=ctx.user_id,
            channel_id=ctx.channel_id,
            guild_id=ctx.guild_id,
        )

        try:
            await command.handler(ctx, **arguments)
        except Exception as e:  # pylint: disable=broad-except
            log.error("command_failed", error=str(e), exc_info=True)
            await self._send_failure(ctx, log)
            return False

        log.debug("command_completed")
        return True

    async def _send_failure(self, ctx: CommandContext, log: BoundLogger) -> None:
        await self._send_reply(ctx, GENERIC_FAILURE_MESSAGE, log)

    async def _send_reply(
        self, ctx: CommandContext, message: str, log: BoundLogger
    ) -> None:
        """Send an ephemeral notice unless the invocation was already answered."""
        if ctx.replied:
            return
        try:
            await ctx.respond(content=message, ephemeral=True)
        except Exception as e:  # pylint: disable=broad-except
            log.warning("failure_reply_not_sent", error=str(e))
