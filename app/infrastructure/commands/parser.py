"""Command option binding and validation."""

from typing import Any, Dict, Mapping

from core.logging import get_module_logger
from infrastructure.commands.models import Argument, ArgumentType, Command

logger = get_module_logger()


class CommandParseError(Exception):
    """Error during command option binding."""


class CommandParser:
    """Bind raw slash command options to a command's declared arguments.

    Handles:
    - Required option validation
    - Type coercion (options may arrive as strings)
    - Lower bounds on INTEGER options
    - Dropping options the command does not declare

    Example:
        parser = CommandParser()

        cmd = Command(
            name="rigs",
            handler=handler,
            args=[Argument("id", type=ArgumentType.INTEGER, min_value=1)],
        )

        parser.bind(cmd, {"id": "42"})
        # {"id": 42}
    """

    def bind(self, command: Command, options: Mapping[str, Any]) -> Dict[str, Any]:
        """Bind options to the command's arguments.

        Args:
            command: Command definition with argument schemas
            options: Raw option values keyed by option name

        Returns:
            Dict of keyword arguments for the handler

        Raises:
            CommandParseError: If a required option is missing or invalid
        """
        bound: Dict[str, Any] = {}

        try:
            for arg in command.args:
                value = options.get(arg.name)
                if value is None or value == "":
                    if arg.required:
                        raise CommandParseError(f"Missing required option: {arg.name}")
                    continue
                bound[arg.name] = self._coerce(value, arg)
        except CommandParseError as e:
            logger.warning(
                "command_parse_error",
                command=command.name,
                options=sorted(options.keys()),
                error=str(e),
            )
            raise

        unknown = set(options) - {arg.name for arg in command.args}
        if unknown:
            logger.debug(
                "command_options_ignored", command=command.name, options=sorted(unknown)
            )

        return bound

    def _coerce(self, value: Any, arg: Argument) -> Any:
        """Coerce a raw value to the argument type.

        Args:
            value: Raw option value
            arg: Argument definition

        Returns:
            Coerced value

        Raises:
            CommandParseError: If coercion fails
        """
        if arg.type == ArgumentType.STRING:
            return str(value)

        if isinstance(value, bool):
            raise CommandParseError(f"Invalid integer for {arg.name}: {value}")
        try:
            number = int(value)
        except (TypeError, ValueError) as e:
            raise CommandParseError(
                f"Invalid integer for {arg.name}: {value}"
            ) from e

        if arg.min_value is not None and number < arg.min_value:
            raise CommandParseError(
                f"{arg.name} must be at least {arg.min_value} (got {number})"
            )
        return number
