"""Command registry for startup-time registration."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from core.logging import get_module_logger
from infrastructure.commands.models import Argument, Command, Handler

logger = get_module_logger()


class CommandRegistry:
    """Registry that collects slash commands while the bot starts up.

    Commands are added with ``register``, then
    ``freeze`` hands out a read-only mapping for the dispatcher. Once frozen
    the registry refuses further registrations.

    Attributes:
        namespace: Registry namespace used in log context
        _commands: Dict of registered commands

    Example:
        registry = CommandRegistry("tablebot")

        async def parse(ctx: CommandContext, statement: str):
            ...

        registry.register(
            "parse",
            parse,
            description="Returns whether or not a SQL statement is valid",
            args=[Argument("statement")],
        )

        commands = registry.freeze()
    """

    def __init__(self, namespace: str):
        """Initialize registry.

        Args:
            namespace: Namespace for log context
        """
        self.namespace = namespace
        self._commands: Dict[str, Command] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        handler: Handler,
        description: str = "",
        args: Optional[List[Argument]] = None,
    ) -> Command:
        """Register a handler under ``name``.

        Args:
            name: Command name
            handler: Coroutine function called as ``handler(ctx, **arguments)``
            description: Human-readable description
            args: List of Argument definitions

        Returns:
            The registered Command

        Raises:
            ValueError: If the name is taken or the registry is frozen
        """
        if self._frozen:
            raise ValueError(
                f"Registry '{self.namespace}' is frozen; cannot register '{name}'"
            )
        if name in self._commands:
            raise ValueError(
                f"Command '{name}' is already registered in {self.namespace}"
            )

        cmd = Command(
            name=name,
            handler=handler,
            description=description,
            args=list(args or []),
        )
        self._commands[name] = cmd
        logger.debug("registered command", namespace=self.namespace, name=name)
        return cmd

    def get_command(self, name: str) -> Optional[Command]:
        """Get command by name, or None if not found."""
        return self._commands.get(name)

    def freeze(self) -> Mapping[str, Command]:
        """Stop accepting registrations and return a read-only view.

        Returns:
            MappingProxyType over a copy of the registered commands
        """
        self._frozen = True
        frozen = MappingProxyType(dict(self._commands))
        logger.info(
            "command_registry_frozen",
            namespace=self.namespace,
            commands=sorted(frozen.keys()),
        )
        return frozen
