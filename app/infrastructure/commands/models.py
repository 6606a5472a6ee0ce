"""Command framework data models."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional
from enum import Enum


class ArgumentType(Enum):
    """Supported argument types (mirrors the slash command option types)."""

    STRING = "string"
    INTEGER = "integer"


@dataclass(frozen=True)
class Argument:
    """Command argument definition.

    Attributes:
        name: Option name as shown on the slash command (e.g., "statement")
        type: ArgumentType used for coercion
        required: Whether the option must be supplied
        description: Human-readable description
        min_value: Lower bound for INTEGER options

    Examples:
        Argument("statement", description="A SQL compliant SELECT statement")
        Argument("id", type=ArgumentType.INTEGER, min_value=1)
    """

    name: str
    type: ArgumentType = ArgumentType.STRING
    required: bool = True
    description: str = ""
    min_value: Optional[int] = None

    def __post_init__(self):
        """Validate argument configuration."""
        if self.min_value is not None and self.type != ArgumentType.INTEGER:
            raise ValueError(f"min_value is only valid for INTEGER: {self.name}")


Handler = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class Command:
    """Slash command definition.

    Attributes:
        name: Command name (unique)
        handler: Coroutine function called as ``handler(ctx, **arguments)``
        description: Human-readable description
        args: List of Argument definitions

    Example:
        Command(
            name="read",
            handler=read,
            description="Returns the results from a Tableland read query",
            args=[Argument("statement")],
        )
    """

    name: str
    handler: Handler
    description: str = ""
    args: List[Argument] = field(default_factory=list)
