"""Command execution context - platform agnostic."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol
from uuid import uuid4

from core.logging import get_module_logger
from infrastructure.commands.responses.models import Card, Reply

logger = get_module_logger()


class ResponseChannel(Protocol):
    """Protocol for platform-specific response channels."""

    def is_acknowledged(self) -> bool:
        """Whether the platform already received a defer or a reply."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def defer(self, ephemeral: bool = False) -> None:
        """Acknowledge the invocation now and reply later."""
        ...  # pylint: disable=unnecessary-ellipsis

    async def send(self, reply: Reply) -> None:
        """Send (or complete a deferred) reply.

        Args:
            reply: Reply object from infrastructure.commands.responses.models
        """
        ...  # pylint: disable=unnecessary-ellipsis


@dataclass
class CommandContext:
    """Platform-agnostic command execution context.

    Handlers receive one context per invocation. It carries the raw options
    sent by the platform and the responder used to answer. Nothing in it is
    shared with other invocations.

    Attributes:
        command_name: Invoked command name
        platform: Platform name (discord)
        user_id: Platform-specific requestor identifier
        channel_id: Platform-specific channel identifier
        guild_id: Platform-specific server identifier (None in DMs)
        options: Raw option values keyed by option name
        correlation_id: Identifier tying log lines for one invocation together

    Example:
        async def handle(ctx: CommandContext, statement: str):
            await ctx.defer()
            ...
            await ctx.respond(content="done", cards=[card])
    """

    command_name: str
    platform: str
    user_id: str = ""
    channel_id: str = ""
    guild_id: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None

    # Injected by adapter
    _responder: Optional[ResponseChannel] = field(default=None, repr=False)
    _replied: bool = field(default=False, repr=False)

    def __post_init__(self):
        """Initialize defaults."""
        if self.options is None:
            self.options = {}
        if self.correlation_id is None:
            self.correlation_id = str(uuid4())

    @property
    def acknowledged(self) -> bool:
        """True once the invocation was deferred or answered."""
        if self._replied:
            return True
        if self._responder is None:
            return False
        return self._responder.is_acknowledged()

    @property
    def replied(self) -> bool:
        """True once a reply was sent through this context."""
        return self._replied

    async def defer(self, ephemeral: bool = False) -> None:
        """Acknowledge the invocation; the reply follows later."""
        if self._responder is None:
            logger.warning("defer called without responder set")
            return
        if self.acknowledged:
            return
        await self._responder.defer(ephemeral=ephemeral)

    async def respond(
        self,
        content: Optional[str] = None,
        cards: Optional[List[Card]] = None,
        ephemeral: bool = False,
    ) -> None:
        """Send the reply for this invocation.

        Args:
            content: Markdown text
            cards: Cards rendered below the text
            ephemeral: Only visible to the invoking user
        """
        reply = Reply(content=content, cards=list(cards or []), ephemeral=ephemeral)
        await self.send(reply)

    async def send(self, reply: Reply) -> None:
        """Send a prepared Reply."""
        if self._responder is None:
            logger.warning(
                "respond called without responder set", content=reply.content
            )
            return
        await self._responder.send(reply)
        self._replied = True
