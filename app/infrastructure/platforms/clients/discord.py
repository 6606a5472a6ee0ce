"""Discord client with explicit event subscriptions.

discord.py delivers gateway events by calling ``on_<event>`` methods on the
client. ``DiscordBot`` keeps that behaviour and adds a small subscription
interface so startup code can attach named callbacks without subclassing or
touching module globals:

    bot = DiscordBot()
    bot.subscribe("ready", on_ready, once=True)
    bot.subscribe("interaction", on_interaction)
    await bot.start(token)

Every callback runs as its own task inside the client's event loop. A
callback that raises is logged and has no effect on other callbacks or on
later events.
"""

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set

import discord
import structlog

logger = structlog.get_logger()

EventCallback = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class Subscription:
    """A callback attached to an event name."""

    callback: EventCallback
    once: bool = False


class DiscordBot(discord.Client):
    """discord.Client that fans events out to subscribed callbacks.

    Args:
        intents: Gateway intents (defaults to guilds only; slash commands need
            nothing else)
        **options: Passed through to discord.Client
    """

    def __init__(self, intents: Optional[discord.Intents] = None, **options: Any):
        if intents is None:
            intents = discord.Intents.none()
            intents.guilds = True
        super().__init__(intents=intents, **options)
        self._subscriptions: Dict[str, List[Subscription]] = {}
        self._tasks: Set[asyncio.Task] = set()
        self._log = logger.bind(component="discord_bot")

    def subscribe(
        self, event: str, callback: EventCallback, once: bool = False
    ) -> None:
        """Attach ``callback`` to ``event``.

        Args:
            event: Event name with or without the ``on_`` prefix
                (e.g. "ready", "interaction", "guild_join")
            callback: Coroutine function receiving the event arguments
            once: Drop the subscription after the first delivery

        Raises:
            TypeError: If callback is not a coroutine function
        """
        if not inspect.iscoroutinefunction(callback):
            raise TypeError(
                f"Event callback for '{event}' must be a coroutine function"
            )
        name = event[3:] if event.startswith("on_") else event
        self._subscriptions.setdefault(name, []).append(
            Subscription(callback=callback, once=once)
        )
        self._log.debug(
            "event_subscribed",
            event_name=name,
            callback=getattr(callback, "__name__", "unknown"),
            once=once,
        )

    def subscriptions(self, event: str) -> List[EventCallback]:
        """Callbacks currently attached to ``event``."""
        return [sub.callback for sub in self._subscriptions.get(event, [])]

    def dispatch(self, event: str, /, *args: Any, **kwargs: Any) -> None:
        super().dispatch(event, *args, **kwargs)

        subscribers = self._subscriptions.get(event)
        if not subscribers:
            return

        remaining = [sub for sub in subscribers if not sub.once]
        if len(remaining) != len(subscribers):
            self._subscriptions[event] = remaining

        for sub in subscribers:
            task = asyncio.create_task(
                self._run_subscriber(event, sub.callback, *args, **kwargs),
                name=f"tablebot:{event}",
            )
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _run_subscriber(
        self, event: str, callback: EventCallback, *args: Any, **kwargs: Any
    ) -> None:
        try:
            await callback(*args, **kwargs)
        except Exception as e:  # pylint: disable=broad-except
            self._log.exception(
                "event_subscriber_failed",
                event_name=event,
                callback=getattr(callback, "__name__", "unknown"),
                error=str(e),
            )
