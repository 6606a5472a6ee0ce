import asyncio
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from core.config import Settings, settings as default_settings
from core.logging import configure_logging
from infrastructure.clients.http import HttpClient
from infrastructure.commands import CommandDispatcher
from infrastructure.commands.adapters import DiscordCommandAdapter
from infrastructure.platforms.clients import DiscordBot
from integrations.opensea import OpenSeaClient
from integrations.rigs import RigsClient
from integrations.sqlparser import SqlParser
from integrations.tableland import TablelandClient
from modules.registry import BotServices, build_command_registry
from server.event_handlers import discord as discord_events


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _list_configs(settings: Settings, logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _build_services(settings: Settings, http: HttpClient) -> BotServices:
    parser = SqlParser(dialect=settings.tableland.SQL_DIALECT)
    parser.initialize()

    return BotServices(
        parser=parser,
        tableland=TablelandClient.from_settings(http, settings.tableland),
        opensea=OpenSeaClient.from_settings(http, settings.opensea),
        rigs=RigsClient.from_settings(http, settings.rigs),
        marketplace_url=settings.rigs.MARKETPLACE_URL,
    )


def _get_bot(settings: Settings) -> Optional[DiscordBot]:
    """Create the Discord client if a token is set and not in tests."""
    if _is_test_environment():
        return None
    if not settings.discord.DISCORD_TOKEN:
        return None
    return DiscordBot()


def _start_bot(
    bot: DiscordBot, token: str, logger: BoundLogger
) -> "asyncio.Task[None]":
    task = asyncio.create_task(bot.start(token), name="discord-bot")

    def _log_exit(finished: "asyncio.Task[None]") -> None:
        if finished.cancelled():
            return
        error = finished.exception()
        if error is not None:
            logger.error("discord_bot_stopped", error=str(error), exc_info=error)

    task.add_done_callback(_log_exit)
    logger.info("discord_bot_starting")
    return task


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = getattr(app.state, "settings", None) or default_settings
    logger = configure_logging(settings.LOG_LEVEL)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    http = HttpClient(
        timeout=settings.http.TIMEOUT, user_agent=settings.http.USER_AGENT
    )
    services = _build_services(settings, http)
    dispatcher = CommandDispatcher(build_command_registry(services))

    app.state.services = services
    app.state.dispatcher = dispatcher

    bot = _get_bot(settings)
    app.state.bot = bot
    app.state.bot_task = None

    if bot is not None:
        discord_events.register(bot, dispatcher, DiscordCommandAdapter())
        app.state.bot_task = _start_bot(bot, settings.discord.DISCORD_TOKEN, logger)
    else:
        logger.info("discord_bot_skipped", reason="no token or test environment")

    yield

    logger.info("application_shutdown")

    if bot is not None:
        await bot.close()
        logger.info("discord_bot_closed")
    if app.state.bot_task is not None:
        await asyncio.gather(app.state.bot_task, return_exceptions=True)

    http.close()
