import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.clients.http import HttpClient  # noqa: E402
from infrastructure.commands.context import CommandContext  # noqa: E402
from infrastructure.commands.responses.models import Reply  # noqa: E402
from integrations.sqlparser import SqlParser  # noqa: E402


class RecordingResponder:
    """ResponseChannel that keeps every reply in memory."""

    def __init__(self, fail_on_send: bool = False):
        self.deferred = False
        self.defer_ephemeral: Optional[bool] = None
        self.replies: List[Reply] = []
        self.fail_on_send = fail_on_send

    def is_acknowledged(self) -> bool:
        return self.deferred or bool(self.replies)

    async def defer(self, ephemeral: bool = False) -> None:
        self.deferred = True
        self.defer_ephemeral = ephemeral

    async def send(self, reply: Reply) -> None:
        if self.fail_on_send:
            raise RuntimeError("platform unavailable")
        self.replies.append(reply)

    @property
    def last(self) -> Reply:
        return self.replies[-1]


@pytest.fixture
def responder():
    return RecordingResponder()


@pytest.fixture
def failing_responder():
    """Responder whose send() raises, as when Discord rejects the reply."""
    return RecordingResponder(fail_on_send=True)


@pytest.fixture
def command_context_factory():
    """Factory for creating CommandContext instances for testing.

    Returns:
        Callable that creates a CommandContext with default or custom values
    """

    def _factory(
        command_name: str = "parse",
        options: Optional[Dict[str, Any]] = None,
        responder=None,
        user_id: str = "1111",
        channel_id: str = "2222",
        guild_id: Optional[str] = "3333",
    ) -> CommandContext:
        ctx = CommandContext(
            command_name=command_name,
            platform="discord",
            user_id=user_id,
            channel_id=channel_id,
            guild_id=guild_id,
            options=options or {},
        )
        if responder is not None:
            ctx._responder = responder
        return ctx

    return _factory


@pytest.fixture(scope="session")
def sql_parser():
    """Initialized SqlParser shared by the whole session (it is stateless)."""
    return SqlParser(dialect="sqlite").initialize()


@pytest.fixture
def mock_http_client():
    """HttpClient with get/post replaced by mocks."""
    client = MagicMock(spec=HttpClient)
    return client
