"""Response models and formatting helpers for command replies."""

from infrastructure.commands.responses.models import (
    Author,
    Card,
    Field,
    Footer,
    Reply,
)

__all__ = [
    "Author",
    "Card",
    "Field",
    "Footer",
    "Reply",
]
