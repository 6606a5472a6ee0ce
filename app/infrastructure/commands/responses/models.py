"""Platform-agnostic response models for command handlers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class Field:
    """Labeled value shown on a card.

    Attributes:
        title: Field title/label text.
        value: Field value/content text.
        short: Display inline (side-by-side) if True, full-width if False.
    """

    title: str
    value: str
    short: bool = False


@dataclass(frozen=True)
class Author:
    """Card author line, rendered above the title.

    Attributes:
        name: Author text.
        url: Optional link for the author text.
    """

    name: str
    url: Optional[str] = None


@dataclass(frozen=True)
class Footer:
    """Card footer line.

    Attributes:
        text: Footer text.
        icon_url: Optional URL to a small icon shown next to the text.
    """

    text: str
    icon_url: Optional[str] = None


@dataclass
class Card:
    """Platform-agnostic card/embed representation.

    Attributes:
        title: Card title text.
        text: Main card text content.
        url: Optional link attached to the title.
        color: Accent color as a 24-bit integer (e.g. 0x452858).
        author: Optional author line.
        fields: Key-value fields to display.
        footer: Optional footer.
        image_url: Optional URL to card image.
        timestamp: Optional timestamp shown next to the footer.
    """

    title: str
    text: str = ""
    url: Optional[str] = None
    color: Optional[int] = None
    author: Optional[Author] = None
    fields: List[Field] = field(default_factory=list)
    footer: Optional[Footer] = None
    image_url: Optional[str] = None
    timestamp: Optional[datetime] = None

    def add_field(self, title: str, value: str, short: bool = False) -> "Card":
        """Append a field and return the card for chaining."""
        self.fields.append(Field(title=title, value=value, short=short))
        return self


@dataclass(frozen=True)
class Reply:
    """A complete reply to a command invocation.

    Attributes:
        content: Plain text (markdown) content.
        cards: Cards rendered below the content.
        ephemeral: Only visible to the invoking user when True.
    """

    content: Optional[str] = None
    cards: List[Card] = field(default_factory=list)
    ephemeral: bool = False
