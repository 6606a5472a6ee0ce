"""Footer shared by every TableBot card."""

from infrastructure.commands.responses.models import Footer

FOOTER_TEXT = "❤️ TableBot"
FOOTER_ICON_URL = (
    "https://bafkreihrg4iddyor2ei6mxxdy6hqnjsmquzcnllvoqndfb636i5s4yinma"
    ".ipfs.nftstorage.link/"
)


def tablebot_footer() -> Footer:
    return Footer(text=FOOTER_TEXT, icon_url=FOOTER_ICON_URL)
