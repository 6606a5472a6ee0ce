"""``/rigs-stats``: Tableland Rigs collection stats from OpenSea."""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from core.logging import get_module_logger
from infrastructure.commands import Card, CommandContext, CommandRegistry
from infrastructure.platforms.formatters.discord import BLANK, italic
from integrations.opensea import OpenSeaClient
from modules.branding import tablebot_footer

logger = get_module_logger()

STATS_ERROR_MESSAGE = "Error fetching Rigs stats. Please try again."


@dataclass(frozen=True)
class PeriodStats:
    volume: float
    change: float
    sales: int
    price: float


@dataclass(frozen=True)
class TotalStats:
    volume: float
    sales: int
    owners: int
    price: float
    market_cap: float
    floor: float


@dataclass(frozen=True)
class RigsStats:
    """Collection stats grouped the way the card shows them."""

    total: TotalStats
    monthly: PeriodStats
    weekly: PeriodStats

    @classmethod
    def from_opensea(cls, stats: Mapping[str, Any]) -> "RigsStats":
        """Reshape an OpenSea ``stats`` object.

        Missing or null numbers count as zero; floor price is null for a
        collection with no listings.
        """
        return cls(
            total=TotalStats(
                volume=_number(stats, "total_volume"),
                sales=int(_number(stats, "total_sales")),
                owners=int(_number(stats, "num_owners")),
                price=_number(stats, "average_price"),
                market_cap=_number(stats, "market_cap"),
                floor=_number(stats, "floor_price"),
            ),
            monthly=PeriodStats(
                volume=_number(stats, "thirty_day_volume"),
                change=_number(stats, "thirty_day_change"),
                sales=int(_number(stats, "thirty_day_sales")),
                price=_number(stats, "thirty_day_average_price"),
            ),
            weekly=PeriodStats(
                volume=_number(stats, "seven_day_volume"),
                change=_number(stats, "seven_day_change"),
                sales=int(_number(stats, "seven_day_sales")),
                price=_number(stats, "seven_day_average_price"),
            ),
        )


def _number(stats: Mapping[str, Any], key: str) -> float:
    value = stats.get(key)
    return float(value) if value is not None else 0.0


def eth(amount: float, decimals: int = 2) -> str:
    return f"{amount:.{decimals}f} ETH"


def _add_period(card: Card, heading: str, period: PeriodStats) -> None:
    card.add_field(BLANK, italic(heading))
    card.add_field("Volume", eth(period.volume), short=True)
    card.add_field("Change", eth(period.change), short=True)
    card.add_field("# Sales", str(period.sales), short=True)
    card.add_field("Avg. Price", eth(period.price), short=True)


def build_stats_card(stats: RigsStats, now: Optional[datetime] = None) -> Card:
    card = Card(
        title="Rigs Collection Stats",
        footer=tablebot_footer(),
        timestamp=now or datetime.now(timezone.utc),
    )
    card.add_field(BLANK, italic("Total, all-time stats & trends"))
    card.add_field("Volume", eth(stats.total.volume), short=True)
    card.add_field("Floor Price", eth(stats.total.floor), short=True)
    card.add_field("Avg. Price", eth(stats.total.price), short=True)
    card.add_field("# Sales", str(stats.total.sales), short=True)
    card.add_field("# Owners", str(stats.total.owners), short=True)
    card.add_field("Market Cap", eth(stats.total.market_cap, decimals=0), short=True)
    _add_period(card, "Monthly stats & trends", stats.monthly)
    _add_period(card, "Weekly stats & trends", stats.weekly)
    return card


async def handle_rigs_stats(ctx: CommandContext, opensea: OpenSeaClient):
    await ctx.defer()

    result = await asyncio.to_thread(opensea.get_collection_stats)
    if not result.is_success:
        logger.warning(
            "rigs_stats_unavailable",
            status=result.status.value,
            error=result.message,
            correlation_id=ctx.correlation_id,
        )
        await ctx.respond(content=STATS_ERROR_MESSAGE)
        return

    stats = RigsStats.from_opensea(result.data)
    await ctx.respond(cards=[build_stats_card(stats)])


def register(registry: CommandRegistry, opensea: OpenSeaClient) -> None:
    async def rigs_stats(ctx: CommandContext):
        await handle_rigs_stats(ctx, opensea)

    registry.register(
        "rigs-stats",
        rigs_stats,
        description="Returns Tableland Rigs collection stats",
    )
