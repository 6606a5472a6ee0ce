"""``/rigs``: show one Tableland Rig."""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from core.logging import get_module_logger
from infrastructure.commands import (
    Argument,
    ArgumentType,
    Card,
    CommandContext,
    CommandRegistry,
)
from infrastructure.operations import OperationStatus
from integrations.rigs import Rig, RigsClient
from modules.branding import tablebot_footer

logger = get_module_logger()

MAX_ATTRIBUTE_FIELDS = 20


def rig_error_message(token_id: int) -> str:
    return f"Error fetching Rig #{token_id}. Please try again."


def rig_not_found_message(token_id: int) -> str:
    return f"Rig #{token_id} not found."


def build_rig_card(
    rig: Rig,
    marketplace_url: str,
    contract_address: str,
    now: Optional[datetime] = None,
) -> Card:
    """Card with the Rig's image, owner and traits."""
    card = Card(
        title=rig.name,
        text=rig.description,
        url=f"{marketplace_url.rstrip('/')}/{contract_address}/{rig.token_id}",
        image_url=rig.image_url,
        footer=tablebot_footer(),
        timestamp=now or datetime.now(timezone.utc),
    )
    if rig.owner:
        card.add_field("Owner", f"`{rig.owner}`")
    for trait, value in rig.attributes[:MAX_ATTRIBUTE_FIELDS]:
        card.add_field(trait, value, short=True)
    return card


async def handle_rig(
    ctx: CommandContext,
    token_id: int,
    rigs: RigsClient,
    marketplace_url: str,
):
    await ctx.defer()

    result = await asyncio.to_thread(rigs.get_rig, token_id)
    if result.status == OperationStatus.NOT_FOUND:
        await ctx.respond(content=rig_not_found_message(token_id))
        return
    if not result.is_success:
        logger.warning(
            "rig_unavailable",
            token_id=token_id,
            status=result.status.value,
            error=result.message,
            correlation_id=ctx.correlation_id,
        )
        await ctx.respond(content=rig_error_message(token_id))
        return

    card = build_rig_card(result.data, marketplace_url, rigs.contract_address)
    await ctx.respond(cards=[card])


def register(
    registry: CommandRegistry, rigs: RigsClient, marketplace_url: str
) -> None:
    async def rig(ctx: CommandContext, id: int):  # pylint: disable=redefined-builtin
        await handle_rig(ctx, id, rigs, marketplace_url)

    registry.register(
        "rigs",
        rig,
        description="Returns a Tableland Rig by its token id",
        args=[
            Argument(
                "id",
                type=ArgumentType.INTEGER,
                description="The Rig's token id",
                min_value=1,
            )
        ],
    )
