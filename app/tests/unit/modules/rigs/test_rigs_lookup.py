"""Unit tests for the /rigs command."""

from unittest.mock import MagicMock

import pytest

from infrastructure.commands import CommandRegistry
from infrastructure.operations import OperationResult, OperationStatus
from integrations.rigs import Rig, RigsClient
from modules.rigs import lookup

RIG = Rig(
    token_id=42,
    name="Rig #42",
    description="A Tableland Rig",
    owner="0xowner",
    image_url="https://img.example/42.png",
    attributes=[("Fleet", "Titans"), ("Color", "Red")],
)


@pytest.fixture
def rigs():
    client = MagicMock(spec=RigsClient)
    client.contract_address = "0xcontract"
    client.get_rig.return_value = OperationResult.success(data=RIG)
    return client


@pytest.mark.unit
def test_build_rig_card():
    card = lookup.build_rig_card(RIG, "https://market.example/", "0xcontract")

    assert card.title == "Rig #42"
    assert card.text == "A Tableland Rig"
    assert card.url == "https://market.example/0xcontract/42"
    assert card.image_url == "https://img.example/42.png"
    assert [(f.title, f.value) for f in card.fields] == [
        ("Owner", "`0xowner`"),
        ("Fleet", "Titans"),
        ("Color", "Red"),
    ]


@pytest.mark.unit
def test_attribute_fields_are_capped():
    rig = Rig(
        token_id=1,
        name="Rig #1",
        attributes=[(f"t{i}", str(i)) for i in range(30)],
    )

    card = lookup.build_rig_card(rig, "https://market.example", "0xc")

    assert len(card.fields) == lookup.MAX_ATTRIBUTE_FIELDS


@pytest.mark.unit
async def test_handler_success(rigs, command_context_factory, responder):
    ctx = command_context_factory("rigs", responder=responder)

    await lookup.handle_rig(ctx, 42, rigs, "https://market.example")

    assert responder.deferred
    assert responder.last.cards[0].title == "Rig #42"
    rigs.get_rig.assert_called_once_with(42)


@pytest.mark.unit
async def test_handler_not_found(rigs, command_context_factory, responder):
    rigs.get_rig.return_value = OperationResult.error(
        OperationStatus.NOT_FOUND, "Rig #9999 not found"
    )
    ctx = command_context_factory("rigs", responder=responder)

    await lookup.handle_rig(ctx, 9999, rigs, "https://market.example")

    assert responder.last.content == "Rig #9999 not found."


@pytest.mark.unit
@pytest.mark.parametrize(
    "failure",
    [
        OperationResult.transient_error("timeout", error_code="TIMEOUT"),
        OperationResult.permanent_error("bad query", error_code="GRAPHQL_ERROR"),
    ],
)
async def test_handler_failure(rigs, command_context_factory, responder, failure):
    rigs.get_rig.return_value = failure
    ctx = command_context_factory("rigs", responder=responder)

    await lookup.handle_rig(ctx, 7, rigs, "https://market.example")

    assert responder.last.content == "Error fetching Rig #7. Please try again."


@pytest.mark.unit
async def test_registered_command_takes_integer_id(
    rigs, command_context_factory, responder
):
    registry = CommandRegistry("test")
    lookup.register(registry, rigs, "https://market.example")
    cmd = registry.get_command("rigs")

    await cmd.handler(command_context_factory("rigs", responder=responder), id=42)

    assert cmd.args[0].min_value == 1
    rigs.get_rig.assert_called_once_with(42)
