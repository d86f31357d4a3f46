"""Credit card validation endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from nutricard.api.decoding import read_json_object
from nutricard.api.models import CardInfo

if TYPE_CHECKING:
    from nutricard.containers import AppContainer

router = APIRouter(tags=["cards"])


@router.api_route("/validateCreditCard", methods=["GET", "POST"])
async def validate_card(request: Request) -> bool:
    """Return whether the card number passes the Luhn checksum."""
    container: AppContainer = request.app.state.container
    card_info = CardInfo.model_validate(await read_json_object(request))
    return container.card_validation_service.validate(card_info.card_number)
