"""Nutri-Score endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from nutricard.api.decoding import read_json_object
from nutricard.api.models import NutritionalDataRequest, NutritionalScoreResponse

if TYPE_CHECKING:
    from nutricard.containers import AppContainer

router = APIRouter(tags=["nutriscore"])


@router.api_route(
    "/getNutritionalScore",
    methods=["GET", "POST"],
    response_model=NutritionalScoreResponse,
)
async def get_nutritional_score(request: Request) -> NutritionalScoreResponse:
    """Calculate the Nutri-Score for the posted nutritional data."""
    container: AppContainer = request.app.state.container
    try:
        payload = NutritionalDataRequest.model_validate(
            await read_json_object(request)
        )
    except ValidationError as exc:
        raise RequestValidationError(
            exc.errors(include_url=False, include_context=False)
        ) from exc
    score = container.nutri_score_service.score(payload.to_domain())
    return NutritionalScoreResponse.from_domain(score)
