"""Portrait rendering and character catalog endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel

from packages.portrait_core.catalog import list_characters
from packages.portrait_core.render.assets import AssetLoadError
from packages.portrait_core.render.builder import PortraitRenderError, render_portrait_png
from packages.portrait_core.validation import PortraitRequestError, parse_portrait_request

logger = logging.getLogger("portrait_api.portraits")

router = APIRouter(tags=["portraits"])

PORTRAIT_PARAMS = ("char", "gear_level", "relic_level", "zetas", "omicrons", "level")


class CharacterSummary(BaseModel):
    character_id: str
    name: str
    affiliation: str
    max_zetas: int
    max_omicrons: int


class CharacterListResponse(BaseModel):
    count: int
    characters: list[CharacterSummary]


def _first_values(request: Request) -> dict[str, str]:
    params: dict[str, str] = {}
    for key in PORTRAIT_PARAMS:
        values = request.query_params.getlist(key)
        if values:
            params[key] = values[0]
    return params


@router.get("/create", response_class=Response)
def create_portrait(request: Request) -> Response:
    params = _first_values(request)
    logger.info("[CREATE] Portrait request: params=%s", params)

    try:
        portrait, character = parse_portrait_request(params)
    except PortraitRequestError as e:
        logger.warning("[CREATE] Rejected portrait request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    try:
        png = render_portrait_png(portrait, character)
    except (AssetLoadError, PortraitRenderError) as e:
        logger.error("[CREATE] Failed to create portrait for char='%s': %s", character.character_id, e)
        raise HTTPException(status_code=500, detail=f"Failed to create portrait: {e}")

    logger.info(
        "[CREATE] Portrait rendered: char='%s', gear=%d, relic=%d, bytes=%d",
        character.character_id,
        portrait.gear_level,
        portrait.relic_level,
        len(png),
    )
    return Response(content=png, media_type="image/png")


@router.get("/characters", response_model=CharacterListResponse)
def get_characters() -> dict[str, Any]:
    characters = [c.as_dict() for c in list_characters()]
    return {"count": len(characters), "characters": characters}
