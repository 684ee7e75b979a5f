"""Query-parameter validation for portrait requests.

Parameters arrive as raw strings. ``gear_level``, ``relic_level`` and
``level`` are parsed strictly; ``zetas`` and ``omicrons`` fall back to 0 when
they are not integers, so a malformed upgrade count never rejects a request
on its own.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping
import re

from .catalog import Character, get_character


MIN_GEAR_LEVEL = 1
MAX_GEAR_LEVEL = 13
MIN_RELIC_LEVEL = 1
MAX_RELIC_LEVEL = 9
MIN_LEVEL = 1
MAX_LEVEL = 85
DEFAULT_LEVEL = 85

_INT_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class PortraitRequestError(ValueError):
    """Raised when a portrait request fails validation."""


@dataclass(frozen=True)
class PortraitRequest:
    character_id: str
    gear_level: int
    relic_level: int = 0
    zetas: int = 0
    omicrons: int = 0
    level: int = DEFAULT_LEVEL

    @property
    def has_relic(self) -> bool:
        return self.gear_level == MAX_GEAR_LEVEL

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def int_from_query(params: Mapping[str, str], key: str) -> int:
    """Return the integer value of ``key``.

    A missing or empty parameter is 0. Anything else must be a plain
    base-10 integer that fits in 64 bits, otherwise ``ValueError`` names
    the parameter.
    """
    raw = params.get(key)
    if raw is None or raw == "":
        return 0
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"parameter '{key}' should be an integer, got '{raw}'")
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"parameter '{key}' is out of range, got '{raw}'")
    return value


def _lenient_int(params: Mapping[str, str], key: str) -> int:
    try:
        return int_from_query(params, key)
    except ValueError:
        return 0


def _validate_relic_level(params: Mapping[str, str], gear_level: int) -> int:
    try:
        relic_level = int_from_query(params, "relic_level")
        parsed = True
    except ValueError:
        relic_level = 0
        parsed = False

    if gear_level != MAX_GEAR_LEVEL:
        if parsed and relic_level != 0:
            raise PortraitRequestError(
                f"The relic_level should not be provided if gear_level is not {MAX_GEAR_LEVEL}"
            )
        return 0

    if relic_level < MIN_RELIC_LEVEL or relic_level > MAX_RELIC_LEVEL:
        raise PortraitRequestError(
            f"The relic_level must be between {MIN_RELIC_LEVEL} and {MAX_RELIC_LEVEL}"
        )
    return relic_level


def _validate_level(params: Mapping[str, str]) -> int:
    if not params.get("level"):
        return DEFAULT_LEVEL
    try:
        level = int_from_query(params, "level")
    except ValueError:
        level = 0
    if level < MIN_LEVEL or level > MAX_LEVEL:
        raise PortraitRequestError(f"The level must be between {MIN_LEVEL} and {MAX_LEVEL}")
    return level


def parse_portrait_request(params: Mapping[str, str]) -> tuple[PortraitRequest, Character]:
    """Validate raw query parameters and resolve the requested character.

    Checks run in a fixed order and the first failure raises
    ``PortraitRequestError`` with a message suitable for the client.
    """
    character_id = params.get("char") or ""
    character = get_character(character_id)
    if character is None:
        raise PortraitRequestError(f"Character '{character_id}' is not supported by this API")

    try:
        gear_level = int_from_query(params, "gear_level")
    except ValueError:
        gear_level = 0
    if gear_level < MIN_GEAR_LEVEL or gear_level > MAX_GEAR_LEVEL:
        raise PortraitRequestError(
            f"The gear_level must be between {MIN_GEAR_LEVEL} and {MAX_GEAR_LEVEL}"
        )

    relic_level = _validate_relic_level(params, gear_level)

    zetas = _lenient_int(params, "zetas")
    if zetas < 0 or zetas > character.max_zetas:
        raise PortraitRequestError(
            f"The zeta level must be between 0 and {character.max_zetas} for {character.name}"
        )

    omicrons = _lenient_int(params, "omicrons")
    if omicrons < 0 or omicrons > character.max_omicrons:
        raise PortraitRequestError(
            f"The omicron level must be between 0 and {character.max_omicrons} for {character.name}"
        )

    level = _validate_level(params)

    request = PortraitRequest(
        character_id=character.character_id,
        gear_level=gear_level,
        relic_level=relic_level,
        zetas=zetas,
        omicrons=omicrons,
        level=level,
    )
    return request, character
