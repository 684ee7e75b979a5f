"""Static catalog of characters the portrait renderer supports."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Character:
    character_id: str
    name: str
    affiliation: str
    image_file: str
    max_zetas: int
    max_omicrons: int

    def as_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out.pop("image_file", None)
        return out


SUPPORTED_CHARACTERS: dict[str, Character] = {
    "darth_vader": Character(
        character_id="darth_vader",
        name="Darth Vader",
        affiliation="dark_side",
        image_file="darth_vader.png",
        max_zetas=3,
        max_omicrons=1,
    ),
}


def get_character(character_id: str) -> Optional[Character]:
    return SUPPORTED_CHARACTERS.get(str(character_id or ""))


def list_characters() -> list[Character]:
    return sorted(SUPPORTED_CHARACTERS.values(), key=lambda c: c.character_id)
