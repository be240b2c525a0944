"""Card and player values plus their JSON-friendly serialization."""
from __future__ import annotations

import base64
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from PIL import Image

from .roman import to_roman
from .themes import CustomTheme, ThemePreset, ThemeRef


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Player:
    number: int = 1
    surname: str = ""
    is_captain: bool = False
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "number": self.number, "surname": self.surname, "isCaptain": self.is_captain}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        return cls(
            number=int(data["number"]),
            surname=str(data.get("surname", "")),
            is_captain=bool(data.get("isCaptain", False)),
            id=str(data.get("id") or _new_id()),
        )


@dataclass(frozen=True)
class RasterImage:
    """An already-decoded pixel buffer handed to the engine."""

    width: int
    height: int
    pixels: bytes = field(repr=False)
    mode: str = "RGBA"

    @property
    def aspect(self) -> float:
        return self.width / max(self.height, 1)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(width=image.width, height=image.height, pixels=image.tobytes(), mode="RGBA")

    def to_pil(self) -> Image.Image:
        """Rebuild a Pillow image; raises ``ValueError`` if the buffer is unusable."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid image size {self.width}x{self.height}")
        # frombytes ignores trailing bytes, so check the length ourselves
        expected = len(Image.new(self.mode, (self.width, 1)).tobytes()) * self.height
        if len(self.pixels) != expected:
            raise ValueError(
                f"Pixel buffer holds {len(self.pixels)} bytes, expected {expected} for "
                f"{self.width}x{self.height} {self.mode}"
            )
        image = Image.frombytes(self.mode, (self.width, self.height), self.pixels)
        return image if image.mode == "RGBA" else image.convert("RGBA")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "mode": self.mode,
            "pixels": base64.b64encode(self.pixels).decode("ascii"),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RasterImage":
        return cls(
            width=int(data["width"]),
            height=int(data["height"]),
            pixels=base64.b64decode(data["pixels"]),
            mode=str(data.get("mode", "RGBA")),
        )


class ImageRole(str, Enum):
    PLAYER = "player"
    BACKGROUND = "background"
    BADGE1 = "badge1"
    BADGE2 = "badge2"


_IMAGE_FIELDS = {
    ImageRole.PLAYER: "player_photo",
    ImageRole.BACKGROUND: "background_photo",
    ImageRole.BADGE1: "badge1",
    ImageRole.BADGE2: "badge2",
}


@dataclass(frozen=True)
class Card:
    title_word: str = "STARTING"
    match_label: str = ""
    starters: Tuple[Player, ...] = ()
    bench: Tuple[Player, ...] = ()
    manager_name: str = ""
    sponsor_line: str = ""
    theme_preset: ThemePreset = ThemePreset.MAN_UTD_DARK
    custom_theme: Optional[CustomTheme] = None
    player_photo: Optional[RasterImage] = None
    background_photo: Optional[RasterImage] = None
    badge1: Optional[RasterImage] = None
    badge2: Optional[RasterImage] = None
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        object.__setattr__(self, "starters", tuple(self.starters))
        object.__setattr__(self, "bench", tuple(self.bench))

    @property
    def roman_numeral(self) -> str:
        return to_roman(len(self.starters))

    @property
    def theme_ref(self) -> ThemeRef:
        if self.theme_preset is ThemePreset.CUSTOM and self.custom_theme is not None:
            return self.custom_theme
        return self.theme_preset

    def image(self, role: ImageRole) -> Optional[RasterImage]:
        return getattr(self, _IMAGE_FIELDS[ImageRole(role)])

    def with_image(self, role: ImageRole, image: Optional[RasterImage]) -> "Card":
        return replace(self, **{_IMAGE_FIELDS[ImageRole(role)]: image})


# Editing helpers. Cards are immutable; each returns a new card.

def add_starter(card: Card, surname: str = "") -> Card:
    number = card.starters[-1].number + 1 if card.starters else 1
    return replace(card, starters=card.starters + (Player(number=number, surname=surname),))


def add_bench(card: Card, surname: str = "") -> Card:
    number = card.bench[-1].number + 1 if card.bench else 12
    return replace(card, bench=card.bench + (Player(number=number, surname=surname),))


def _without(players: Tuple[Player, ...], player_id: str) -> Tuple[Player, ...]:
    kept = tuple(p for p in players if p.id != player_id)
    if len(kept) == len(players):
        raise KeyError(f"No player with id {player_id}")
    return kept


def _moved(players: Tuple[Player, ...], from_index: int, to_index: int) -> Tuple[Player, ...]:
    """Move one player so it ends up at ``to_index``; everyone else keeps their order."""
    order = list(players)
    player = order.pop(from_index)
    if not 0 <= to_index <= len(order):
        raise IndexError(f"Cannot move player to position {to_index} of {len(players)}")
    order.insert(to_index, player)
    return tuple(order)


def remove_starter(card: Card, player_id: str) -> Card:
    return replace(card, starters=_without(card.starters, player_id))


def remove_bench(card: Card, player_id: str) -> Card:
    return replace(card, bench=_without(card.bench, player_id))


def move_starter(card: Card, from_index: int, to_index: int) -> Card:
    return replace(card, starters=_moved(card.starters, from_index, to_index))


def move_bench(card: Card, from_index: int, to_index: int) -> Card:
    return replace(card, bench=_moved(card.bench, from_index, to_index))


def toggle_captain(players: Tuple[Player, ...], player_id: str) -> Tuple[Player, ...]:
    """Flip ``player_id``'s captain flag and clear it on everyone else in the list."""
    return tuple(
        replace(p, is_captain=(not p.is_captain) if p.id == player_id else False)
        for p in players
    )


def toggle_starter_captain(card: Card, player_id: str) -> Card:
    return replace(card, starters=toggle_captain(card.starters, player_id))


def toggle_bench_captain(card: Card, player_id: str) -> Card:
    return replace(card, bench=toggle_captain(card.bench, player_id))


def card_to_dict(card: Card) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": card.id,
        "titleWord": card.title_word,
        "matchLabel": card.match_label,
        "starters": [p.to_dict() for p in card.starters],
        "bench": [p.to_dict() for p in card.bench],
        "managerName": card.manager_name,
        "sponsorLine": card.sponsor_line,
        "themePreset": card.theme_preset.value,
        "customTheme": card.custom_theme.to_dict() if card.custom_theme else None,
        "createdAt": card.created_at.isoformat(),
    }
    for role in ImageRole:
        image = card.image(role)
        data[f"{role.value}Image"] = image.to_dict() if image else None
    return data


def card_from_dict(data: Dict[str, Any]) -> Card:
    """Build a card from its dict form; unknown tags and bad colors raise ``ValueError``."""
    custom = data.get("customTheme")
    created = data.get("createdAt")
    images = {}
    for role in ImageRole:
        raw = data.get(f"{role.value}Image")
        images[_IMAGE_FIELDS[role]] = RasterImage.from_dict(raw) if raw else None
    return Card(
        id=str(data.get("id") or _new_id()),
        title_word=str(data.get("titleWord", "STARTING")),
        match_label=str(data.get("matchLabel", "")),
        starters=tuple(Player.from_dict(p) for p in data.get("starters", [])),
        bench=tuple(Player.from_dict(p) for p in data.get("bench", [])),
        manager_name=str(data.get("managerName", "")),
        sponsor_line=str(data.get("sponsorLine", "")),
        theme_preset=ThemePreset(data.get("themePreset", ThemePreset.MAN_UTD_DARK.value)),
        custom_theme=CustomTheme.from_dict(custom) if custom else None,
        created_at=datetime.fromisoformat(created) if created else _now(),
        **images,
    )
