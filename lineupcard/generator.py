"""Lineup card generation orchestrator."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .delivery import deliver
from .export import export_card
from .images import load_image
from .models import Card, ImageRole
from .roster import read_roster
from .store import CardStore
from .themes import BackgroundStyle, CustomTheme, NumberPlacement, ThemePreset


def build_custom_theme(
    bg_hex: Optional[str] = None,
    accent_hex: Optional[str] = None,
    text_hex: Optional[str] = None,
    number_hex: Optional[str] = None,
    background_style: Optional[str] = None,
    number_placement: Optional[str] = None,
    photo_panel: bool = True,
) -> CustomTheme:
    """Build a validated custom theme, using the record's defaults for anything not given."""
    defaults = CustomTheme()
    theme = CustomTheme(
        background_hex=bg_hex or defaults.background_hex,
        accent_hex=accent_hex or defaults.accent_hex,
        text_hex=text_hex or defaults.text_hex,
        number_hex=number_hex or defaults.number_hex,
        player_photo_enabled=photo_panel,
        background_style=BackgroundStyle(background_style) if background_style else defaults.background_style,
        number_placement=NumberPlacement(number_placement) if number_placement else defaults.number_placement,
    )
    return theme.validate()


def build_card(
    roster_csv: str,
    title_word: str = "STARTING",
    match_label: str = "",
    manager_name: str = "",
    sponsor_line: str = "",
    theme: str = ThemePreset.MAN_UTD_DARK.value,
    custom_theme: Optional[CustomTheme] = None,
    player_photo: Optional[str] = None,
    background: Optional[str] = None,
    badge1: Optional[str] = None,
    badge2: Optional[str] = None,
) -> Card:
    """Assemble a card from a roster CSV, card text and optional image files."""
    starters, bench = read_roster(roster_csv)
    preset = ThemePreset(theme)
    if custom_theme is not None:
        preset = ThemePreset.CUSTOM
    card = Card(
        title_word=title_word,
        match_label=match_label,
        starters=starters,
        bench=bench,
        manager_name=manager_name,
        sponsor_line=sponsor_line,
        theme_preset=preset,
        custom_theme=custom_theme,
    )
    for role, path in (
        (ImageRole.PLAYER, player_photo),
        (ImageRole.BACKGROUND, background),
        (ImageRole.BADGE1, badge1),
        (ImageRole.BADGE2, badge2),
    ):
        if path:
            card = card.with_image(role, load_image(path))
    return card


def default_output_path(source_path: str) -> Path:
    """``output/<source name>.png`` under the repository root."""
    repo_root = Path(__file__).resolve().parents[1]
    output_dir = repo_root / "output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir / f"{Path(source_path).stem}.png"


def main(
    roster_csv: Optional[str],
    output_path: Optional[str] = None,
    store_path: Optional[str] = None,
    from_store: Optional[str] = None,
    card_id: Optional[str] = None,
    dpi: int = 300,
    **card_options,
) -> str:
    """Render one card to ``output_path`` and return the written path.

    The card comes either from ``roster_csv`` plus ``card_options`` (see
    ``build_card``) or, with ``from_store`` and ``card_id``, from a saved
    card store. ``store_path`` saves the rendered card into a store.
    """
    logger = logging.getLogger(__name__)

    if from_store:
        store = CardStore(from_store).load()
        card = store.get(card_id) if card_id else (store.cards[0] if store.cards else None)
        if card is None:
            raise KeyError(f"Card {card_id or '(newest)'} not found in {from_store}")
        source = from_store
    elif roster_csv:
        card = build_card(roster_csv, **card_options)
        source = roster_csv
    else:
        raise ValueError("Either a roster CSV or a card store is required")

    if not output_path:
        output_path = str(default_output_path(source))

    image = export_card(card)
    written = deliver(image, output_path, dpi=dpi)

    if store_path:
        CardStore(store_path).load().save(card)
        logger.info("Saved card %s to store %s", card.id, store_path)

    logger.info(
        "🎉 Lineup card complete!\n\n"
        "📥 Input: %s\n"
        "📤 Output: %s\n"
        "🔢 Title: %s %s\n"
        "👕 Starters: %d\n"
        "🪑 Bench: %d",
        source,
        written,
        card.title_word.upper(),
        card.roman_numeral,
        len(card.starters),
        len(card.bench),
    )
    return written
