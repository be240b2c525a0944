import logging

import pytest

from lineupcard.export import EXPORT_SIZE, RenderFailed, export_card, render_card
from lineupcard.layout import compose
from lineupcard.models import ImageRole, RasterImage
from lineupcard.themes import BackgroundStyle, CustomTheme, ThemePreset, resolve


def test_scenario_default_lineup(make_card):
    card = make_card(starters=11)
    image = export_card(card)
    assert image.size == (1080, 1350)
    assert EXPORT_SIZE == (1080, 1350)
    assert image.getpixel((10, 600)) == (10, 10, 10, 255)
    assert image.getpixel((1070, 600)) == (10, 10, 10, 255)
    numerals = [p for p in compose(card, resolve(card.theme_ref), 1080, 1350) if p.tag == "numeral"]
    assert numerals[0].text == "XI"


def test_photo_panel_is_painted(make_card, solid_image):
    card = make_card(player_photo=solid_image())
    image = export_card(card)
    assert image.getpixel((5, 600)) == (255, 0, 0, 255)
    # Past the fade the background shows through
    assert image.getpixel((1070, 600)) == (10, 10, 10, 255)


def test_blurred_background_is_tinted(make_card, solid_image):
    card = make_card(preset=ThemePreset.REAL_MADRID, background_photo=solid_image((0, 255, 0, 255)))
    r, g, b, a = export_card(card).getpixel((1070, 600))
    # Green photo under the theme background at 62% opacity
    assert a == 255
    assert r == pytest.approx(round(13 * 0.62), abs=2)
    assert g == pytest.approx(round(27 * 0.62 + 255 * 0.38), abs=2)
    assert b == pytest.approx(round(75 * 0.62), abs=2)


def test_custom_gradient_card_renders(make_card):
    custom = CustomTheme(background_style=BackgroundStyle.GRADIENT)
    image = export_card(make_card(preset=ThemePreset.CUSTOM, custom_theme=custom, bench=5))
    assert image.size == (1080, 1350)


def test_preview_sizes(make_card):
    card = make_card(bench=7, starter_captain=0)
    preview = render_card(card, 432, 540)
    assert preview.size == (432, 540)
    assert preview.getpixel((5, 300)) == (10, 10, 10, 255)


def test_corrupt_photo_fails_whole_render(make_card, caplog):
    broken = RasterImage(width=20, height=20, pixels=b"not pixels")
    card = make_card().with_image(ImageRole.PLAYER, broken)
    with caplog.at_level(logging.ERROR, logger="lineupcard.export"):
        with pytest.raises(RenderFailed) as excinfo:
            export_card(card)
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert card.id in str(excinfo.value)
    assert any("Failed to render card" in r.getMessage() for r in caplog.records)


def test_oversized_pixel_buffer_fails_render(make_card):
    padded = RasterImage(width=10, height=10, pixels=b"\xff" * (400 + 999))
    with pytest.raises(RenderFailed) as excinfo:
        export_card(make_card(player_photo=padded))
    assert isinstance(excinfo.value.__cause__, ValueError)
