import pytest

from lineupcard.themes import (
    PRESETS,
    BackgroundStyle,
    Color,
    CustomTheme,
    ListAlignment,
    NumberPlacement,
    ThemePreset,
    parse_hex,
    resolve,
)


class TestParseHex:
    def test_valid(self):
        assert parse_hex("CC0000") == Color(204, 0, 0, 255)
        assert parse_hex("#0a0a0a") == Color(10, 10, 10, 255)

    @pytest.mark.parametrize("bad", ["", "FFF", "CC000", "CC00000", "GG0000", "#12345", None, 123456])
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            parse_hex(bad)


def test_with_opacity():
    assert Color(255, 255, 255).with_opacity(0.65) == Color(255, 255, 255, 166)
    assert Color(1, 2, 3).with_opacity(2.0).a == 255


def test_preset_tags_are_stable():
    assert [p.value for p in ThemePreset] == [
        "manUtdDark", "manUtdAway", "liverpool", "norwich", "realMadrid", "barcelona", "custom",
    ]
    assert set(PRESETS) == set(ThemePreset)


def test_man_utd_dark():
    theme = resolve(ThemePreset.MAN_UTD_DARK)
    assert theme.background == Color(10, 10, 10)
    assert theme.accent == Color(204, 0, 0)
    assert theme.number == Color(255, 255, 255, 166)
    assert theme.background_style is BackgroundStyle.SOLID
    assert theme.number_placement is NumberPlacement.RIGHT_DECIMAL
    assert theme.list_alignment is ListAlignment.TRAILING
    assert theme.show_left_panel
    assert theme.left_panel_width == pytest.approx(0.48)


def test_liverpool_has_no_panel():
    theme = resolve(ThemePreset.LIVERPOOL)
    assert not theme.show_left_panel
    assert theme.left_panel_width == 0.0
    assert theme.list_alignment is ListAlignment.LEADING


def test_real_madrid_uses_blurred_photo():
    assert resolve(ThemePreset.REAL_MADRID).background_style is BackgroundStyle.BLURRED_PHOTO


def test_resolve_accepts_tag_strings():
    assert resolve("norwich") == resolve(ThemePreset.NORWICH)


def test_unknown_preset_rejected():
    with pytest.raises(ValueError):
        ThemePreset("chelsea")


def test_all_panel_widths_in_range():
    for theme in PRESETS.values():
        assert 0.0 <= theme.left_panel_width <= 1.0


class TestCustomTheme:
    def test_defaults(self):
        theme = CustomTheme().as_theme()
        assert theme.background == Color(10, 10, 10)
        assert theme.subtext == Color(255, 255, 255, 191)
        assert theme.list_alignment is ListAlignment.TRAILING
        assert theme.left_panel_width == pytest.approx(0.45)

    def test_left_integer_aligns_leading(self):
        theme = CustomTheme(number_placement=NumberPlacement.LEFT_INTEGER).as_theme()
        assert theme.list_alignment is ListAlignment.LEADING

    def test_photo_disabled_collapses_panel(self):
        theme = CustomTheme(player_photo_enabled=False).as_theme()
        assert not theme.show_left_panel
        assert theme.left_panel_width == 0.0

    def test_resolve_custom(self):
        custom = CustomTheme(background_hex="112233", background_style=BackgroundStyle.GRADIENT)
        theme = resolve(custom)
        assert theme.background == Color(0x11, 0x22, 0x33)
        assert theme.background_style is BackgroundStyle.GRADIENT

    def test_round_trip(self):
        custom = CustomTheme("112233", "ABCDEF", "000000", "FF00FF", False,
                             BackgroundStyle.BLURRED_PHOTO, NumberPlacement.LEFT_INTEGER)
        data = custom.to_dict()
        assert data["backgroundStyle"] == "blurredPhoto"
        assert CustomTheme.from_dict(data) == custom

    def test_from_dict_rejects_bad_hex(self):
        with pytest.raises(ValueError):
            CustomTheme.from_dict({"accentHex": "12345Z"})

    def test_from_dict_rejects_unknown_style(self):
        with pytest.raises(ValueError):
            CustomTheme.from_dict({"backgroundStyle": "plaid"})
