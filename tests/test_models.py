import random
from datetime import datetime, timezone

import pytest

from lineupcard.models import (
    Card,
    ImageRole,
    Player,
    RasterImage,
    add_bench,
    add_starter,
    card_from_dict,
    card_to_dict,
    move_bench,
    move_starter,
    remove_bench,
    remove_starter,
    toggle_bench_captain,
    toggle_starter_captain,
)
from lineupcard.themes import CustomTheme, ThemePreset


def _captains(players):
    return [p for p in players if p.is_captain]


class TestCaptains:
    def test_toggle_sets_and_clears(self, make_card):
        card = make_card(starters=11)
        target = card.starters[3].id
        card = toggle_starter_captain(card, target)
        assert [p.id for p in _captains(card.starters)] == [target]
        card = toggle_starter_captain(card, target)
        assert _captains(card.starters) == []

    def test_new_captain_replaces_old(self, make_card):
        card = make_card(starters=11, starter_captain=0)
        card = toggle_starter_captain(card, card.starters[5].id)
        assert [p.number for p in _captains(card.starters)] == [6]

    def test_random_sequences_keep_one_per_list(self, make_card):
        rng = random.Random(7)
        card = make_card(starters=11, bench=7)
        for _ in range(200):
            if rng.random() < 0.5:
                before = card.bench
                card = toggle_starter_captain(card, rng.choice(card.starters).id)
                assert card.bench == before
            else:
                before = card.starters
                card = toggle_bench_captain(card, rng.choice(card.bench).id)
                assert card.starters == before
            assert len(_captains(card.starters)) <= 1
            assert len(_captains(card.bench)) <= 1

    def test_bench_toggle_never_sets_starter_captain(self, make_card):
        card = make_card(starters=11, bench=5)
        card = toggle_bench_captain(card, card.bench[2].id)
        assert _captains(card.starters) == []
        assert card.bench[2].is_captain


def test_add_players_numbering():
    card = Card()
    card = add_starter(card)
    card = add_starter(card, "SHAW")
    assert [p.number for p in card.starters] == [1, 2]
    card = add_bench(card)
    card = add_bench(card)
    assert [p.number for p in card.bench] == [12, 13]


class TestRemoveAndMove:
    def test_remove_keeps_order(self, make_card):
        card = make_card(starters=5, bench=3)
        removed = remove_starter(card, card.starters[1].id)
        assert [p.surname for p in removed.starters] == [card.starters[i].surname for i in (0, 2, 3, 4)]
        assert removed.bench == card.bench
        assert removed.roman_numeral == "IV"

    def test_remove_bench(self, make_card):
        card = make_card(bench=3)
        removed = remove_bench(card, card.bench[0].id)
        assert [p.number for p in removed.bench] == [13, 14]
        assert removed.starters == card.starters

    def test_remove_unknown_player(self, make_card):
        with pytest.raises(KeyError):
            remove_starter(make_card(), "missing")

    def test_move_down_and_up(self, make_card):
        card = make_card(starters=4)
        numbers = [p.number for p in move_starter(card, 0, 3).starters]
        assert numbers == [2, 3, 4, 1]
        numbers = [p.number for p in move_starter(card, 3, 1).starters]
        assert numbers == [1, 4, 2, 3]

    def test_moved_captain_keeps_flag(self, make_card):
        card = make_card(bench=5, bench_captain=4)
        moved = move_bench(card, 4, 0)
        assert moved.bench[0].is_captain
        assert moved.bench[0].id == card.bench[4].id
        assert len(_captains(moved.bench)) == 1
        assert moved.starters == card.starters

    def test_move_out_of_range(self, make_card):
        card = make_card(starters=3)
        with pytest.raises(IndexError):
            move_starter(card, 5, 0)
        with pytest.raises(IndexError):
            move_starter(card, 0, 3)

    def test_input_card_is_unchanged(self, make_card):
        card = make_card(starters=3)
        move_starter(card, 0, 2)
        remove_starter(card, card.starters[0].id)
        assert [p.number for p in card.starters] == [1, 2, 3]


def test_card_is_not_mutated_by_helpers(make_card):
    card = make_card(starters=3)
    toggle_starter_captain(card, card.starters[0].id)
    add_starter(card)
    assert len(card.starters) == 3
    assert _captains(card.starters) == []


def test_roman_numeral(make_card):
    assert make_card(starters=11).roman_numeral == "XI"
    assert make_card(starters=7).roman_numeral == "VII"
    assert make_card(starters=0).roman_numeral == "XI"


def test_theme_ref():
    custom = CustomTheme(accent_hex="00FF00")
    assert Card(theme_preset=ThemePreset.CUSTOM, custom_theme=custom).theme_ref == custom
    assert Card(theme_preset=ThemePreset.CUSTOM).theme_ref is ThemePreset.CUSTOM
    assert Card(theme_preset=ThemePreset.LIVERPOOL, custom_theme=custom).theme_ref is ThemePreset.LIVERPOOL


class TestRasterImage:
    def test_to_pil(self, solid_image):
        img = solid_image((0, 255, 0, 255), (4, 3)).to_pil()
        assert img.size == (4, 3)
        assert img.getpixel((1, 1)) == (0, 255, 0, 255)

    def test_undecodable_buffer(self):
        with pytest.raises(ValueError):
            RasterImage(width=10, height=10, pixels=b"nope").to_pil()

    @pytest.mark.parametrize("extra", [1, 999])
    def test_surplus_bytes_rejected(self, extra):
        with pytest.raises(ValueError, match="expected 400"):
            RasterImage(width=10, height=10, pixels=b"\xff" * (400 + extra)).to_pil()

    def test_zero_size(self):
        with pytest.raises(ValueError):
            RasterImage(width=0, height=10, pixels=b"").to_pil()


def test_image_roles(make_card, solid_image):
    badge = solid_image()
    card = make_card().with_image(ImageRole.BADGE2, badge)
    assert card.badge2 == badge
    assert card.image("badge2") == badge
    assert card.image(ImageRole.PLAYER) is None


class TestSerialization:
    def test_round_trip(self, make_card, solid_image):
        card = make_card(
            starters=11, bench=7, starter_captain=9, bench_captain=1,
            preset=ThemePreset.CUSTOM,
            custom_theme=CustomTheme(background_hex="123456"),
            match_label="MUN v LIV", manager_name="Amorim", sponsor_line="SNAPDRAGON",
            player_photo=solid_image(), badge1=solid_image((0, 0, 255, 255), (8, 8)),
            created_at=datetime(2024, 3, 17, 15, 30, tzinfo=timezone.utc),
        )
        assert card_from_dict(card_to_dict(card)) == card

    def test_dict_uses_stable_tags(self, make_card):
        data = card_to_dict(make_card(preset=ThemePreset.REAL_MADRID))
        assert data["themePreset"] == "realMadrid"
        assert data["customTheme"] is None
        assert data["playerImage"] is None

    def test_unknown_preset_rejected(self):
        with pytest.raises(ValueError):
            card_from_dict({"themePreset": "arsenal"})

    def test_player_from_dict(self):
        p = Player.from_dict({"number": "7", "surname": "MOUNT"})
        assert p.number == 7 and not p.is_captain and p.id
