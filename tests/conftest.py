import sys
from pathlib import Path

import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lineupcard.models import Card, Player, RasterImage  # noqa: E402
from lineupcard.themes import ThemePreset  # noqa: E402

SURNAMES = [
    "ONANA", "DALOT", "VARANE", "MARTINEZ", "SHAW", "CASEMIRO", "MAINOO",
    "FERNANDES", "GARNACHO", "RASHFORD", "HOJLUND", "BAYINDIR", "EVANS",
    "LINDELOF", "MAGUIRE", "MOUNT", "AMRABAT", "ERIKSEN", "ANTONY", "MCTOMINAY",
]


def solid_raster(color=(255, 0, 0, 255), size=(40, 60)) -> RasterImage:
    return RasterImage.from_pil(Image.new("RGBA", size, color))


def make_players(count, start=1, captain_index=None):
    return tuple(
        Player(number=start + i, surname=SURNAMES[i % len(SURNAMES)], is_captain=(i == captain_index))
        for i in range(count)
    )


@pytest.fixture()
def solid_image():
    return solid_raster


@pytest.fixture()
def make_card():
    def _make(starters=11, bench=0, preset=ThemePreset.MAN_UTD_DARK, starter_captain=None, bench_captain=None, **kwargs):
        return Card(
            starters=make_players(starters, captain_index=starter_captain),
            bench=make_players(bench, start=12, captain_index=bench_captain),
            theme_preset=preset,
            **kwargs,
        )
    return _make
