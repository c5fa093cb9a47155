# tests/test_colors.py
# Unit tests for the per-cell stroke colour heuristic
# Ensures branch selection, tie-breaking and channel clamping stay stable
# RELEVANT FILES: python/isosurf/colors.py, python/isosurf/render.py
import math
import re

import pytest

from isosurf.colors import Extrema, cell_color, channel_intensity

_HEX = re.compile(r"^#[0-9a-f]{6}$")


class TestExtrema:
    def test_of_values(self):
        assert Extrema.of([0.5, -2.0, 3.0, 1.0]) == Extrema(-2.0, 3.0)

    def test_of_single(self):
        assert Extrema.of([1.5]) == Extrema(1.5, 1.5)

    def test_of_empty_raises(self):
        with pytest.raises(ValueError):
            Extrema.of([])


def test_red_branch_when_max_dominates():
    color = cell_color(Extrema(-0.1, 0.5), Extrema(-1.0, 1.0))
    expected = int(math.exp(0.5) / math.exp(1.0) * 255)
    assert color == f"#{expected:02x}0000"
    assert color == "#9a0000"


def test_blue_branch_when_min_dominates():
    color = cell_color(Extrema(-0.5, 0.1), Extrema(-1.0, 1.0))
    assert color == "#00009a"


def test_tie_goes_to_blue():
    assert cell_color(Extrema(-0.5, 0.5), Extrema(-1.0, 1.0)).startswith("#0000")


def test_flat_surface_is_full_blue():
    assert cell_color(Extrema(0.0, 0.0), Extrema(0.0, 0.0)) == "#0000ff"


def test_saturates_at_255():
    # cell further from zero than the surface extreme
    assert cell_color(Extrema(0.0, 3.0), Extrema(-1.0, 1.0)) == "#ff0000"
    assert channel_intensity(5.0, 0.0) == 255


@pytest.mark.parametrize(
    "cell,surface",
    [
        (Extrema(-0.2, 0.9), Extrema(-0.2, 1.0)),
        (Extrema(-0.9, 0.1), Extrema(-1.0, 0.4)),
        (Extrema(-0.36, 0.36), Extrema(-0.78, 0.36)),
        (Extrema(0.0, 0.0), Extrema(-0.22, 1.0)),
        (Extrema(-12.0, 0.0), Extrema(-0.5, 0.5)),
    ],
)
def test_color_is_deterministic_and_in_range(cell, surface):
    first = cell_color(cell, surface)
    assert first == cell_color(cell, surface)
    assert _HEX.match(first)
    channel = int(first[1:3], 16) if first[3:] == "0000" else int(first[5:7], 16)
    assert 0 <= channel <= 255


def test_channel_intensity_floor():
    # 255 / e = 93.8...
    assert channel_intensity(0.0, 1.0) == 93
    assert channel_intensity(-1.0, 1.0) == 255


def test_large_heights_do_not_overflow():
    # exp(800) alone is out of float range
    assert channel_intensity(800.0, 800.0) == 255
    assert channel_intensity(-865.05, -865.05) == 255
    assert channel_intensity(700.0, 800.0) == 0
    assert cell_color(Extrema(-900.0, 10.0), Extrema(-900.0, 900.0)) == "#0000ff"
