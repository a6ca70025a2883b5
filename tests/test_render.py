from __future__ import annotations

import itertools

import pytest

from fbhalve.encoder import encode
from fbhalve.render import Quadrant2x2

from .helpers import FULL, NBSP


def test_empty():
    assert Quadrant2x2().render([]) == ""


@pytest.mark.parametrize("bits", list(itertools.product((False, True), repeat=4)))
def test_matches_encoder(bits: tuple[bool, bool, bool, bool]):
    upper_left, lower_left, upper_right, lower_right = bits
    grid = [[upper_left, upper_right], [lower_left, lower_right]]
    upper = b"".join(FULL if p else NBSP for p in grid[0])
    lower = b"".join(FULL if p else NBSP for p in grid[1])
    assert Quadrant2x2().render(grid) + "\n" == encode(upper, lower).decode("utf-8")


def test_odd_height():
    assert Quadrant2x2().render([[True, True], [True, False], [False, True]]) == "▛\n▝"


def test_odd_width():
    assert Quadrant2x2().render([[True, True, True], [False, False, True]]) == "▀▌"


def test_invert():
    assert Quadrant2x2(invert=True).render([[True, True], [True, False]]) == "▗"
    assert Quadrant2x2(invert=True).render([[False, False]]) == "▀"
