from __future__ import annotations

import pytest

from .helpers import art


@pytest.fixture
def sample_art() -> bytes:
    return art(
        "##..##",
        "#....#",
        "..##..",
        "..##..",
        "#....#",
    )
