from __future__ import annotations

from .encoder import classify as classify
from .encoder import encode as encode
from .exceptions import EncodeError as EncodeError
from .exceptions import FBHalveError as FBHalveError
from .exceptions import InvalidCharacterError as InvalidCharacterError
from .exceptions import UnalignedError as UnalignedError
from .glyphs import HALVE_BLOCKS as HALVE_BLOCKS
from .glyphs import Token as Token
from .reader import LinePair as LinePair
from .reader import halve as halve
from .reader import iter_line_pairs as iter_line_pairs
from .render import Quadrant2x2 as Quadrant2x2

__version__: str = "0.1.0"
"""fbhalve 当前版本号"""
