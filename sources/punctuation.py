# Copyright 2024-2025 David Corbett
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Punctuation and digits.

The two directions are not inverses. The vertical ellipsis and the
vertical colon have no glyphs of their own, so they are encoded with the
Mongolian ellipsis and colon glyphs, which decode to the Mongolian
characters. The ornamental birgas are in the Mongolian Supplement block,
outside the Basic Multilingual Plane, and only occur in legacy text.
"""


from __future__ import annotations


__all__ = [
    'FROM_GLYPH',
    'TO_GLYPH',
    'from_glyph',
    'to_glyph',
]


import types
from typing import Final
from typing import TYPE_CHECKING

from glyphs import Glyph


if TYPE_CHECKING:
    from collections.abc import Mapping
    from collections.abc import Set as AbstractSet


#: The glyph for each convertible punctuation character.
TO_GLYPH: Final[Mapping[int, Glyph]] = types.MappingProxyType({
    0xFE10: Glyph.FULL_WIDTH_COMMA,
    0xFE13: Glyph.COLON,
    0xFE14: Glyph.SEMICOLON,
    0xFE15: Glyph.EXCLAMATION,
    0xFE16: Glyph.QUESTION,
    0xFE19: Glyph.ELLIPSIS,
    0xFE31: Glyph.EM_DASH,
    0xFE32: Glyph.EN_DASH,
    0xFE35: Glyph.LEFT_PARENTHESIS,
    0xFE36: Glyph.RIGHT_PARENTHESIS,
    0xFE39: Glyph.LEFT_TORTOISE_SHELL_BRACKET,
    0xFE3A: Glyph.RIGHT_TORTOISE_SHELL_BRACKET,
    0xFE3D: Glyph.LEFT_DOUBLE_ANGLE_BRACKET,
    0xFE3E: Glyph.RIGHT_DOUBLE_ANGLE_BRACKET,
    0xFE3F: Glyph.LEFT_ANGLE_BRACKET,
    0xFE40: Glyph.RIGHT_ANGLE_BRACKET,
    0xFE43: Glyph.LEFT_WHITE_CORNER_BRACKET,
    0xFE44: Glyph.RIGHT_WHITE_CORNER_BRACKET,
    0x00B7: Glyph.MIDDLE_DOT,
    0x203B: Glyph.REFERENCE_MARK,
    0x2048: Glyph.QUESTION_EXCLAMATION,
    0x2049: Glyph.EXCLAMATION_QUESTION,
    0x00D7: Glyph.X,
    **{0x1800 + i: g for i, g in enumerate([
        Glyph.BIRGA,
        Glyph.ELLIPSIS,
        Glyph.COMMA,
        Glyph.FULL_STOP,
        Glyph.COLON,
        Glyph.FOUR_DOTS,
        Glyph.TODO_SOFT_HYPHEN,
        Glyph.SIBE_SYLLABLE_BOUNDARY_MARKER,
        Glyph.MANCHU_COMMA,
        Glyph.MANCHU_FULL_STOP,
    ])},
    **{0x1810 + i: Glyph(Glyph.ZERO + i) for i in range(10)},
})


#: Characters encoded with the glyph of another character.
_NO_GLYPH_OF_THEIR_OWN: Final[AbstractSet[int]] = {
    0xFE13,  # PRESENTATION FORM FOR VERTICAL COLON
    0xFE19,  # PRESENTATION FORM FOR VERTICAL HORIZONTAL ELLIPSIS
}


#: The character for each punctuation or digit glyph.
FROM_GLYPH: Final[Mapping[int, int]] = types.MappingProxyType({
    **{g: cp for cp, g in TO_GLYPH.items() if cp not in _NO_GLYPH_OF_THEIR_OWN},
    Glyph.NIRUGU: 0x180A,
    Glyph.BIRGA_WITH_ORNAMENT: 0x11660,
    Glyph.ROTATED_BIRGA: 0x11661,
    Glyph.DOUBLE_BIRGA_WITH_ORNAMENT: 0x11662,
    Glyph.TRIPLE_BIRGA_WITH_ORNAMENT: 0x11663,
})


assert FROM_GLYPH[Glyph.ELLIPSIS] == 0x1801 and FROM_GLYPH[Glyph.COLON] == 0x1804


def to_glyph(cp: int) -> int:
    """Converts a punctuation character to a glyph.

    Args:
        cp: A code point.

    Returns:
        The glyph for `cp`, or `cp` itself if there is none.
    """
    return TO_GLYPH.get(cp, cp)


def from_glyph(cp: int) -> int:
    """Converts a punctuation glyph to a character.

    Args:
        cp: A code point.

    Returns:
        The character for `cp`, or `cp` itself if there is none.
    """
    return FROM_GLYPH.get(cp, cp)
