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

from __future__ import annotations

import pytest

from classifier import is_convertible_punctuation
from glyphs import Glyph
from punctuation import FROM_GLYPH
from punctuation import TO_GLYPH
from punctuation import from_glyph
from punctuation import to_glyph


@pytest.mark.parametrize('cp, glyph', [
    (0x1800, Glyph.BIRGA),
    (0x1802, Glyph.COMMA),
    (0x1803, Glyph.FULL_STOP),
    (0x1809, Glyph.MANCHU_FULL_STOP),
    (0x1810, Glyph.ZERO),
    (0x1819, Glyph.NINE),
    (0xFE10, Glyph.FULL_WIDTH_COMMA),
    (0xFE35, Glyph.LEFT_PARENTHESIS),
    (0x00D7, Glyph.X),
])
def test_to_glyph(cp: int, glyph: Glyph) -> None:
    assert to_glyph(cp) == glyph


def test_to_glyph_without_glyph() -> None:
    assert to_glyph(ord('a')) == ord('a')
    # A vertical curly bracket is convertible punctuation but has no glyph.
    assert is_convertible_punctuation(0xFE37)
    assert to_glyph(0xFE37) == 0xFE37


def test_vertical_forms_share_glyphs() -> None:
    assert to_glyph(0xFE13) == to_glyph(0x1804) == Glyph.COLON
    assert to_glyph(0xFE19) == to_glyph(0x1801) == Glyph.ELLIPSIS
    assert from_glyph(Glyph.COLON) == 0x1804
    assert from_glyph(Glyph.ELLIPSIS) == 0x1801


def test_from_glyph_only() -> None:
    assert from_glyph(Glyph.NIRUGU) == 0x180A
    assert from_glyph(Glyph.BIRGA_WITH_ORNAMENT) == 0x11660
    assert from_glyph(Glyph.TRIPLE_BIRGA_WITH_ORNAMENT) == 0x11663
    assert from_glyph(0xE264) == 0xE264


def test_round_trip_of_characters_with_glyphs() -> None:
    for cp, glyph in TO_GLYPH.items():
        if cp not in {0xFE13, 0xFE19}:
            assert FROM_GLYPH[glyph] == cp
