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

from glyphs import Glyph
from glyphs import is_letter_glyph
from shapers import BUU_EXCEPTION
from shapers import Word
from shapers import needs_long_tooth_u
from shapers.forward import shape_word
from utils import FVS1
from utils import FVS2
from utils import Letter
from utils import Location
from utils import MVS
from utils import NNBS
from utils import WJ
from utils import ZWJ
from utils import cps_to_string
from utils import string_to_cps


def shape(*cps: int) -> list[int]:
    return string_to_cps(shape_word(cps_to_string(cps)))


@pytest.mark.parametrize('letter, glyph', [
    (Letter.A, Glyph.ISOL_A),
    (Letter.E, Glyph.ISOL_E),
    (Letter.I, Glyph.ISOL_I),
    (Letter.O, Glyph.ISOL_O),
    (Letter.NA, Glyph.ISOL_NA),
    (Letter.BA, Glyph.ISOL_BA),
    (Letter.QA, Glyph.ISOL_QA),
    (Letter.MA, Glyph.ISOL_MA),
    (Letter.CHA, Glyph.ISOL_CHA),
    (Letter.ZHI, Glyph.ISOL_ZHI),
])
def test_isolated_letter(letter: Letter, glyph: Glyph) -> None:
    assert shape(letter) == [glyph]


def test_every_letter_has_a_glyph() -> None:
    for letter in Letter:
        for word in [[letter], [letter, letter], [letter, letter, letter]]:
            assert all(map(is_letter_glyph, shape(*word)))


def test_positions() -> None:
    assert shape(Letter.NA, Letter.A) == [Glyph.INIT_NA_STEM, Glyph.FINA_A]
    assert shape(Letter.A, Letter.NA) == [Glyph.INIT_A, Glyph.FINA_NA]
    assert shape(Letter.MA, Letter.O, Letter.NA, Letter.GA, Letter.O, Letter.LA) == [
        Glyph.INIT_MA_STEM_LONG,
        Glyph.MEDI_O,
        Glyph.MEDI_NA_TOOTH,
        Glyph.MEDI_GA_FVS1_STEM,
        Glyph.MEDI_O,
        Glyph.FINA_LA,
    ]


def test_feminine_word() -> None:
    assert shape(Letter.NA, Letter.I, Letter.GA, Letter.E) == [
        Glyph.INIT_NA_TOOTH,
        Glyph.MEDI_I,
        Glyph.MEDI_GA_FEM,
        Glyph.FINA_E_BP,
    ]


def test_output_length_matches_input() -> None:
    word = [Letter.NA, Letter.A, Letter.I, FVS2, Letter.MA, Letter.A, ZWJ]
    assert len(shape(*word)) == len(word)


def test_selector_becomes_word_joiner() -> None:
    assert shape(Letter.A, FVS1) == [Glyph.ISOL_A_FVS1, WJ]


def test_joiner_forces_final_form() -> None:
    assert shape(ZWJ, Letter.A) == [WJ, Glyph.FINA_A]


def test_vowel_separator() -> None:
    assert shape(Letter.A, Letter.NA, MVS, Letter.A) == [Glyph.INIT_A, Glyph.MEDI_NA_FVS2, WJ, Glyph.FINA_A_MVS]


def test_feminine_qa() -> None:
    assert shape(Letter.QA, Letter.E) == [Glyph.INIT_QA_FEM, Glyph.FINA_E_BP]


def test_diphthong() -> None:
    assert shape(Letter.NA, Letter.A, Letter.I, Letter.MA, Letter.A) == [
        Glyph.INIT_NA_TOOTH,
        Glyph.MEDI_A,
        Glyph.MEDI_I_DOUBLE_TOOTH,
        Glyph.MEDI_MA_STEM_LONG,
        Glyph.FINA_A,
    ]


def test_diphthong_broken_by_fvs2() -> None:
    assert shape(Letter.NA, Letter.A, Letter.I, FVS2, Letter.MA, Letter.A) == [
        Glyph.INIT_NA_TOOTH,
        Glyph.MEDI_A,
        Glyph.MEDI_I,
        WJ,
        Glyph.MEDI_MA_STEM_LONG,
        Glyph.FINA_A,
    ]


def test_suffixes() -> None:
    assert shape(NNBS, Letter.I) == [Glyph.SUFFIX_SPACE, Glyph.ISOL_I_SUFFIX]
    assert shape(NNBS, Letter.DA, Letter.U) == [Glyph.SUFFIX_SPACE, Glyph.INIT_DA_FVS1, Glyph.FINA_U]
    assert shape(NNBS, Letter.U) == [Glyph.SUFFIX_SPACE, Glyph.FINA_U]


def test_todo_word_is_unchanged() -> None:
    assert shape_word('\u1843\u1820') == '\u1843\u1820'
    assert shape_word('\u1820\u185C') == '\u1820\u185C'


def test_empty_word() -> None:
    assert shape_word('') == ''


def test_word_locations() -> None:
    word = Word(cps_to_string([Letter.A, Letter.NA, Letter.A]))
    assert not word.is_suffix
    assert word.location(0, Letter.NA, 0) == Location.INITIAL
    assert word.location(1, Letter.A, 0) == Location.MEDIAL
    assert word.location(2, 0, 0) == Location.FINAL
    suffix = Word(cps_to_string([NNBS, Letter.A, Letter.NA]))
    assert suffix.is_suffix
    assert suffix.location(1, Letter.NA, 0) == Location.INITIAL


def test_long_tooth_u() -> None:
    assert needs_long_tooth_u([Letter.UE], 0)
    assert needs_long_tooth_u([Letter.BA, Letter.UE, Letter.RA], 1)
    assert needs_long_tooth_u([Letter.BA, FVS1, Letter.OE], 2)
    assert not needs_long_tooth_u(BUU_EXCEPTION, 1)
    assert not needs_long_tooth_u([Letter.A, Letter.UE], 1)
    assert not needs_long_tooth_u([Letter.BA, Letter.A, Letter.RA, Letter.UE], 3)
    assert not needs_long_tooth_u([Letter.UE], -1)
