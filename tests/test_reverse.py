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
from shapers.reverse import FINAL_OR_ISOLATE_GLYPHS
from shapers.reverse import INITIAL_OR_ISOLATE_GLYPHS
from shapers.reverse import unshape_word
from utils import FVS1
from utils import FVS2
from utils import FVS3
from utils import Letter
from utils import MVS
from utils import NNBS
from utils import SPACE
from utils import ZWJ
from utils import cps_to_string
from utils import string_to_cps


def unshape(*glyphs: int) -> list[int]:
    return string_to_cps(unshape_word(cps_to_string(glyphs)))


def test_default_forms() -> None:
    assert unshape(Glyph.ISOL_A) == [Letter.A]
    assert unshape(Glyph.INIT_NA_STEM, Glyph.FINA_A) == [Letter.NA, Letter.A]
    assert unshape(
        Glyph.INIT_MA_STEM_LONG,
        Glyph.MEDI_O,
        Glyph.MEDI_NA_TOOTH,
        Glyph.MEDI_GA_FVS1_STEM,
        Glyph.MEDI_O,
        Glyph.FINA_LA,
    ) == [Letter.MA, Letter.O, Letter.NA, Letter.GA, Letter.O, Letter.LA]


@pytest.mark.parametrize('glyph, expected', [
    (Glyph.ISOL_A_FVS1, [Letter.A, FVS1]),
    (Glyph.INIT_A, [Letter.A, ZWJ]),
    (Glyph.FINA_A, [ZWJ, Letter.A]),
    (Glyph.MEDI_A, [ZWJ, Letter.A, ZWJ]),
    (Glyph.MEDI_A_FVS1, [ZWJ, Letter.A, FVS1, ZWJ]),
    (Glyph.MEDI_I_DOUBLE_TOOTH, [ZWJ, Letter.YA, Letter.I, ZWJ]),
    (Glyph.ISOL_OE_FVS1, [Letter.UE, FVS1]),
    (Glyph.FINA_UE_BP, [ZWJ, Letter.U, FVS1]),
    (Glyph.MEDI_GA_FVS3_TOOTH, [ZWJ, Letter.GA, FVS3, ZWJ]),
    (Glyph.FINA_WA_FVS1, [ZWJ, Letter.U]),
    (Glyph.MEDI_LHA, [ZWJ, Letter.LHA]),
])
def test_isolated_glyph_with_joiners(glyph: Glyph, expected: list[int]) -> None:
    assert unshape(glyph) == expected


def test_masculine_dots() -> None:
    assert unshape(Glyph.INIT_QA_FVS1_TOOTH, Glyph.FINA_A) == [Letter.GA, Letter.A]
    assert unshape(Glyph.INIT_GA_FVS1_TOOTH, Glyph.FINA_A) == [Letter.QA, Letter.A]


def test_isolated_da_that_looks_like_ta() -> None:
    assert unshape(Glyph.INIT_DA_TOOTH) == [Letter.TA]


def test_vowel_separator() -> None:
    assert unshape(Glyph.INIT_A, Glyph.MEDI_NA_FVS2, Glyph.FINA_A_MVS) == [Letter.A, Letter.NA, MVS, Letter.A]


def test_broken_diphthong() -> None:
    assert unshape(Glyph.INIT_NA_TOOTH, Glyph.MEDI_A, Glyph.MEDI_I, Glyph.MEDI_MA_STEM_LONG, Glyph.FINA_A) == [
        Letter.NA,
        Letter.A,
        Letter.I,
        FVS2,
        Letter.MA,
        Letter.A,
    ]
    assert unshape(Glyph.INIT_NA_TOOTH, Glyph.MEDI_A, Glyph.MEDI_I_DOUBLE_TOOTH, Glyph.MEDI_MA_STEM_LONG, Glyph.FINA_A) == [
        Letter.NA,
        Letter.A,
        Letter.I,
        Letter.MA,
        Letter.A,
    ]


def test_medial_wa_and_ee() -> None:
    # W between consonants is EE, and EE between vowels is W.
    assert unshape(Glyph.INIT_BA, Glyph.MEDI_WA, Glyph.FINA_RA) == [Letter.BA, Letter.EE, Letter.RA]
    assert unshape(Glyph.INIT_A, Glyph.MEDI_EE, Glyph.FINA_A) == [Letter.A, Letter.WA, Letter.A]


def test_suffix_run() -> None:
    assert unshape(Glyph.SUFFIX_SPACE, Glyph.ISOL_I_SUFFIX) == [NNBS, Letter.I]
    assert unshape(Glyph.SUFFIX_SPACE, Glyph.INIT_DA_FVS1, Glyph.FINA_U) == [NNBS, Letter.DA, Letter.U]
    assert unshape(Glyph.SUFFIX_SPACE, Glyph.FINA_U) == [NNBS, Letter.U]
    assert unshape(Glyph.SUFFIX_SPACE, Glyph.FINA_O) == [NNBS, Letter.U]
    assert unshape(Glyph.SUFFIX_SPACE, Glyph.INIT_JA_STEM, Glyph.FINA_I) == [NNBS, Letter.YA, Letter.I]


def test_same_glyphs_outside_suffix() -> None:
    assert unshape(Glyph.FINA_U) == [ZWJ, Letter.U]
    assert unshape(Glyph.FINA_O) == [ZWJ, Letter.O]
    assert unshape(Glyph.INIT_DA_FVS1, Glyph.FINA_U) == [Letter.DA, FVS1, Letter.U]


def test_spaces() -> None:
    assert unshape(SPACE, Glyph.ISOL_A) == [SPACE, Letter.A]
    assert unshape(Glyph.UNKNOWN_SPACE, Glyph.ISOL_A) == [SPACE, Letter.A]
    assert unshape(SPACE, Glyph.ISOL_I_SUFFIX) == [NNBS, Letter.I]
    assert unshape(Glyph.UNKNOWN_SPACE, Glyph.FINA_YA) == [NNBS, ZWJ, Letter.YA]


def test_missing_space() -> None:
    assert unshape(Glyph.ISOL_A, Glyph.ISOL_A) == [Letter.A, SPACE, Letter.A]
    assert unshape(Glyph.INIT_NA_STEM, Glyph.FINA_A, Glyph.INIT_NA_STEM, Glyph.FINA_A) == [
        Letter.NA,
        Letter.A,
        SPACE,
        Letter.NA,
        Letter.A,
    ]


def test_punctuation_in_run() -> None:
    assert unshape(Glyph.ISOL_A, Glyph.COMMA) == [Letter.A, 0x1802]
    assert unshape(Glyph.NIRUGU) == [0x180A]


def test_word_boundary_glyph_sets() -> None:
    assert Glyph.ISOL_A in INITIAL_OR_ISOLATE_GLYPHS & FINAL_OR_ISOLATE_GLYPHS
    assert Glyph.MEDI_A not in INITIAL_OR_ISOLATE_GLYPHS | FINAL_OR_ISOLATE_GLYPHS
    assert Glyph.FINA_NA in FINAL_OR_ISOLATE_GLYPHS
    assert Glyph.INIT_NA_TOOTH in INITIAL_OR_ISOLATE_GLYPHS
