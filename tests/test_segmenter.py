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

from classifier import is_consonant
from glyphs import Glyph
from segmenter import get_location
from segmenter import strip_control_chars
from segmenter import to_legacy_glyphs
from segmenter import to_legacy_glyphs_same_index
from segmenter import to_unicode
from utils import FVS1
from utils import FVS2
from utils import Letter
from utils import Location
from utils import MVS
from utils import NNBS
from utils import WJ
from utils import ZWJ
from utils import cps_to_string
from utils import format_cps


def text(*cps: int) -> str:
    return cps_to_string(cps)


@pytest.mark.parametrize('convert', [to_legacy_glyphs, to_legacy_glyphs_same_index, to_unicode])
def test_empty(convert) -> None:
    assert convert('') == ''
    assert convert(None) == ''


@pytest.mark.parametrize('convert', [to_legacy_glyphs, to_legacy_glyphs_same_index, to_unicode])
def test_other_text_is_unchanged(convert) -> None:
    assert convert('Hello, world! 123') == 'Hello, world! 123'


def test_words_and_spaces() -> None:
    assert to_legacy_glyphs(text(Letter.A, 0x20, Letter.NA, Letter.A)) == text(
        Glyph.ISOL_A,
        0x20,
        Glyph.INIT_NA_STEM,
        Glyph.FINA_A,
    )


def test_suffix_starts_a_new_run() -> None:
    assert to_legacy_glyphs(text(Letter.A, Letter.NA, NNBS, Letter.DA, Letter.U)) == text(
        Glyph.INIT_A,
        Glyph.FINA_NA,
        Glyph.SUFFIX_SPACE,
        Glyph.INIT_DA_FVS1,
        Glyph.FINA_U,
    )


def test_punctuation() -> None:
    assert to_legacy_glyphs(text(Letter.A, 0x1802, 0x20, 0x1813)) == text(Glyph.ISOL_A, Glyph.COMMA, 0x20, Glyph.THREE)
    assert to_unicode(text(Glyph.ISOL_A, Glyph.COMMA, 0x20, Glyph.THREE)) == text(Letter.A, 0x1802, 0x20, 0x1813)


def test_same_index() -> None:
    source = text(Letter.NA, Letter.A, Letter.I, 0x180C, Letter.MA, Letter.A, 0x20, Letter.A, FVS1)
    result = to_legacy_glyphs_same_index(source)
    assert len(result) == len(source)
    assert result[3] == chr(WJ)
    assert result[-1] == chr(WJ)
    assert to_legacy_glyphs(source) == result.replace(chr(WJ), '')


def test_strip_only_next_to_legacy_glyphs() -> None:
    assert strip_control_chars(text(Glyph.ISOL_A, WJ)) == text(Glyph.ISOL_A)
    assert strip_control_chars(text(WJ, Glyph.FINA_A)) == text(Glyph.FINA_A)
    assert strip_control_chars(text(Glyph.INIT_A, ZWJ, WJ, Glyph.FINA_A)) == text(Glyph.INIT_A, Glyph.FINA_A)
    assert strip_control_chars(text(0x1843, ZWJ)) == text(0x1843, ZWJ)
    assert strip_control_chars(text(ord('a'), WJ, ord('b'))) == text(ord('a'), WJ, ord('b'))
    assert strip_control_chars('') == ''


def test_todo_word_keeps_its_controls() -> None:
    source = text(0x1844, FVS1, ZWJ)
    assert to_legacy_glyphs(source) == source


CONSONANTS = [letter for letter in Letter if is_consonant(letter)]


@pytest.mark.parametrize('word', [
    *([consonant, Letter.A] for consonant in CONSONANTS),
    *([Letter.A, consonant] for consonant in CONSONANTS),
    [Letter.QA, Letter.E],
    [Letter.NA, Letter.I, Letter.GA, Letter.E],
    [Letter.MA, Letter.O, Letter.NA, Letter.GA, Letter.O, Letter.LA],
    [Letter.MA, Letter.O, Letter.NA, Letter.GA, Letter.O, Letter.LA, NNBS, Letter.U, Letter.NA],
    [Letter.NA, Letter.A, Letter.I, Letter.MA, Letter.A],
    [Letter.NA, Letter.A, Letter.I, FVS2, Letter.MA, Letter.A],
    [Letter.A, Letter.NA, MVS, Letter.A],
    [Letter.A, FVS1],
    [ZWJ, Letter.A],
    [NNBS, Letter.I],
    [Letter.A, Letter.NA, NNBS, Letter.DA, Letter.U],
], ids=format_cps)
def test_round_trip(word: list[int]) -> None:
    source = cps_to_string(word)
    assert to_unicode(to_legacy_glyphs(source)) == source


@pytest.mark.parametrize('word, expected', [
    pytest.param(
        [Letter.A, Letter.EE, Letter.A],
        [Letter.A, Letter.WA, Letter.A],
        id='medial EE between vowels',
    ),
    pytest.param(
        [Letter.A, Letter.QA, Letter.SA, Letter.A],
        [Letter.A, Letter.GA, Letter.SA, Letter.A],
        id='medial QA before a consonant',
    ),
    pytest.param(
        [Letter.A, Letter.YA, Letter.SA, Letter.A],
        [Letter.A, Letter.I, Letter.SA, Letter.A],
        id='medial YA after a vowel before a consonant',
    ),
    pytest.param(
        [Letter.NA, Letter.UE, FVS1, Letter.LA],
        [Letter.NA, Letter.UE, Letter.LA],
        id='first syllable UE with its default selector',
    ),
])
def test_lossy_round_trip(word: list[int], expected: list[int]) -> None:
    assert to_unicode(to_legacy_glyphs(cps_to_string(word))) == cps_to_string(expected)


def test_legacy_space_before_suffix() -> None:
    assert to_unicode(text(Glyph.ISOL_A, 0x20, Glyph.ISOL_I_SUFFIX)) == text(Letter.A, NNBS, Letter.I)


def test_non_legacy_pua_is_unchanged() -> None:
    assert to_unicode(text(0xE000, Glyph.ISOL_A, 0xF000)) == text(0xE000, Letter.A, 0xF000)


@pytest.mark.parametrize('before, after, expected', [
    (None, None, Location.ISOLATE),
    ('', '', Location.ISOLATE),
    ('a', 'b', Location.ISOLATE),
    (text(Letter.A), '', Location.FINAL),
    (text(Letter.A), ' ', Location.FINAL),
    ('', text(Letter.A), Location.INITIAL),
    (' ', text(Letter.A), Location.INITIAL),
    (text(Letter.A), text(Letter.A), Location.MEDIAL),
    (text(Letter.A), text(FVS1, Letter.A), Location.MEDIAL),
    (text(Letter.NA), text(MVS, Letter.A), Location.MEDIAL),
    (text(Letter.A), text(FVS1), Location.FINAL),
    (text(Letter.A, NNBS), text(Letter.I), Location.INITIAL),
])
def test_get_location(before: str | None, after: str | None, expected: Location) -> None:
    assert get_location(before, after) == expected
