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

"""Character classes.

Every function here takes a code point and returns whether it belongs
to some class. They accept any integer, so callers can pass 0 for a
missing neighbor.
"""


from __future__ import annotations


__all__ = [
    'is_bgdrs',
    'is_consonant',
    'is_convertible_punctuation',
    'is_feminine_vowel',
    'is_fvs',
    'is_legacy_glyph',
    'is_masculine_vowel',
    'is_mongolian',
    'is_mvs_preceding',
    'is_non_printing',
    'is_ou_vowel',
    'is_pua',
    'is_round_letter',
    'is_round_letter_including_qg',
    'is_todo',
    'is_variation_selector',
    'is_vowel',
    'vowel_gender',
]


from typing import Final
from typing import TYPE_CHECKING

from glyphs import MENKSOFT_END
from glyphs import MENKSOFT_START
from utils import FVS1
from utils import FVS2
from utils import FVS3
from utils import Gender
from utils import Letter
from utils import MVS
from utils import NIRUGU
from utils import TODO_END
from utils import TODO_START
from utils import WJ
from utils import ZWJ
from utils import ZWNJ


if TYPE_CHECKING:
    from collections.abc import Set as AbstractSet


_MASCULINE_VOWELS: Final[AbstractSet[int]] = {Letter.A, Letter.O, Letter.U}


_FEMININE_VOWELS: Final[AbstractSet[int]] = {Letter.E, Letter.EE, Letter.OE, Letter.UE}


_BGDRS: Final[AbstractSet[int]] = {Letter.BA, Letter.GA, Letter.DA, Letter.RA, Letter.SA}


_MVS_PRECEDING: Final[AbstractSet[int]] = {
    Letter.NA,
    Letter.QA,
    Letter.GA,
    Letter.MA,
    Letter.LA,
    Letter.JA,
    Letter.YA,
    Letter.RA,
    Letter.WA,
    Letter.O,
    Letter.U,
    Letter.OE,
    Letter.UE,
}


_ROUND_LETTERS: Final[AbstractSet[int]] = {Letter.BA, Letter.PA, Letter.FA, Letter.KA, Letter.KHA}


_ROUND_LETTERS_INCLUDING_QG: Final[AbstractSet[int]] = _ROUND_LETTERS | {Letter.QA, Letter.GA}


_NON_PRINTING: Final[AbstractSet[int]] = {MVS, ZWJ, ZWNJ, WJ, FVS1, FVS2, FVS3}


_OTHER_CONVERTIBLE_PUNCTUATION: Final[AbstractSet[int]] = {
    0x00B7,  # MIDDLE DOT
    0x00D7,  # MULTIPLICATION SIGN
    0x203B,  # REFERENCE MARK
    0x2048,  # QUESTION EXCLAMATION MARK
    0x2049,  # EXCLAMATION QUESTION MARK
}


def is_vowel(cp: int) -> bool:
    return Letter.A <= cp <= Letter.EE


def is_masculine_vowel(cp: int) -> bool:
    return cp in _MASCULINE_VOWELS


def is_feminine_vowel(cp: int) -> bool:
    return cp in _FEMININE_VOWELS


def vowel_gender(cp: int) -> Gender | None:
    """Returns the gender a vowel gives its word.

    Returns:
        `Gender.MASCULINE` for A, O, and U; `Gender.FEMININE` for E, EE,
        OE, and UE; ``None`` for anything else, including I, which has
        no gender.
    """
    if is_masculine_vowel(cp):
        return Gender.MASCULINE
    if is_feminine_vowel(cp):
        return Gender.FEMININE
    return None


def is_consonant(cp: int) -> bool:
    return Letter.NA <= cp <= Letter.CHI


def is_variation_selector(cp: int) -> bool:
    return FVS1 <= cp <= FVS3


#: A short alias of `is_variation_selector`.
is_fvs = is_variation_selector


def is_todo(cp: int) -> bool:
    return TODO_START <= cp <= TODO_END


def is_mongolian(cp: int) -> bool:
    """Returns whether a code point can be part of a Mongolian word.

    This includes the basic and Todo letters, the nirugu, the free
    variation selectors, the vowel separator, and the zero width
    joiners. It does not include the narrow no-break space, which starts
    a new word.
    """
    return (Letter.A <= cp <= TODO_END
        or NIRUGU <= cp <= MVS
        or cp == ZWJ
        or cp == ZWNJ
    )


def is_legacy_glyph(cp: int) -> bool:
    return MENKSOFT_START <= cp <= MENKSOFT_END


def is_pua(cp: int) -> bool:
    return 0xE000 <= cp <= 0xF8FF


def is_non_printing(cp: int) -> bool:
    return cp in _NON_PRINTING


def is_convertible_punctuation(cp: int) -> bool:
    """Returns whether a code point is punctuation with a legacy glyph.

    Some of these code points (like the vertical curly brackets) have no
    legacy glyph after all, and are copied through unchanged.
    """
    return (0xFE10 <= cp <= 0xFE48
        or 0x1800 <= cp <= 0x1809
        or 0x1810 <= cp <= 0x1819
        or cp in _OTHER_CONVERTIBLE_PUNCTUATION
    )


def is_bgdrs(cp: int) -> bool:
    return cp in _BGDRS


def is_mvs_preceding(cp: int) -> bool:
    """Returns whether a vowel separator may follow a code point.

    A vowel separator only comes before A or E, and only after certain
    letters, mostly consonants.
    """
    return cp in _MVS_PRECEDING


def is_round_letter(cp: int) -> bool:
    return cp in _ROUND_LETTERS


def is_round_letter_including_qg(cp: int) -> bool:
    return cp in _ROUND_LETTERS_INCLUDING_QG


def is_ou_vowel(cp: int) -> bool:
    return Letter.O <= cp <= Letter.UE
