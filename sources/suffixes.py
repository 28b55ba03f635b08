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

"""Grammatical suffixes.

A suffix is written after a narrow no-break space. Most suffixes have
several spellings: a back vowel spelling for masculine words, a front
vowel spelling for other words, and sometimes different spellings after
a vowel, after N, or after B, G, D, R, or S. The functions here choose
the spelling to attach to a word, given its gender and its last
letter.
"""


from __future__ import annotations


__all__ = [
    'Suffix',
    'acha_eche',
    'ban_iyan',
    'bar_iyar',
    'chu',
    'nugud',
    'tagan_dagan',
    'tai_tei',
    'taqi_daqi',
    'tu_du',
    'ud',
    'uu',
    'yi_i',
    'yin_un_u',
]


import enum

from classifier import is_bgdrs
from classifier import is_vowel
from utils import Gender
from utils import Letter
from utils import MVS
from utils import NNBS


def _suffix(*cps: int) -> str:
    return chr(NNBS) + ''.join(map(chr, cps))


class Suffix(enum.StrEnum):
    """A suffix spelling, including its leading narrow no-break space.
    """

    # Genitive
    YIN = _suffix(Letter.YA, Letter.I, Letter.NA)
    UN = _suffix(Letter.U, Letter.NA)
    UEN = _suffix(Letter.UE, Letter.NA)
    U = _suffix(Letter.U)
    UE = _suffix(Letter.UE)

    # Accusative
    I = _suffix(Letter.I)
    YI = _suffix(Letter.YA, Letter.I)

    # Dative-locative
    DU = _suffix(Letter.DA, Letter.U)
    DUE = _suffix(Letter.DA, Letter.UE)
    TU = _suffix(Letter.TA, Letter.U)
    TUE = _suffix(Letter.TA, Letter.UE)
    DUR = _suffix(Letter.DA, Letter.U, Letter.RA)
    DUER = _suffix(Letter.DA, Letter.UE, Letter.RA)
    TUR = _suffix(Letter.TA, Letter.U, Letter.RA)
    TUER = _suffix(Letter.TA, Letter.UE, Letter.RA)
    DAQI = _suffix(Letter.DA, Letter.A, Letter.QA, Letter.I)
    DEQI = _suffix(Letter.DA, Letter.E, Letter.QA, Letter.I)
    TAQI = _suffix(Letter.TA, Letter.A, Letter.QA, Letter.I)
    TEQI = _suffix(Letter.TA, Letter.E, Letter.QA, Letter.I)

    # Ablative
    ACHA = _suffix(Letter.A, Letter.CHA, Letter.A)
    ECHE = _suffix(Letter.E, Letter.CHA, Letter.E)

    # Instrumental
    BAR = _suffix(Letter.BA, Letter.A, Letter.RA)
    BER = _suffix(Letter.BA, Letter.E, Letter.RA)
    IYAR = _suffix(Letter.I, Letter.YA, Letter.A, Letter.RA)
    IYER = _suffix(Letter.I, Letter.YA, Letter.E, Letter.RA)

    # Comitative
    TAI = _suffix(Letter.TA, Letter.A, Letter.I)
    TEI = _suffix(Letter.TA, Letter.E, Letter.I)
    LUGA = _suffix(Letter.LA, Letter.U, Letter.GA, MVS, Letter.A)
    LUEGE = _suffix(Letter.LA, Letter.UE, Letter.GA, Letter.E)

    # Reflexive
    BAN = _suffix(Letter.BA, Letter.A, Letter.NA)
    BEN = _suffix(Letter.BA, Letter.E, Letter.NA)
    IYAN = _suffix(Letter.I, Letter.YA, Letter.A, Letter.NA)
    IYEN = _suffix(Letter.I, Letter.YA, Letter.E, Letter.NA)

    # Reflexive case combinations
    YUGAN = _suffix(Letter.YA, Letter.U, Letter.GA, Letter.A, Letter.NA)
    YUEGEN = _suffix(Letter.YA, Letter.UE, Letter.GA, Letter.E, Letter.NA)
    DAGAN = _suffix(Letter.DA, Letter.A, Letter.GA, Letter.A, Letter.NA)
    DEGEN = _suffix(Letter.DA, Letter.E, Letter.GA, Letter.E, Letter.NA)
    TAGAN = _suffix(Letter.TA, Letter.A, Letter.GA, Letter.A, Letter.NA)
    TEGEN = _suffix(Letter.TA, Letter.E, Letter.GA, Letter.E, Letter.NA)
    ACHAGAN = _suffix(Letter.A, Letter.CHA, Letter.A, Letter.GA, Letter.A, Letter.NA)
    ECHEGEN = _suffix(Letter.E, Letter.CHA, Letter.E, Letter.GA, Letter.E, Letter.NA)
    TAIGAN = _suffix(Letter.TA, Letter.A, Letter.I, Letter.GA, Letter.A, Letter.NA)
    TEIGEN = _suffix(Letter.TA, Letter.E, Letter.I, Letter.GA, Letter.E, Letter.NA)

    # Plural
    UD = _suffix(Letter.U, Letter.DA)
    UED = _suffix(Letter.UE, Letter.DA)
    NUGUD = _suffix(Letter.NA, Letter.U, Letter.GA, Letter.U, Letter.DA)
    NUEGUED = _suffix(Letter.NA, Letter.UE, Letter.GA, Letter.UE, Letter.DA)
    NAR = _suffix(Letter.NA, Letter.A, Letter.RA)
    NER = _suffix(Letter.NA, Letter.E, Letter.RA)

    # Miscellaneous
    UU = _suffix(Letter.U, Letter.U)
    UEUE = _suffix(Letter.UE, Letter.UE)
    DA = _suffix(Letter.DA, Letter.A)
    DE = _suffix(Letter.DA, Letter.E)
    CHU = _suffix(Letter.CHA, Letter.U)
    CHUE = _suffix(Letter.CHA, Letter.UE)


def _by_gender(gender: Gender | None, masculine: Suffix, other: Suffix) -> Suffix:
    return masculine if gender == Gender.MASCULINE else other


def yin_un_u(gender: Gender | None, last: int) -> Suffix:
    """Chooses the genitive suffix.

    YIN comes after a vowel, U after N, and UN after any other
    consonant.

    Args:
        gender: The gender of the previous word.
        last: The last code point of the previous word.
    """
    if is_vowel(last):
        return Suffix.YIN
    if last == Letter.NA:
        return _by_gender(gender, Suffix.U, Suffix.UE)
    return _by_gender(gender, Suffix.UN, Suffix.UEN)


def tu_du(gender: Gender | None, last: int) -> Suffix:
    """Chooses the dative-locative suffix: TU after B, G, D, R, or S,
    and DU elsewhere.
    """
    if is_bgdrs(last):
        return _by_gender(gender, Suffix.TU, Suffix.TUE)
    return _by_gender(gender, Suffix.DU, Suffix.DUE)


def tagan_dagan(gender: Gender | None, last: int) -> Suffix:
    if is_bgdrs(last):
        return _by_gender(gender, Suffix.TAGAN, Suffix.TEGEN)
    return _by_gender(gender, Suffix.DAGAN, Suffix.DEGEN)


def taqi_daqi(gender: Gender | None, last: int) -> Suffix:
    if is_bgdrs(last):
        return _by_gender(gender, Suffix.TAQI, Suffix.TEQI)
    return _by_gender(gender, Suffix.DAQI, Suffix.DEQI)


def yi_i(last: int) -> Suffix:
    """Chooses the accusative suffix: YI after a vowel and I after a
    consonant.
    """
    return Suffix.YI if is_vowel(last) else Suffix.I


def bar_iyar(gender: Gender | None, last: int) -> Suffix:
    """Chooses the instrumental suffix.

    IYAR is chosen after a vowel and BAR after a consonant.
    """
    # TODO: Standard orthography puts BAR after a vowel and IYAR after a
    # consonant. Swap the cases along with `ban_iyan`.
    if is_vowel(last):
        return _by_gender(gender, Suffix.IYAR, Suffix.IYER)
    return _by_gender(gender, Suffix.BAR, Suffix.BER)


def ban_iyan(gender: Gender | None, last: int) -> Suffix:
    """Chooses the reflexive suffix, with the same vowel and consonant
    cases as `bar_iyar`.
    """
    if is_vowel(last):
        return _by_gender(gender, Suffix.IYAN, Suffix.IYEN)
    return _by_gender(gender, Suffix.BAN, Suffix.BEN)


def acha_eche(gender: Gender | None) -> Suffix:
    return _by_gender(gender, Suffix.ACHA, Suffix.ECHE)


def tai_tei(gender: Gender | None) -> Suffix:
    return _by_gender(gender, Suffix.TAI, Suffix.TEI)


def uu(gender: Gender | None) -> Suffix:
    return _by_gender(gender, Suffix.UU, Suffix.UEUE)


def ud(gender: Gender | None) -> Suffix:
    return _by_gender(gender, Suffix.UD, Suffix.UED)


def nugud(gender: Gender | None) -> Suffix:
    return _by_gender(gender, Suffix.NUGUD, Suffix.NUEGUED)


def chu(gender: Gender | None) -> Suffix:
    return _by_gender(gender, Suffix.CHU, Suffix.CHUE)
