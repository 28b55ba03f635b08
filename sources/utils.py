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

"""Miscellaneous constants, functions, and classes.
"""


from __future__ import annotations


__all__ = [
    'FVS1',
    'FVS2',
    'FVS3',
    'Gender',
    'Letter',
    'Location',
    'MVS',
    'NIRUGU',
    'NNBS',
    'SPACE',
    'Shape',
    'TODO_END',
    'TODO_START',
    'WJ',
    'ZWJ',
    'ZWNJ',
    'cps_to_string',
    'format_cps',
    'parse_cps',
    'string_to_cps',
]


import enum
from typing import Final
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Sequence


#: MONGOLIAN NIRUGU.
NIRUGU: Final[int] = 0x180A


#: MONGOLIAN FREE VARIATION SELECTOR ONE.
FVS1: Final[int] = 0x180B


#: MONGOLIAN FREE VARIATION SELECTOR TWO.
FVS2: Final[int] = 0x180C


#: MONGOLIAN FREE VARIATION SELECTOR THREE.
FVS3: Final[int] = 0x180D


#: MONGOLIAN VOWEL SEPARATOR.
MVS: Final[int] = 0x180E


#: The first Todo letter, MONGOLIAN TODO LONG VOWEL SIGN.
TODO_START: Final[int] = 0x1843


#: The last Todo letter, MONGOLIAN LETTER TODO DZA.
TODO_END: Final[int] = 0x185C


#: ZERO WIDTH NON-JOINER.
ZWNJ: Final[int] = 0x200C


#: ZERO WIDTH JOINER.
ZWJ: Final[int] = 0x200D


#: NARROW NO-BREAK SPACE. It marks the start of a suffix run.
NNBS: Final[int] = 0x202F


#: WORD JOINER. The forward shaper emits it in place of each joiner,
#: selector, or vowel separator it consumes.
WJ: Final[int] = 0x2060


#: SPACE.
SPACE: Final[int] = 0x0020


class Location(enum.Enum):
    """The position of a letter within its word.
    """

    #: The position of a letter with no joining neighbor.
    ISOLATE = enum.auto()

    #: The position of the top letter of a word.
    INITIAL = enum.auto()

    #: The position of a letter with a joining neighbor on either side.
    MEDIAL = enum.auto()

    #: The position of the bottom letter of a word.
    FINAL = enum.auto()


class Gender(enum.Enum):
    """The vowel harmony class of a word.
    """

    #: The class of a word whose nearest vowel is A, O, or U.
    MASCULINE = enum.auto()

    #: The class of a word whose nearest vowel is E, EE, OE, or UE.
    FEMININE = enum.auto()

    #: The class of a word with no gendered vowel.
    NEUTER = enum.auto()


class Shape(enum.Enum):
    """The contour of the top of the glyph below the current letter.

    Each letter picks a form that joins visually to the glyph below it,
    then reports the shape its own glyph presents to the letter above.
    """

    #: A glyph that slants to the left like a tooth, like medial TA,
    #: RA, or WA.
    TOOTH = enum.auto()

    #: A glyph that starts with a vertical stem, like BA, O, or CHA.
    STEM = enum.auto()

    #: A glyph whose top is round, like feminine QA or GA.
    ROUND = enum.auto()


@enum.unique
class Letter(enum.IntEnum):
    """A letter of the basic Mongolian alphabet.

    The value of each member is its code point.
    """

    A = 0x1820
    E = 0x1821
    I = 0x1822
    O = 0x1823
    U = 0x1824
    OE = 0x1825
    UE = 0x1826
    EE = 0x1827
    NA = 0x1828
    ANG = 0x1829
    BA = 0x182A
    PA = 0x182B
    QA = 0x182C
    GA = 0x182D
    MA = 0x182E
    LA = 0x182F
    SA = 0x1830
    SHA = 0x1831
    TA = 0x1832
    DA = 0x1833
    CHA = 0x1834
    JA = 0x1835
    YA = 0x1836
    RA = 0x1837
    WA = 0x1838
    FA = 0x1839
    KA = 0x183A
    KHA = 0x183B
    TSA = 0x183C
    ZA = 0x183D
    HAA = 0x183E
    ZRA = 0x183F
    LHA = 0x1840
    ZHI = 0x1841
    CHI = 0x1842


assert [*Letter] == sorted(Letter) and Letter.CHI - Letter.A == len(Letter) - 1, 'The basic alphabet is not contiguous'


def string_to_cps(s: str) -> list[int]:
    return [ord(c) for c in s]


def cps_to_string(cps: Iterable[int]) -> str:
    return ''.join(map(chr, cps))


def parse_cps(s: str) -> Sequence[int]:
    """Parses a space-separated list of hexadecimal code points.

    Args:
        s: A string like ``'1828 1822'``. Blank strings are allowed.

    Returns:
        The list of code points.
    """
    return [int(cp, 16) for cp in s.split()]


def format_cps(cps: Iterable[int]) -> str:
    """Formats code points the way `parse_cps` parses them.
    """
    return ' '.join(f'{cp:04X}' for cp in cps)
