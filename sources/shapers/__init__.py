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

r"""The shaper system.

A shaper converts one word between Unicode and legacy glyph codes. The
forward shaper, in `shapers.forward`, converts Unicode to glyph codes.
The reverse shaper, in `shapers.reverse`, converts glyph codes back to
Unicode. Both are stateless between words: all the state of a word
lives in the objects defined here and is discarded when the word is
done.

The forward shaper scans a word from its last character to its first,
because the glyph of a letter depends mostly on the letter below it.
Each letter is shaped by a handler. The parameters of a handler are as
follows.

1. ``word``: The `Word` being shaped. A handler may update its
   ``gender`` and may read the glyphs chosen so far.

2. ``step``: A `Step` describing the letter’s position and its
   neighbors.

3. ``shape``: The `Shape` that the glyph below presents to this letter.

The return value of a handler is a 2-tuple of the chosen glyph and the
shape that glyph presents to the letter above it. The driver threads
the shape from one handler to the next.

The reverse shaper scans a run of glyph codes from first to last. Each
letter glyph is decoded by a decoder, which takes a `GlyphStep` and the
code points decoded so far from the same run, and returns the code
points to append.
"""


from __future__ import annotations


__all__ = [
    'GlyphStep',
    'Step',
    'Word',
    'needs_long_tooth_u',
]


import collections
from typing import Final
from typing import NamedTuple
from typing import TYPE_CHECKING

from classifier import is_consonant
from classifier import is_fvs
from gender import get_gender_above
from utils import Gender
from utils import Letter
from utils import Location
from utils import MVS
from utils import NNBS
from utils import ZWJ
from utils import string_to_cps


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Sequence

    from mypy_extensions import Arg

    from utils import Shape


#: The one word whose first UE does not get a long tooth.
BUU_EXCEPTION: Final[Sequence[int]] = [Letter.BA, Letter.UE, Letter.UE]


class Step(NamedTuple):
    """The context of one character in the forward shaper.
    """

    #: The index of the character in its word.
    index: int

    #: The position of the character in its word.
    location: Location

    #: The free variation selector after the character, or 0.
    fvs: int

    #: The character before the character, or 0 at the top of the word.
    above: int

    #: The character after the character, or 0 at the bottom of the
    #: word. Free variation selectors are skipped.
    below: int

    #: The free variation selector after `below`, or 0.
    below_fvs: int


class GlyphStep(NamedTuple):
    """The context of one glyph in the reverse shaper.
    """

    #: The glyph code.
    glyph: int

    #: The position of the glyph in its word.
    location: Location

    #: The code before the glyph, or 0 at the start of the run.
    above: int

    #: The code after the glyph, or 0 at the end of the run.
    below: int


class Word:
    """A word being shaped by the forward shaper.

    Attributes:
        cps: The code points of the word.
        is_suffix: Whether the word starts with a narrow no-break space.
        gender: The gender of the word as known so far. Vowels set it
            as they are shaped, bottom to top, so it is the gender of
            the nearest gendered vowel below the current letter, if
            there is one.
        rendered: The glyphs chosen so far. The first element is the
            glyph just below the current character.
    """

    def __init__(self, text: str) -> None:
        self.cps: Sequence[int] = string_to_cps(text)
        self.is_suffix: bool = bool(self.cps) and self.cps[0] == NNBS
        self.gender: Gender = Gender.NEUTER
        self.rendered: collections.deque[int] = collections.deque()

    def __len__(self) -> int:
        return len(self.cps)

    def location(self, index: int, below: int, fvs: int) -> Location:
        """Returns the position of a character in this word.

        A trailing free variation selector does not count as a
        character, and a character above a vowel separator is treated as
        final. The first letter after a narrow no-break space counts as
        the first letter of the word.

        Args:
            index: The index of the character.
            below: The character below it, or 0.
            fvs: The free variation selector after it, or 0.
        """
        last = len(self) - 1
        if index == 0:
            return Location.ISOLATE if last == 0 or last == 1 and fvs else Location.INITIAL
        if index == last or index == last - 1 and fvs:
            return Location.ISOLATE if index == 1 and self.is_suffix else Location.FINAL
        if index == 1 and self.is_suffix:
            return Location.INITIAL
        if below == MVS:
            return Location.FINAL
        return Location.MEDIAL

    def gender_above(self, index: int) -> Gender:
        """Returns the gender to use for a letter whose form depends on
        gender.

        If no gendered vowel has been seen below the letter, this looks
        above it, and remembers the result.

        Args:
            index: The index of the letter.
        """
        if self.gender == Gender.NEUTER:
            self.gender = get_gender_above(index, self.cps)
        return self.gender

    def between_consonants(self, index: int) -> bool:
        """Returns whether the letter above a letter is itself below a
        consonant or a zero width joiner.
        """
        return index > 1 and (is_consonant(self.cps[index - 2]) or self.cps[index - 2] == ZWJ)


def needs_long_tooth_u(word: Sequence[int], index: int) -> bool:
    """Returns whether an OE or UE takes the long tooth form.

    OE and UE have a long tooth in the first syllable of a word: at the
    start of the word, or after one initial consonant (optionally
    followed by a free variation selector).

    Args:
        word: The code points of a word.
        index: The index of a code point in `word`.

    Returns:
        Whether the code point at `index` is OE or UE in the first
        syllable. This is ``False`` if `index` is negative.
    """
    if index < 0 or word[index] not in {Letter.OE, Letter.UE}:
        return False
    if index == 0:
        return True
    if index == 1 and is_consonant(word[0]):
        return [*word] != BUU_EXCEPTION
    if index == 2:
        return is_consonant(word[0]) and is_fvs(word[1])
    return False


if TYPE_CHECKING:
    Handler = Callable[
        [
            Arg(Word, 'word'),
            Arg(Step, 'step'),
            Arg(Shape, 'shape'),
        ],
        tuple[int, Shape],
    ]

    Decoder = Callable[
        [
            Arg(GlyphStep, 'step'),
            Arg(Sequence[int], 'output'),
        ],
        Sequence[int],
    ]
