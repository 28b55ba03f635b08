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

"""Conversion of running text between Unicode and legacy glyph codes.

Text is split into runs of Mongolian characters (or of legacy glyphs, in
the other direction) and everything else. Each run is converted by a
shaper and everything else is copied, apart from punctuation, which is
converted character by character.
"""


from __future__ import annotations


__all__ = [
    'get_location',
    'strip_control_chars',
    'to_legacy_glyphs',
    'to_legacy_glyphs_same_index',
    'to_unicode',
]


from typing import Final
from typing import TYPE_CHECKING

from classifier import is_convertible_punctuation
from classifier import is_fvs
from classifier import is_legacy_glyph
from classifier import is_mongolian
from classifier import is_non_printing
from classifier import is_pua
from glyphs import Glyph
from punctuation import to_glyph
from shapers.forward import shape_word
from shapers.reverse import unshape_word
from utils import Location
from utils import MVS
from utils import NNBS
from utils import SPACE


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Set as AbstractSet


#: The characters that start a run of legacy glyphs.
_LEGACY_SPACES: Final[AbstractSet[int]] = frozenset({Glyph.SUFFIX_SPACE, Glyph.UNKNOWN_SPACE, SPACE})


def _convert_runs(
    text: str | None,
    in_run: Callable[[int], bool],
    starts_run: Callable[[int], bool],
    convert_run: Callable[[str], str],
    convert_other: Callable[[int], int],
) -> str:
    """Converts text run by run.

    Args:
        text: The text to convert.
        in_run: Whether a code point continues a run.
        starts_run: Whether a code point that does not continue a run
            starts a new one.
        convert_run: Converts a run.
        convert_other: Converts a code point outside any run.

    Returns:
        The converted text.
    """
    if not text:
        return ''
    output: list[str] = []
    run: list[str] = []
    for c in text:
        cp = ord(c)
        if in_run(cp):
            run.append(c)
            continue
        if run:
            output.append(convert_run(''.join(run)))
            run.clear()
        if starts_run(cp):
            run.append(c)
        else:
            output.append(chr(convert_other(cp)))
    if run:
        output.append(convert_run(''.join(run)))
    return ''.join(output)


def _to_legacy_punctuation(cp: int) -> int:
    return to_glyph(cp) if is_convertible_punctuation(cp) else cp


def to_legacy_glyphs_same_index(text: str | None) -> str:
    """Converts Unicode text to legacy glyph codes, keeping placeholders
    for control characters.

    Each control character in a Mongolian word becomes a word joiner, so
    the output has exactly one code point per input code point.

    Args:
        text: Unicode text, which may mix Mongolian with anything else.

    Returns:
        The converted text, or ``''`` if `text` is empty or ``None``.
    """
    return _convert_runs(
        text,
        is_mongolian,
        lambda cp: cp == NNBS,
        shape_word,
        _to_legacy_punctuation,
    )


def strip_control_chars(text: str) -> str:
    """Removes the control characters that legacy glyphs do not need.

    A zero width joiner, zero width non-joiner, word joiner, vowel
    separator, or free variation selector is removed if it is next to a
    Private Use Area character. Elsewhere, as in a Todo word, which legacy
    fonts shape themselves, it is kept.

    Args:
        text: Text to strip.

    Returns:
        `text` without the control characters next to legacy glyphs.
    """
    cps = [ord(c) for c in text]
    return ''.join(
        c
        for i, c in enumerate(text)
        if not (is_non_printing(cps[i])
            and (i != 0 and is_pua(cps[i - 1]) or i != len(cps) - 1 and is_pua(cps[i + 1]))
        )
    )


def to_legacy_glyphs(text: str | None) -> str:
    """Converts Unicode text to legacy glyph codes.

    Args:
        text: Unicode text, which may mix Mongolian with anything else.

    Returns:
        The converted text, or ``''`` if `text` is empty or ``None``.
    """
    return strip_control_chars(to_legacy_glyphs_same_index(text))


def to_unicode(text: str | None) -> str:
    """Converts legacy glyph codes to Unicode text.

    Args:
        text: Text in legacy glyph codes, which may mix them with
            anything else.

    Returns:
        The converted text, or ``''`` if `text` is empty or ``None``.
    """
    return _convert_runs(
        text,
        lambda cp: is_legacy_glyph(cp) and cp not in _LEGACY_SPACES,
        _LEGACY_SPACES.__contains__,
        unshape_word,
        lambda cp: cp,
    )


def get_location(text_before: str | None, text_after: str | None) -> Location:
    """Returns the location of a character to be inserted between two
    strings.

    Free variation selectors and vowel separators at the start of
    `text_after` are skipped, since they belong to the inserted
    character.

    Args:
        text_before: The text before the insertion point.
        text_after: The text after the insertion point.

    Returns:
        The location the inserted character would have if it were
        Mongolian.
    """
    text_before = text_before or ''
    before_is_mongolian = bool(text_before) and is_mongolian(ord(text_before[-1]))
    after_is_mongolian = False
    for c in text_after or '':
        cp = ord(c)
        if is_fvs(cp) or cp == MVS:
            continue
        after_is_mongolian = is_mongolian(cp)
        break
    if before_is_mongolian:
        return Location.MEDIAL if after_is_mongolian else Location.FINAL
    return Location.INITIAL if after_is_mongolian else Location.ISOLATE
