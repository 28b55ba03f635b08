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

"""Vowel harmony.
"""


from __future__ import annotations


__all__ = [
    'get_gender_above',
    'get_word_gender',
]


from typing import TYPE_CHECKING

from classifier import is_mongolian
from classifier import vowel_gender
from utils import Gender


if TYPE_CHECKING:
    from collections.abc import Sequence


def get_gender_above(index: int, word: Sequence[int]) -> Gender:
    """Returns the gender of the part of a word above an index.

    If the word mixes genders, only the vowel nearest to `index` counts.

    Args:
        index: The index to start from. The code point at `index` itself
            is not considered.
        word: The code points of a word.

    Returns:
        The gender of the nearest gendered vowel before `index`, or
        `Gender.NEUTER` if there is none.
    """
    for cp in reversed(word[:index]):
        if (gender := vowel_gender(cp)) is not None:
            return gender
    return Gender.NEUTER


def get_word_gender(word: str | Sequence[int] | None) -> Gender | None:
    """Returns the gender of a word.

    Args:
        word: A word, either as a string or as code points.

    Returns:
        The gender of the vowel nearest to the end of the word, or
        `Gender.NEUTER` if it has no gendered vowel. If `word` is empty
        or ``None``, or its last character is not Mongolian, the return
        value is ``None``.
    """
    if not word:
        return None
    cps = [ord(c) for c in word] if isinstance(word, str) else word
    if not is_mongolian(cps[-1]):
        return None
    return get_gender_above(len(cps), cps)
