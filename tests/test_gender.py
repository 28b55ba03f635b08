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

from gender import get_gender_above
from gender import get_word_gender
from utils import Gender
from utils import Letter


@pytest.mark.parametrize('word, expected', [
    ([Letter.NA, Letter.A], Gender.MASCULINE),
    ('\u1828\u1820', Gender.MASCULINE),
    ('\u1821\u1828', Gender.FEMININE),
    ('\u1828\u1822', Gender.NEUTER),
    # Only the last gendered vowel counts.
    ('\u1820\u1828\u1821', Gender.FEMININE),
    ('\u1821\u1828\u1824\u182F', Gender.MASCULINE),
])
def test_word_gender(word: str | list[int], expected: Gender) -> None:
    assert get_word_gender(word) == expected


@pytest.mark.parametrize('word', [None, '', [], 'abc', '\u1820 '])
def test_word_gender_of_non_mongolian(word: str | list[int] | None) -> None:
    assert get_word_gender(word) is None


def test_gender_above() -> None:
    word = [Letter.A, Letter.NA, Letter.E, Letter.GA]
    assert get_gender_above(0, word) == Gender.NEUTER
    assert get_gender_above(1, word) == Gender.MASCULINE
    assert get_gender_above(2, word) == Gender.MASCULINE
    assert get_gender_above(3, word) == Gender.FEMININE
    assert get_gender_above(4, word) == Gender.FEMININE


def test_gender_above_ignores_i() -> None:
    assert get_gender_above(3, [Letter.QA, Letter.I, Letter.GA]) == Gender.NEUTER
