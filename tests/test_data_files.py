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

"""Runs the conversion tests in the ``*.txt`` files next to this module.

Each test is a line of the form ``INPUT:OPTIONS:EXPECTED``, where
``INPUT`` and ``EXPECTED`` are space-separated hexadecimal code points.
The first option is the direction, ``legacy`` or ``unicode``. The
option ``no-strip`` keeps the word joiners that stand in for control
characters.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from convert import Direction
from convert import convert
from utils import cps_to_string
from utils import format_cps
from utils import parse_cps
from utils import string_to_cps


if TYPE_CHECKING:
    from _pytest.mark.structures import ParameterSet


def collect_tests() -> list[ParameterSet]:
    tests = []
    for path in sorted(Path(__file__).parent.glob('*.txt')):
        with path.open(encoding='utf-8') as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip()
                if line and line[0] != '#':
                    tests.append(pytest.param(line, id=f'{path.name}:{line_number}'))
    return tests


@pytest.mark.parametrize('line', collect_tests())
def test_line(line: str) -> None:
    code_points, options, expected_output = line.split(':')
    direction, *flags = options.split()
    actual_output = convert(cps_to_string(parse_cps(code_points)), Direction(direction), 'no-strip' not in flags)
    assert format_cps(string_to_cps(actual_output)) == format_cps(parse_cps(expected_output))
