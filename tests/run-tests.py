#!/usr/bin/env python3

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

import argparse
import difflib
import enum
import os
from pathlib import Path
import sys
from typing import assert_never

from convert import Direction
from convert import convert
from utils import cps_to_string
from utils import format_cps
from utils import parse_cps
from utils import string_to_cps


CI = os.getenv('CI') == 'true'


class Color(enum.StrEnum):
    AUTO = enum.auto()
    NO = enum.auto()
    YES = enum.auto()


def parse_color(color: Color) -> bool:
    match color:
        case Color.AUTO:
            return CI or sys.stdout.isatty()
        case Color.NO:
            return False
        case Color.YES:
            return True
        case _:
            assert_never(color)


def parse_options(options: str) -> tuple[Direction, bool]:
    """Parses the options field of a test line.

    The first option is the direction. ``no-strip`` keeps the word
    joiners that stand in for control characters.
    """
    direction, *flags = options.split()
    return Direction(direction), 'no-strip' not in flags


def print_diff(
    code_points: str,
    options: str,
    actual_output: str,
    expected_output: str,
    color: bool,
) -> None:
    if color:
        highlighted_actual_output = []
        highlighted_expected_output = []
        matcher = difflib.SequenceMatcher(None, actual_output, expected_output, False)
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == 'equal':
                highlighted_actual_output.append(actual_output[i1:i2])
                highlighted_expected_output.append(expected_output[j1:j2])
            elif tag == 'delete':
                highlighted_actual_output.append(f'\x1B[1;96m{actual_output[i1:i2]}\x1B[0m')
            elif tag == 'insert':
                highlighted_expected_output.append(f'\x1B[1;93m{expected_output[j1:j2]}\x1B[0m')
            elif tag == 'replace':
                highlighted_actual_output.append(f'\x1B[1;96m{actual_output[i1:i2]}\x1B[0m')
                highlighted_expected_output.append(f'\x1B[1;93m{expected_output[j1:j2]}\x1B[0m')
            else:
                raise ValueError(f'Unknown tag: {tag}')
        actual_output = ''.join(highlighted_actual_output)
        expected_output = ''.join(highlighted_expected_output)
    print()
    print(f'Input:    {code_points}:{options}')
    print('Actual:   ' + actual_output)
    print('Expected: ' + expected_output)


def run_test(line: str, color: bool) -> tuple[bool, str]:
    code_points, options, expected_output = line.split(':')
    direction, strip = parse_options(options)
    actual_output = format_cps(string_to_cps(convert(cps_to_string(parse_cps(code_points)), direction, strip)))
    passed = actual_output == format_cps(parse_cps(expected_output))
    if not passed:
        print_diff(code_points, options, actual_output, expected_output, color)
    return (passed, f'{code_points}:{options}:{actual_output}')


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Run conversion tests.')
    parser.add_argument(
        '--color',
        default=Color.AUTO,
        type=Color,
        help=f'Whether to print diffs in color; one of {{{", ".join(c.value for c in Color)}}} (default: %(default)s).',
    )
    parser.add_argument('tests', nargs='*', type=Path, help='The paths to test files.')
    args = parser.parse_args()
    color = parse_color(args.color.lower())
    passed_all = True
    failed_dir = Path(sys.argv[0]).parent / 'failed'
    failed_dir.mkdir(parents=True, exist_ok=True)
    for fn in args.tests:
        assert isinstance(fn, Path)
        result_lines = []
        passed_file = True
        with fn.open(encoding='utf-8') as f:
            for line in f:
                line = line.rstrip()
                if line and line[0] != '#':
                    passed_line, result_line = run_test(line, color)
                    passed_file = passed_file and passed_line
                    result_lines.append(result_line + '\n')
                else:
                    result_lines.append(line + '\n')
        if not passed_file:
            with (failed_dir / fn.name).open('w', encoding='utf-8') as f:
                f.writelines(result_lines)
        passed_all = passed_all and passed_file
    if not passed_all:
        sys.exit(1)
