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

"""Converts text files between Unicode and legacy glyph codes.
"""


from __future__ import annotations


__all__ = [
    'Direction',
    'convert',
    'main',
]


import argparse
import enum
import logging
import os
import sys
from typing import TYPE_CHECKING
from typing import assert_never

from fontTools import configLogger
from fontTools.misc.cliTools import makeOutputFileName

from segmenter import to_legacy_glyphs
from segmenter import to_legacy_glyphs_same_index
from segmenter import to_unicode


if TYPE_CHECKING:
    from collections.abc import Sequence


log = logging.getLogger()


@enum.unique
class Direction(enum.StrEnum):
    """The direction of a conversion.
    """

    #: From Unicode to legacy glyph codes.
    LEGACY = enum.auto()

    #: From legacy glyph codes to Unicode.
    UNICODE = enum.auto()


def convert(text: str, direction: Direction, strip: bool = True) -> str:
    """Converts text in one direction.

    Args:
        text: The text to convert.
        direction: The direction to convert in.
        strip: Whether to strip the control characters that legacy
            glyphs do not need. This only applies to
            `Direction.LEGACY`.

    Returns:
        The converted text.
    """
    match direction:
        case Direction.LEGACY:
            return to_legacy_glyphs(text) if strip else to_legacy_glyphs_same_index(text)
        case Direction.UNICODE:
            return to_unicode(text)
        case _:
            assert_never(direction)


def _convert_file(input_path: str, output_path: str, direction: Direction, strip: bool) -> None:
    log.info('Converting %s to %s', input_path, output_path)
    with open(input_path, encoding='utf-8') as input_file:
        text = input_file.read()
    result = convert(text, direction, strip)
    log.debug('Read %d code points, wrote %d', len(text), len(result))
    with open(output_path, 'w', encoding='utf-8') as output_file:
        output_file.write(result)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description='Convert text between Unicode and legacy Mongolian glyph codes.')
    parser.add_argument(
        '--direction',
        default=Direction.LEGACY,
        type=Direction,
        help=f'The direction to convert in; one of {{{", ".join(d.value for d in Direction)}}} (default: %(default)s).',
    )
    parser.add_argument(
        '--strip',
        action=argparse.BooleanOptionalAction,
        default=True,
        help='Strip the control characters next to legacy glyphs (default: %(default)s).',
    )
    parser.add_argument('-o', '--output', metavar='OUTPUT', help='output file, or directory when converting several files')
    parser.add_argument('--overwrite', action='store_true', help='Overwrite existing output files.')
    parser.add_argument('--verbose', action='store_true', help='Log more details.')
    parser.add_argument('input', nargs='*', metavar='INPUT', help='input file (default: standard input)')
    options = parser.parse_args(args)

    configLogger(logger=log, level=logging.DEBUG if options.verbose else logging.INFO)

    if not options.input:
        text = sys.stdin.read()
        result = convert(text, options.direction, options.strip)
        log.debug('Read %d code points, wrote %d', len(text), len(result))
        if options.output:
            with open(options.output, 'w', encoding='utf-8') as output_file:
                output_file.write(result)
        else:
            sys.stdout.write(result)
        return

    if options.output and len(options.input) > 1:
        if not os.path.isdir(options.output):
            parser.error('-o/--output option must be a directory when converting multiple files')

    for path in options.input:
        if options.output and not os.path.isdir(options.output):
            output = options.output
        else:
            output = makeOutputFileName(
                path,
                outputDir=options.output,
                overWrite=options.overwrite,
                suffix=f'-{options.direction}',
            )
        _convert_file(path, output, options.direction, options.strip)


if __name__ == '__main__':
    main()
