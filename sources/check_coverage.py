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

"""Checks that a legacy font covers every legacy glyph code.
"""


from __future__ import annotations


__all__ = [
    'main',
    'missing_glyphs',
]


import argparse
import logging
import sys
from typing import TYPE_CHECKING

from fontTools import configLogger
from fontTools.ttLib import TTFont

from glyphs import Glyph


if TYPE_CHECKING:
    from collections.abc import Sequence


log = logging.getLogger()


def missing_glyphs(font: TTFont) -> Sequence[Glyph]:
    """Returns the legacy glyphs a font does not map.

    Aliases are only reported once, under their canonical names.

    Args:
        font: A font.

    Returns:
        The glyphs whose code points are missing from the font’s best
        cmap, in code point order.
    """
    cmap = font.getBestCmap() or {}
    return sorted(glyph for glyph in Glyph if glyph not in cmap)


def main(args: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Check that a font covers the legacy Mongolian glyph codes.')
    parser.add_argument('font', metavar='FONT', help='font file to check')
    parser.add_argument('--face-index', type=int, default=0, help='the index of the font in a collection (default: %(default)s)')
    parser.add_argument('--verbose', action='store_true', help='Log more details.')
    options = parser.parse_args(args)

    configLogger(logger=log, level=logging.DEBUG if options.verbose else logging.INFO)

    with TTFont(options.font, fontNumber=options.face_index, lazy=True) as font:
        missing = missing_glyphs(font)
    for glyph in missing:
        log.warning('Missing U+%04X %s', glyph, glyph.name)
    log.debug('%d of %d glyphs missing', len(missing), len(Glyph))
    return 1 if missing else 0


if __name__ == '__main__':
    sys.exit(main())
