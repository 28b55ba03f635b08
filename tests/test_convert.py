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

import io
from typing import TYPE_CHECKING

import pytest

from convert import Direction
from convert import convert
from convert import main
from glyphs import Glyph
from utils import FVS1
from utils import Letter
from utils import WJ
from utils import cps_to_string


if TYPE_CHECKING:
    from pathlib import Path


UNICODE_TEXT = cps_to_string([Letter.NA, Letter.A, 0x20, Letter.A, FVS1, 0x1803])


LEGACY_TEXT = cps_to_string([Glyph.INIT_NA_STEM, Glyph.FINA_A, 0x20, Glyph.ISOL_A_FVS1, Glyph.FULL_STOP])


def test_directions() -> None:
    assert [*Direction] == [Direction.LEGACY, Direction.UNICODE]
    assert Direction('unicode') is Direction.UNICODE


def test_convert() -> None:
    assert convert(UNICODE_TEXT, Direction.LEGACY) == LEGACY_TEXT
    assert convert(LEGACY_TEXT, Direction.UNICODE) == UNICODE_TEXT


def test_convert_without_stripping() -> None:
    result = convert(UNICODE_TEXT, Direction.LEGACY, strip=False)
    assert len(result) == len(UNICODE_TEXT)
    assert result.replace(chr(WJ), '') == LEGACY_TEXT


def test_main_with_output_file(tmp_path: Path) -> None:
    input_path = tmp_path / 'input.txt'
    input_path.write_text(UNICODE_TEXT, encoding='utf-8')
    output_path = tmp_path / 'output.txt'
    main([str(input_path), '-o', str(output_path)])
    assert output_path.read_text(encoding='utf-8') == LEGACY_TEXT


def test_main_names_output_after_direction(tmp_path: Path) -> None:
    input_path = tmp_path / 'input.txt'
    input_path.write_text(LEGACY_TEXT, encoding='utf-8')
    main(['--direction', 'unicode', str(input_path)])
    assert (tmp_path / 'input-unicode.txt').read_text(encoding='utf-8') == UNICODE_TEXT


def test_main_does_not_overwrite(tmp_path: Path) -> None:
    input_path = tmp_path / 'input.txt'
    input_path.write_text(UNICODE_TEXT, encoding='utf-8')
    (tmp_path / 'input-legacy.txt').write_text('old', encoding='utf-8')
    main([str(input_path)])
    assert (tmp_path / 'input-legacy.txt').read_text(encoding='utf-8') == 'old'
    assert (tmp_path / 'input-legacy#1.txt').read_text(encoding='utf-8') == LEGACY_TEXT
    main(['--overwrite', str(input_path)])
    assert (tmp_path / 'input-legacy.txt').read_text(encoding='utf-8') == LEGACY_TEXT


def test_main_with_output_directory(tmp_path: Path) -> None:
    output_dir = tmp_path / 'out'
    output_dir.mkdir()
    paths = []
    for name in ['a.txt', 'b.txt']:
        path = tmp_path / name
        path.write_text(UNICODE_TEXT, encoding='utf-8')
        paths.append(str(path))
    main([*paths, '-o', str(output_dir), '--no-strip'])
    for name in ['a-legacy.txt', 'b-legacy.txt']:
        assert (output_dir / name).read_text(encoding='utf-8') == convert(UNICODE_TEXT, Direction.LEGACY, strip=False)


def test_main_rejects_file_output_for_several_inputs(tmp_path: Path) -> None:
    paths = []
    for name in ['a.txt', 'b.txt']:
        path = tmp_path / name
        path.write_text(UNICODE_TEXT, encoding='utf-8')
        paths.append(str(path))
    with pytest.raises(SystemExit):
        main([*paths, '-o', str(tmp_path / 'out.txt')])


def test_main_with_standard_streams(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr('sys.stdin', io.StringIO(LEGACY_TEXT))
    main(['--direction', 'unicode'])
    assert capsys.readouterr().out == UNICODE_TEXT


def test_main_rejects_unknown_direction() -> None:
    with pytest.raises(SystemExit):
        main(['--direction', 'sideways'])
