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

"""The forward shaper, from Unicode to legacy glyph codes.
"""


from __future__ import annotations


__all__ = [
    'shape_word',
]


import functools
from typing import Final
from typing import NamedTuple
from typing import TYPE_CHECKING
from typing import assert_never

from . import Step
from . import Word
from . import needs_long_tooth_u
from classifier import is_consonant
from classifier import is_feminine_vowel
from classifier import is_fvs
from classifier import is_masculine_vowel
from classifier import is_ou_vowel
from classifier import is_round_letter
from classifier import is_round_letter_including_qg
from classifier import is_todo
from classifier import is_vowel
from gender import get_gender_above
from glyphs import Glyph
from utils import FVS1
from utils import FVS2
from utils import FVS3
from utils import Gender
from utils import Letter
from utils import Location
from utils import MVS
from utils import NIRUGU
from utils import NNBS
from utils import Shape
from utils import WJ
from utils import ZWJ
from utils import ZWNJ
from utils import cps_to_string


if TYPE_CHECKING:
    from collections.abc import Mapping

    from . import Handler


def _is_feminine_context(cp: int) -> bool:
    return is_feminine_vowel(cp) or cp == Letter.I


def _is_two_part_name_initial_vowel(vowel: int, fvs: int) -> bool:
    """Returns whether a vowel looks like the start of the second part
    of a two-part name.

    There is no way to recognize E or EE, which have no second medial
    forms.
    """
    return (vowel in {Letter.A, Letter.I, Letter.O, Letter.U} and fvs == FVS1
        or vowel in {Letter.OE, Letter.UE} and fvs == FVS2
    )


def _a(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    word.gender = Gender.MASCULINE
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_A_FVS1 if step.fvs == FVS1 else Glyph.ISOL_A, shape
        case Location.INITIAL:
            return Glyph.MEDI_A_FVS2 if word.is_suffix else Glyph.INIT_A, shape
        case Location.MEDIAL:
            if step.fvs == FVS1:
                return Glyph.MEDI_A_FVS1, Shape.TOOTH
            if step.fvs == FVS2:
                return Glyph.MEDI_A_FVS2, Shape.TOOTH
            return Glyph.MEDI_A_BP if is_round_letter(step.above) else Glyph.MEDI_A, Shape.TOOTH
        case Location.FINAL:
            if step.fvs == FVS1:
                return Glyph.FINA_A_FVS1, Shape.STEM
            if is_round_letter(step.above):
                return Glyph.FINA_A_BP, Shape.TOOTH
            if step.above == MVS:
                return Glyph.FINA_A_MVS, Shape.STEM
            return Glyph.FINA_A, Shape.STEM
        case _:
            assert_never(step.location)


def _e(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    word.gender = Gender.FEMININE
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_E, shape
        case Location.INITIAL:
            return Glyph.INIT_E_FVS1 if step.fvs == FVS1 else Glyph.INIT_E, shape
        case Location.MEDIAL:
            return Glyph.MEDI_E_BP if is_round_letter_including_qg(step.above) else Glyph.MEDI_E, Shape.TOOTH
        case Location.FINAL:
            if step.fvs == FVS1:
                return Glyph.FINA_E_FVS1, Shape.STEM
            if is_round_letter_including_qg(step.above):
                return Glyph.FINA_E_BP, Shape.TOOTH
            if step.above == MVS:
                return Glyph.FINA_E_MVS, Shape.STEM
            return Glyph.FINA_E, Shape.STEM
        case _:
            assert_never(step.location)


def _needs_double_tooth_i(word: Word, step: Step) -> bool:
    """Returns whether a medial I is the second half of a diphthong.
    """
    if step.below == Letter.I:
        return False
    if step.above in {Letter.A, Letter.E, Letter.O, Letter.U}:
        return True
    return step.above in {Letter.OE, Letter.UE} and not needs_long_tooth_u(word.cps, step.index - 1)


def _i(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            glyph = Glyph.ISOL_I_SUFFIX if word.is_suffix else Glyph.ISOL_I
        case Location.INITIAL:
            glyph = Glyph.MEDI_I_SUFFIX if word.is_suffix and step.below == Letter.YA else Glyph.INIT_I
        case Location.MEDIAL:
            if step.fvs == FVS1:
                glyph = Glyph.MEDI_I_FVS1
            elif step.fvs == FVS2:
                # This overrides the diphthong rule, as in NAIMA.
                glyph = Glyph.MEDI_I
            elif is_round_letter_including_qg(step.above):
                glyph = Glyph.MEDI_I_BP
            elif _needs_double_tooth_i(word, step):
                glyph = Glyph.MEDI_I_DOUBLE_TOOTH
            else:
                glyph = Glyph.MEDI_I
        case Location.FINAL:
            glyph = Glyph.FINA_I_BP if is_round_letter_including_qg(step.above) else Glyph.FINA_I
        case _:
            assert_never(step.location)
    return glyph, Shape.TOOTH


def _o(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    word.gender = Gender.MASCULINE
    match step.location:
        case Location.ISOLATE:
            glyph = Glyph.FINA_O if word.is_suffix else Glyph.ISOL_O
        case Location.INITIAL:
            glyph = Glyph.MEDI_O_BP if word.is_suffix else Glyph.INIT_O
        case Location.MEDIAL:
            if step.fvs == FVS1:
                glyph = Glyph.MEDI_O_FVS1
            else:
                glyph = Glyph.MEDI_O_BP if is_round_letter(step.above) else Glyph.MEDI_O
        case Location.FINAL:
            if step.fvs == FVS1:
                glyph = Glyph.FINA_O_FVS1
            else:
                glyph = Glyph.FINA_O_BP if is_round_letter(step.above) else Glyph.FINA_O
        case _:
            assert_never(step.location)
    return glyph, Shape.STEM


def _u(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    word.gender = Gender.MASCULINE
    match step.location:
        case Location.ISOLATE:
            glyph = Glyph.FINA_U if word.is_suffix else Glyph.ISOL_U
        case Location.INITIAL:
            glyph = Glyph.MEDI_U_BP if word.is_suffix else Glyph.INIT_U
        case Location.MEDIAL:
            if step.fvs == FVS1:
                glyph = Glyph.MEDI_U_FVS1
            else:
                glyph = Glyph.MEDI_U_BP if is_round_letter(step.above) else Glyph.MEDI_U
        case Location.FINAL:
            if step.fvs == FVS1:
                glyph = Glyph.FINA_U_FVS1
            else:
                glyph = Glyph.FINA_U_BP if is_round_letter(step.above) else Glyph.FINA_U
        case _:
            assert_never(step.location)
    return glyph, Shape.STEM


class _FrontRoundedVowelGlyphs(NamedTuple):
    isol: Glyph
    isol_fvs1: Glyph | None
    init: Glyph
    medi: Glyph
    medi_bp: Glyph
    medi_fvs1: Glyph
    medi_fvs1_bp: Glyph
    medi_fvs2: Glyph
    fina: Glyph
    fina_bp: Glyph
    fina_fvs1: Glyph
    fina_fvs1_bp: Glyph


_OE_GLYPHS: Final[_FrontRoundedVowelGlyphs] = _FrontRoundedVowelGlyphs(
    isol=Glyph.ISOL_OE,
    isol_fvs1=None,
    init=Glyph.INIT_OE,
    medi=Glyph.MEDI_OE,
    medi_bp=Glyph.MEDI_OE_BP,
    medi_fvs1=Glyph.MEDI_OE_FVS1,
    medi_fvs1_bp=Glyph.MEDI_OE_FVS1_BP,
    medi_fvs2=Glyph.MEDI_OE_FVS2,
    fina=Glyph.FINA_OE,
    fina_bp=Glyph.FINA_OE_BP,
    fina_fvs1=Glyph.FINA_OE_FVS1,
    fina_fvs1_bp=Glyph.FINA_OE_FVS1_BP,
)


_UE_GLYPHS: Final[_FrontRoundedVowelGlyphs] = _FrontRoundedVowelGlyphs(
    isol=Glyph.ISOL_UE,
    isol_fvs1=Glyph.ISOL_UE_FVS1,
    init=Glyph.INIT_UE,
    medi=Glyph.MEDI_UE,
    medi_bp=Glyph.MEDI_UE_BP,
    medi_fvs1=Glyph.MEDI_UE_FVS1,
    medi_fvs1_bp=Glyph.MEDI_UE_FVS1_BP,
    medi_fvs2=Glyph.MEDI_UE_FVS2,
    fina=Glyph.FINA_UE,
    fina_bp=Glyph.FINA_UE_BP,
    fina_fvs1=Glyph.FINA_UE_FVS1,
    fina_fvs1_bp=Glyph.FINA_UE_FVS1_BP,
)


def _front_rounded_vowel(
    glyphs: _FrontRoundedVowelGlyphs,
    word: Word,
    step: Step,
    shape: Shape,
) -> tuple[int, Shape]:
    word.gender = Gender.FEMININE
    after_round_letter = is_round_letter_including_qg(step.above)
    match step.location:
        case Location.ISOLATE:
            if word.is_suffix:
                glyph = glyphs.fina
            elif step.fvs == FVS1 and glyphs.isol_fvs1 is not None:
                glyph = glyphs.isol_fvs1
            else:
                glyph = glyphs.isol
        case Location.INITIAL:
            glyph = glyphs.medi_bp if word.is_suffix else glyphs.init
        case Location.MEDIAL:
            if step.fvs == FVS2:
                # The extra tooth of a two-part name
                glyph = glyphs.medi_fvs2
            elif step.fvs == FVS1 or needs_long_tooth_u(word.cps, step.index):
                glyph = glyphs.medi_fvs1_bp if after_round_letter else glyphs.medi_fvs1
            else:
                glyph = glyphs.medi_bp if after_round_letter else glyphs.medi
        case Location.FINAL:
            if step.fvs == FVS1:
                glyph = glyphs.fina_fvs1_bp if after_round_letter else glyphs.fina_fvs1
            else:
                glyph = glyphs.fina_bp if after_round_letter else glyphs.fina
        case _:
            assert_never(step.location)
    return glyph, Shape.STEM


def _ee(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    word.gender = Gender.FEMININE
    return _POSITIONAL_FORMS[Letter.EE][step.location], Shape.TOOTH


def _na(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    stem = shape == Shape.STEM
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_NA, shape
        case Location.INITIAL:
            if step.fvs == FVS1:
                return Glyph.INIT_NA_FVS1_STEM, shape
            return Glyph.INIT_NA_STEM if stem else Glyph.INIT_NA_TOOTH, shape
        case Location.MEDIAL:
            if step.fvs == FVS1:
                return Glyph.MEDI_NA_FVS1_STEM if stem else Glyph.MEDI_NA_FVS1_TOOTH, Shape.TOOTH
            if step.fvs == FVS2:
                return Glyph.MEDI_NA_FVS2, Shape.STEM
            if step.fvs == FVS3:
                return Glyph.MEDI_NA_FVS3, Shape.TOOTH
            # N is dotted before a vowel, except at the end of the first
            # part of a two-part name.
            dotted = is_vowel(step.below) and not (
                step.index < len(word) - 3
                and is_fvs(word.cps[step.index + 2])
                and _is_two_part_name_initial_vowel(step.below, step.below_fvs)
            )
            if dotted:
                return Glyph.MEDI_NA_FVS1_STEM if stem else Glyph.MEDI_NA_FVS1_TOOTH, Shape.TOOTH
            return Glyph.MEDI_NA_STEM if stem else Glyph.MEDI_NA_TOOTH, Shape.TOOTH
        case Location.FINAL:
            return Glyph.MEDI_NA_FVS2 if step.below == MVS else Glyph.FINA_NA, Shape.STEM
        case _:
            assert_never(step.location)


def _ang(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            glyph = Glyph.ISOL_ANG
        case Location.INITIAL:
            glyph = {
                Shape.ROUND: Glyph.INIT_ANG_ROUND,
                Shape.STEM: Glyph.INIT_ANG_STEM,
                Shape.TOOTH: Glyph.INIT_ANG_TOOTH,
            }[shape]
        case Location.MEDIAL:
            glyph = {
                Shape.ROUND: Glyph.MEDI_ANG_ROUND,
                Shape.STEM: Glyph.MEDI_ANG_STEM,
                Shape.TOOTH: Glyph.MEDI_ANG_TOOTH,
            }[shape]
        case Location.FINAL:
            glyph = Glyph.FINA_ANG
        case _:
            assert_never(step.location)
    return glyph, Shape.TOOTH


class _RoundLetterGlyphs(NamedTuple):
    isol: Glyph
    init: Glyph
    init_ou: Glyph
    init_stem: Glyph
    medi_tooth: Glyph
    medi_ou: Glyph
    medi_stem: Glyph
    fina: Glyph
    fina_fvs1: Glyph


_ROUND_LETTER_GLYPHS: Final[Mapping[Letter, _RoundLetterGlyphs]] = {
    Letter.BA: _RoundLetterGlyphs(
        Glyph.ISOL_BA,
        Glyph.INIT_BA,
        Glyph.INIT_BA_OU,
        Glyph.INIT_BA_STEM,
        Glyph.MEDI_BA_TOOTH,
        Glyph.MEDI_BA_OU,
        Glyph.MEDI_BA_STEM,
        Glyph.FINA_BA,
        Glyph.FINA_BA_FVS1,
    ),
    Letter.PA: _RoundLetterGlyphs(
        Glyph.ISOL_PA,
        Glyph.INIT_PA,
        Glyph.INIT_PA_OU,
        Glyph.INIT_PA_STEM,
        Glyph.MEDI_PA_TOOTH,
        Glyph.MEDI_PA_OU,
        Glyph.MEDI_PA_STEM,
        Glyph.FINA_PA,
        Glyph.FINA_PA,
    ),
    Letter.FA: _RoundLetterGlyphs(
        Glyph.ISOL_FA,
        Glyph.INIT_FA,
        Glyph.INIT_FA_OU,
        Glyph.INIT_FA_STEM,
        Glyph.MEDI_FA_TOOTH,
        Glyph.MEDI_FA_OU,
        Glyph.MEDI_FA_STEM,
        Glyph.FINA_FA,
        Glyph.FINA_FA,
    ),
    # Initial KA and KHA have no stem forms.
    Letter.KA: _RoundLetterGlyphs(
        Glyph.ISOL_KA,
        Glyph.INIT_KA,
        Glyph.INIT_KA_OU,
        Glyph.INIT_KA,
        Glyph.MEDI_KA_TOOTH,
        Glyph.MEDI_KA_OU,
        Glyph.MEDI_KA_STEM,
        Glyph.FINA_KA,
        Glyph.FINA_KA,
    ),
    Letter.KHA: _RoundLetterGlyphs(
        Glyph.ISOL_KHA,
        Glyph.INIT_KHA,
        Glyph.INIT_KHA_OU,
        Glyph.INIT_KHA,
        Glyph.MEDI_KHA_TOOTH,
        Glyph.MEDI_KHA_OU,
        Glyph.MEDI_KHA_STEM,
        Glyph.FINA_KHA,
        Glyph.FINA_KHA,
    ),
}


def _round_letter(letter: Letter, word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    glyphs = _ROUND_LETTER_GLYPHS[letter]
    match step.location:
        case Location.ISOLATE:
            glyph = glyphs.isol
        case Location.INITIAL:
            if is_ou_vowel(step.below):
                glyph = glyphs.init_ou
            else:
                glyph = glyphs.init_stem if shape == Shape.STEM else glyphs.init
        case Location.MEDIAL:
            if is_ou_vowel(step.below):
                glyph = glyphs.medi_ou
            else:
                glyph = glyphs.medi_stem if shape == Shape.STEM else glyphs.medi_tooth
        case Location.FINAL:
            glyph = glyphs.fina_fvs1 if step.fvs == FVS1 else glyphs.fina
        case _:
            assert_never(step.location)
    return glyph, Shape.STEM


def _qa(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    stem = shape == Shape.STEM
    feminine = _is_feminine_context(step.below)
    ou = is_ou_vowel(step.below)
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_QA_FVS1 if step.fvs == FVS1 else Glyph.ISOL_QA, shape
        case Location.INITIAL:
            if step.fvs == FVS1:
                if feminine:
                    return Glyph.INIT_QA_FVS1_FEM_OU if ou else Glyph.INIT_QA_FVS1_FEM, shape
                return Glyph.INIT_QA_FVS1_STEM if stem else Glyph.INIT_QA_FVS1_TOOTH, shape
            if feminine:
                return Glyph.INIT_QA_FEM_OU if ou else Glyph.INIT_QA_FEM, shape
            return Glyph.INIT_QA_STEM if stem else Glyph.INIT_QA_TOOTH, shape
        case Location.MEDIAL:
            if step.fvs == FVS1:
                if feminine:
                    return Glyph.MEDI_QA_FVS1_FEM_OU if ou else Glyph.MEDI_QA_FVS1_FEM, Shape.ROUND
                if is_masculine_vowel(step.below):
                    return Glyph.MEDI_QA_FVS1, Shape.TOOTH
                if word.gender_above(step.index) == Gender.FEMININE:
                    return Glyph.MEDI_QA_FEM_CONSONANT_DOTTED, Shape.TOOTH
                return Glyph.MEDI_QA_FVS1, Shape.TOOTH
            if step.fvs == FVS2:
                return Glyph.MEDI_QA_FVS2, Shape.TOOTH
            if step.fvs == FVS3:
                return Glyph.MEDI_QA_FVS3, Shape.TOOTH
            if feminine:
                return Glyph.MEDI_QA_FEM_OU if ou else Glyph.MEDI_QA_FEM, Shape.ROUND
            if not is_masculine_vowel(step.below):
                gender = word.gender_above(step.index)
                if gender == Gender.FEMININE or gender == Gender.NEUTER and step.above == Letter.I:
                    return Glyph.MEDI_QA_FEM_CONSONANT, Shape.TOOTH
            return Glyph.MEDI_QA_STEM if stem else Glyph.MEDI_QA_TOOTH, Shape.TOOTH
        case Location.FINAL:
            return Glyph.FINA_QA, Shape.TOOTH
        case _:
            assert_never(step.location)


def _medial_ga_before_consonant(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    gender = word.gender_above(step.index)
    if not (gender == Gender.FEMININE
        or gender == Gender.NEUTER and step.above == Letter.I
        # A G between two consonants is feminine, as in ANGGLI, but Y
        # is like I.
        or step.above != Letter.YA and (is_consonant(step.above) or step.above == ZWJ)
    ):
        return Glyph.MEDI_GA, Shape.TOOTH
    if step.below in {Letter.NA, Letter.MA, Letter.LA}:
        if word.rendered[0] in {Glyph.FINA_MA, Glyph.FINA_LA, Glyph.FINA_NA, Glyph.MEDI_NA_FVS2}:
            # as in CHECHEGMA
            return Glyph.MEDI_GA_FVS3_STEM, Shape.ROUND
        return Glyph.MEDI_GA_FEM, Shape.ROUND
    return Glyph.MEDI_GA_FVS3_STEM if shape == Shape.STEM else Glyph.MEDI_GA_FVS3_TOOTH, Shape.ROUND


def _ga(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    stem = shape == Shape.STEM
    feminine = _is_feminine_context(step.below)
    ou = is_ou_vowel(step.below)
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_GA, shape
        case Location.INITIAL:
            if step.fvs == FVS1:
                # TODO: Choose a feminine form before a front vowel once
                # the legacy fonts have one.
                return Glyph.INIT_GA_FVS1_STEM if stem else Glyph.INIT_GA_FVS1_TOOTH, shape
            if feminine:
                return Glyph.INIT_GA_FEM_OU if ou else Glyph.INIT_GA_FEM, shape
            if is_consonant(step.below):
                # as in foreign words
                return Glyph.INIT_GA_FEM, shape
            return Glyph.INIT_GA_STEM if stem else Glyph.INIT_GA_TOOTH, shape
        case Location.MEDIAL:
            if step.fvs == FVS1:
                return Glyph.MEDI_GA_FVS1_STEM if stem else Glyph.MEDI_GA_FVS1_TOOTH, Shape.TOOTH
            if step.fvs == FVS2:
                return Glyph.MEDI_GA_FVS2, Shape.TOOTH
            if step.fvs == FVS3:
                return Glyph.MEDI_GA_FVS3_STEM if stem else Glyph.MEDI_GA_FVS3_TOOTH, Shape.TOOTH
            if feminine:
                return Glyph.MEDI_GA_FEM_OU if ou else Glyph.MEDI_GA_FEM, Shape.ROUND
            if is_masculine_vowel(step.below):
                return Glyph.MEDI_GA_FVS1_STEM if stem else Glyph.MEDI_GA_FVS1_TOOTH, Shape.TOOTH
            return _medial_ga_before_consonant(word, step, shape)
        case Location.FINAL:
            if step.fvs == FVS1:
                return Glyph.FINA_GA_FVS1, Shape.TOOTH
            if step.fvs == FVS2:
                return Glyph.FINA_GA_FVS2, Shape.TOOTH
            if step.below == MVS:
                return Glyph.MEDI_GA_FVS2, Shape.TOOTH
            word.gender = get_gender_above(step.index, word.cps)
            if word.gender == Gender.MASCULINE or step.above == ZWJ:
                return Glyph.FINA_GA, Shape.TOOTH
            return Glyph.FINA_GA_FVS2, Shape.TOOTH
        case _:
            assert_never(step.location)


class _TailedLetterGlyphs(NamedTuple):
    isol: Glyph
    init_tooth: Glyph
    init_stem_long: Glyph
    medi_tooth: Glyph
    medi_stem_long: Glyph
    medi_bp: Glyph
    fina: Glyph


_MA_GLYPHS: Final[_TailedLetterGlyphs] = _TailedLetterGlyphs(
    Glyph.ISOL_MA,
    Glyph.INIT_MA_TOOTH,
    Glyph.INIT_MA_STEM_LONG,
    Glyph.MEDI_MA_TOOTH,
    Glyph.MEDI_MA_STEM_LONG,
    Glyph.MEDI_MA_BP,
    Glyph.FINA_MA,
)


_LA_GLYPHS: Final[_TailedLetterGlyphs] = _TailedLetterGlyphs(
    Glyph.ISOL_LA,
    Glyph.INIT_LA_TOOTH,
    Glyph.INIT_LA_STEM_LONG,
    Glyph.MEDI_LA_TOOTH,
    Glyph.MEDI_LA_STEM_LONG,
    Glyph.MEDI_LA_BP,
    Glyph.FINA_LA,
)


def _tailed_letter(
    glyphs: _TailedLetterGlyphs,
    word: Word,
    step: Step,
    shape: Shape,
) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            return glyphs.isol, shape
        case Location.INITIAL:
            return glyphs.init_stem_long if shape == Shape.STEM else glyphs.init_tooth, shape
        case Location.MEDIAL:
            if is_round_letter(step.above) or step.above == Letter.ANG:
                glyph = glyphs.medi_bp
            elif step.above == Letter.GA:
                if word.gender_above(step.index) != Gender.MASCULINE or word.between_consonants(step.index):
                    glyph = glyphs.medi_bp
                else:
                    glyph = glyphs.medi_tooth
            elif shape != Shape.TOOTH or step.below in {Letter.MA, Letter.LA, Letter.LHA}:
                glyph = glyphs.medi_stem_long
            else:
                glyph = glyphs.medi_tooth
            return glyph, Shape.TOOTH
        case Location.FINAL:
            return glyphs.fina, Shape.STEM
        case _:
            assert_never(step.location)


def _sa(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    stem = shape == Shape.STEM
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_SA, shape
        case Location.INITIAL:
            return Glyph.INIT_SA_STEM if stem else Glyph.INIT_SA_TOOTH, shape
        case Location.MEDIAL:
            return Glyph.MEDI_SA_STEM if stem else Glyph.MEDI_SA_TOOTH, Shape.TOOTH
        case Location.FINAL:
            if step.fvs == FVS1:
                return Glyph.FINA_SA_FVS1, Shape.STEM
            if step.fvs == FVS2:
                return Glyph.FINA_SA_FVS2, Shape.TOOTH
            return Glyph.FINA_SA, Shape.TOOTH
        case _:
            assert_never(step.location)


def _sha(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    stem = shape == Shape.STEM
    match step.location:
        case Location.ISOLATE:
            glyph = Glyph.ISOL_SHA
        case Location.INITIAL:
            glyph = Glyph.INIT_SHA_STEM if stem else Glyph.INIT_SHA_TOOTH
        case Location.MEDIAL:
            glyph = Glyph.MEDI_SHA_STEM if stem else Glyph.MEDI_SHA_TOOTH
        case Location.FINAL:
            glyph = Glyph.FINA_SHA
        case _:
            assert_never(step.location)
    return glyph, Shape.TOOTH


def _ta(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    stem = shape == Shape.STEM
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_TA, shape
        case Location.INITIAL:
            return Glyph.INIT_TA_STEM if stem else Glyph.INIT_TA_TOOTH, shape
        case Location.MEDIAL:
            if step.fvs == FVS1:
                return Glyph.MEDI_TA_FVS1_STEM if stem else Glyph.MEDI_TA_FVS1_TOOTH, Shape.STEM
            return Glyph.MEDI_TA, Shape.TOOTH
        case Location.FINAL:
            return Glyph.FINA_TA, Shape.STEM
        case _:
            assert_never(step.location)


def _da(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_DA, shape
        case Location.INITIAL:
            if step.fvs == FVS1 or word.is_suffix:
                return Glyph.INIT_DA_FVS1, shape
            return Glyph.INIT_DA_STEM if shape == Shape.STEM else Glyph.INIT_DA_TOOTH, shape
        case Location.MEDIAL:
            if step.fvs == FVS1 or is_vowel(step.below):
                return Glyph.MEDI_DA_FVS1, Shape.TOOTH
            return Glyph.MEDI_DA, Shape.STEM
        case Location.FINAL:
            if step.fvs == FVS1:
                return Glyph.FINA_DA_FVS1, Shape.TOOTH
            return Glyph.FINA_DA, Shape.STEM
        case _:
            assert_never(step.location)


def _ja(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_JA, shape
        case Location.INITIAL:
            if step.below == MVS:
                return Glyph.MEDI_JA_FVS1, shape
            # `Glyph.INIT_JA_TOOTH` is broken in some legacy fonts, so the
            # stem form is used before a tooth too.
            return Glyph.INIT_JA_STEM, shape
        case Location.MEDIAL:
            if step.fvs == FVS1:
                return Glyph.MEDI_JA_FVS1, Shape.TOOTH
            return Glyph.MEDI_JA, Shape.STEM
        case Location.FINAL:
            if step.below == MVS:
                return Glyph.MEDI_JA_FVS1, Shape.TOOTH
            return Glyph.FINA_JA, Shape.STEM
        case _:
            assert_never(step.location)


def _medial_ya(word: Word, step: Step) -> int:
    if step.fvs == FVS1:
        return Glyph.MEDI_YA_FVS1
    if word.is_suffix and step.above == Letter.I:
        # no hook, as in IYEN and IYER
        return Glyph.MEDI_YA
    # A YI diphthong, as in AYI or UEYI, or Y before a consonant
    if needs_long_tooth_u(word.cps, step.index - 1) or step.above == Letter.I:
        if step.below == Letter.I or is_consonant(step.below):
            return Glyph.MEDI_YA
        return Glyph.MEDI_YA_FVS1
    if is_vowel(step.above):
        if step.below == Letter.I:
            return Glyph.MEDI_YA
        if is_consonant(step.below):
            return Glyph.MEDI_I_DOUBLE_TOOTH
    return Glyph.MEDI_YA_FVS1


def _ya(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            glyph = Glyph.ISOL_YA
        case Location.INITIAL:
            if word.is_suffix and step.below == Letter.I:
                glyph = Glyph.MEDI_YA
            elif step.fvs == FVS1:
                glyph = Glyph.INIT_YA_FVS1
            else:
                glyph = Glyph.INIT_YA
        case Location.MEDIAL:
            glyph = _medial_ya(word, step)
        case Location.FINAL:
            glyph = Glyph.FINA_YA
        case _:
            assert_never(step.location)
    return glyph, Shape.TOOTH


def _ra(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    stem = shape == Shape.STEM
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_RA, shape
        case Location.INITIAL:
            return Glyph.INIT_RA_STEM if stem else Glyph.INIT_RA_TOOTH, shape
        case Location.MEDIAL:
            return Glyph.MEDI_RA_STEM if stem else Glyph.MEDI_RA_TOOTH, Shape.TOOTH
        case Location.FINAL:
            return Glyph.FINA_RA, Shape.STEM
        case _:
            assert_never(step.location)


def _wa(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            return Glyph.ISOL_WA, shape
        case Location.INITIAL:
            return Glyph.INIT_WA, shape
        case Location.MEDIAL:
            return Glyph.MEDI_WA, Shape.TOOTH
        case Location.FINAL:
            if step.fvs == FVS1 or step.below == MVS:
                return Glyph.FINA_WA_FVS1, Shape.STEM
            return Glyph.FINA_WA, Shape.TOOTH
        case _:
            assert_never(step.location)


def _lha(word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    match step.location:
        case Location.ISOLATE:
            glyph = Glyph.ISOL_LHA
        case Location.INITIAL:
            glyph = Glyph.INIT_LHA
        case Location.MEDIAL:
            if (is_round_letter(step.above)
                or step.above == Letter.ANG
                or step.above in {Letter.QA, Letter.GA} and word.gender_above(step.index) == Gender.FEMININE
            ):
                glyph = Glyph.MEDI_LHA_BP
            else:
                glyph = Glyph.MEDI_LHA
        case Location.FINAL:
            glyph = Glyph.FINA_LHA
        case _:
            assert_never(step.location)
    return glyph, Shape.TOOTH


#: The glyphs of the letters with one form per position.
_POSITIONAL_FORMS: Final[Mapping[Letter, Mapping[Location, Glyph]]] = {
    letter: {
        Location.ISOLATE: Glyph[f'ISOL_{letter.name}'],
        Location.INITIAL: Glyph[f'INIT_{letter.name}'],
        Location.MEDIAL: Glyph[f'MEDI_{letter.name}'],
        Location.FINAL: Glyph[f'FINA_{letter.name}'],
    }
    for letter in [
        Letter.EE,
        Letter.CHA,
        Letter.TSA,
        Letter.ZA,
        Letter.HAA,
        Letter.ZRA,
        Letter.ZHI,
        Letter.CHI,
    ]
}


def _positional(letter: Letter, shape_above: Shape, word: Word, step: Step, shape: Shape) -> tuple[int, Shape]:
    return _POSITIONAL_FORMS[letter][step.location], shape_above


_HANDLERS: Final[Mapping[int, Handler]] = {
    Letter.A: _a,
    Letter.E: _e,
    Letter.I: _i,
    Letter.O: _o,
    Letter.U: _u,
    Letter.OE: functools.partial(_front_rounded_vowel, _OE_GLYPHS),
    Letter.UE: functools.partial(_front_rounded_vowel, _UE_GLYPHS),
    Letter.EE: _ee,
    Letter.NA: _na,
    Letter.ANG: _ang,
    Letter.BA: functools.partial(_round_letter, Letter.BA),
    Letter.PA: functools.partial(_round_letter, Letter.PA),
    Letter.QA: _qa,
    Letter.GA: _ga,
    Letter.MA: functools.partial(_tailed_letter, _MA_GLYPHS),
    Letter.LA: functools.partial(_tailed_letter, _LA_GLYPHS),
    Letter.SA: _sa,
    Letter.SHA: _sha,
    Letter.TA: _ta,
    Letter.DA: _da,
    Letter.CHA: functools.partial(_positional, Letter.CHA, Shape.STEM),
    Letter.JA: _ja,
    Letter.YA: _ya,
    Letter.RA: _ra,
    Letter.WA: _wa,
    Letter.FA: functools.partial(_round_letter, Letter.FA),
    Letter.KA: functools.partial(_round_letter, Letter.KA),
    Letter.KHA: functools.partial(_round_letter, Letter.KHA),
    Letter.TSA: functools.partial(_positional, Letter.TSA, Shape.STEM),
    Letter.ZA: functools.partial(_positional, Letter.ZA, Shape.STEM),
    Letter.HAA: functools.partial(_positional, Letter.HAA, Shape.TOOTH),
    Letter.ZRA: functools.partial(_positional, Letter.ZRA, Shape.STEM),
    Letter.LHA: _lha,
    Letter.ZHI: functools.partial(_positional, Letter.ZHI, Shape.TOOTH),
    Letter.CHI: functools.partial(_positional, Letter.CHI, Shape.STEM),
}


assert _HANDLERS.keys() == {*Letter}, f'Letters without handlers: { {*Letter} - _HANDLERS.keys() }'


def shape_word(text: str) -> str:
    """Converts one Mongolian word to legacy glyph codes.

    The output has one code per input code point. Each control
    character, like a free variation selector or a zero width joiner,
    becomes a word joiner, so indices in the input and the output line
    up.

    Args:
        text: A run of Mongolian code points, optionally starting with a
            narrow no-break space.

    Returns:
        The glyph codes for `text`, or `text` itself if it contains any
        Todo letters, which legacy fonts do not support.
    """
    word = Word(text)
    shape = Shape.STEM
    below = 0
    below_fvs = 0
    fvs = 0
    for index in reversed(range(len(word))):
        cp = word.cps[index]
        if (handler := _HANDLERS.get(cp)) is not None:
            step = Step(
                index,
                word.location(index, below, fvs),
                fvs,
                word.cps[index - 1] if index else 0,
                below,
                below_fvs,
            )
            glyph, shape = handler(word, step, shape)
            word.rendered.appendleft(glyph)
        elif cp == NNBS:
            word.rendered.appendleft(Glyph.SUFFIX_SPACE)
        elif cp == NIRUGU:
            word.rendered.appendleft(Glyph.NIRUGU)
            shape = Shape.STEM
        elif cp in {ZWJ, ZWNJ, MVS}:
            word.rendered.appendleft(WJ)
        elif is_fvs(cp):
            word.rendered.appendleft(WJ)
            fvs = cp
            continue
        elif is_todo(cp):
            return text
        else:
            word.rendered.appendleft(cp)
        below = cp
        below_fvs = fvs
        fvs = 0
    return cps_to_string(word.rendered)
