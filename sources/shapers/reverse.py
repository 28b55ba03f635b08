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

"""The reverse shaper, from legacy glyph codes to Unicode.

A legacy glyph shows which form of a letter was drawn, but not why, so
the reverse shaper cannot always recover the original text. When a
glyph is not the form that Unicode’s default shaping would choose in
its position, the decoder adds a zero width joiner or a free variation
selector to force that form. Some glyphs have no Unicode equivalent and
are decoded as the letter they most resemble.
"""


from __future__ import annotations


__all__ = [
    'FINAL_OR_ISOLATE_GLYPHS',
    'INITIAL_OR_ISOLATE_GLYPHS',
    'unshape_word',
]


import functools
from typing import Final
from typing import TYPE_CHECKING

from . import GlyphStep
from . import needs_long_tooth_u
from gender import get_word_gender
from glyphs import Glyph
from glyphs import LETTER_START
from glyphs import glyph_letter
from glyphs import is_consonant_glyph
from glyphs import is_letter_glyph
from glyphs import is_vowel_glyph
from punctuation import from_glyph
from utils import FVS1
from utils import FVS2
from utils import FVS3
from utils import Gender
from utils import Letter
from utils import Location
from utils import MVS
from utils import NNBS
from utils import SPACE
from utils import ZWJ
from utils import cps_to_string
from utils import string_to_cps


if TYPE_CHECKING:
    from collections.abc import Mapping
    from collections.abc import Sequence
    from collections.abc import Set as AbstractSet

    from . import Decoder


#: The glyphs that can only start a word.
INITIAL_OR_ISOLATE_GLYPHS: Final[AbstractSet[int]] = frozenset({
    Glyph.ISOL_A,
    Glyph.ISOL_A_FVS1,
    Glyph.INIT_A,
    Glyph.MEDI_A_FVS2,
    Glyph.ISOL_E,
    Glyph.INIT_E,
    Glyph.INIT_E_FVS1,
    Glyph.ISOL_I,
    Glyph.ISOL_I_SUFFIX,
    Glyph.INIT_I,
    Glyph.INIT_O,
    Glyph.ISOL_O,
    Glyph.ISOL_U,
    Glyph.ISOL_U_ALT,
    Glyph.ISOL_OE,
    Glyph.INIT_OE,
    Glyph.ISOL_OE_FVS1,
    Glyph.INIT_UE,
    Glyph.ISOL_UE_ALT,
    Glyph.ISOL_UE_FVS1,
    Glyph.ISOL_EE,
    Glyph.INIT_EE,
    Glyph.INIT_NA_STEM,
    Glyph.INIT_NA_TOOTH,
    Glyph.INIT_NA_FVS1_STEM,
    Glyph.INIT_NA_FVS1_TOOTH,
    Glyph.INIT_BA,
    Glyph.INIT_BA_OU,
    Glyph.INIT_BA_STEM,
    Glyph.INIT_PA,
    Glyph.INIT_PA_OU,
    Glyph.INIT_PA_STEM,
    Glyph.INIT_QA_FEM,
    Glyph.INIT_QA_FEM_OU,
    Glyph.INIT_QA_FVS1_FEM,
    Glyph.INIT_QA_FVS1_FEM_OU,
    Glyph.INIT_QA_FVS1_STEM,
    Glyph.INIT_QA_FVS1_TOOTH,
    Glyph.INIT_QA_STEM,
    Glyph.INIT_QA_TOOTH,
    Glyph.INIT_GA_FEM,
    Glyph.INIT_GA_FEM_OU,
    Glyph.INIT_GA_FVS1_STEM,
    Glyph.INIT_GA_FVS1_TOOTH,
    Glyph.INIT_GA_STEM,
    Glyph.INIT_GA_TOOTH,
    Glyph.INIT_MA_TOOTH,
    Glyph.INIT_MA_STEM_LONG,
    Glyph.INIT_LA_TOOTH,
    Glyph.INIT_LA_STEM_LONG,
    Glyph.INIT_SA_STEM,
    Glyph.INIT_SA_TOOTH,
    Glyph.INIT_SHA_STEM,
    Glyph.INIT_SHA_TOOTH,
    Glyph.INIT_TA_STEM,
    Glyph.INIT_TA_TOOTH,
    Glyph.INIT_DA_FVS1,
    Glyph.INIT_DA_STEM,
    Glyph.INIT_DA_TOOTH,
    Glyph.INIT_CHA,
    Glyph.INIT_JA_STEM,
    Glyph.INIT_JA_TOOTH,
    Glyph.INIT_YA,
    Glyph.INIT_YA_FVS1,
    Glyph.INIT_RA_STEM,
    Glyph.INIT_RA_TOOTH,
    Glyph.INIT_WA,
    Glyph.INIT_FA,
    Glyph.INIT_FA_OU,
    Glyph.INIT_FA_STEM,
    Glyph.INIT_KA,
    Glyph.INIT_KA_OU,
    Glyph.INIT_KHA,
    Glyph.INIT_KHA_OU,
    Glyph.INIT_TSA,
    Glyph.INIT_ZA,
    Glyph.INIT_HAA,
    Glyph.INIT_ZRA,
    Glyph.INIT_LHA,
})


#: The glyphs that can only end a word.
FINAL_OR_ISOLATE_GLYPHS: Final[AbstractSet[int]] = frozenset({
    Glyph.ISOL_A,
    Glyph.ISOL_A_FVS1,
    Glyph.FINA_A,
    Glyph.FINA_A_BP,
    Glyph.FINA_A_FVS1,
    Glyph.FINA_A_MVS,
    Glyph.ISOL_E,
    Glyph.FINA_E,
    Glyph.FINA_E_BP,
    Glyph.FINA_E_MVS,
    Glyph.ISOL_I,
    Glyph.ISOL_I_SUFFIX,
    Glyph.FINA_I,
    Glyph.FINA_I_BP,
    Glyph.ISOL_O,
    Glyph.FINA_O,
    Glyph.FINA_O_FVS1,
    Glyph.ISOL_U,
    Glyph.FINA_U,
    Glyph.FINA_U_BP,
    Glyph.FINA_U_FVS1,
    Glyph.ISOL_OE,
    Glyph.ISOL_OE_FVS1,
    Glyph.FINA_OE,
    Glyph.FINA_OE_BP,
    Glyph.FINA_OE_FVS1,
    Glyph.FINA_OE_FVS1_BP,
    Glyph.FINA_OE_FVS2,
    Glyph.ISOL_UE,
    Glyph.ISOL_UE_FVS1,
    Glyph.FINA_UE,
    Glyph.FINA_UE_BP,
    Glyph.FINA_UE_FVS1,
    Glyph.FINA_UE_FVS1_BP,
    Glyph.FINA_UE_FVS2,
    Glyph.ISOL_EE,
    Glyph.FINA_EE,
    Glyph.FINA_NA,
    Glyph.FINA_ANG,
    Glyph.FINA_BA,
    Glyph.FINA_BA_FVS1,
    Glyph.FINA_PA,
    Glyph.FINA_QA,
    Glyph.FINA_GA,
    Glyph.FINA_GA_FVS2,
    Glyph.FINA_MA,
    Glyph.FINA_LA,
    Glyph.FINA_SA,
    Glyph.FINA_SA_FVS1,
    Glyph.FINA_SHA,
    Glyph.FINA_TA,
    Glyph.FINA_DA,
    Glyph.FINA_DA_FVS1,
    Glyph.FINA_CHA,
    Glyph.FINA_JA,
    Glyph.FINA_YA,
    Glyph.FINA_RA,
    Glyph.FINA_WA,
    Glyph.FINA_WA_FVS1,
    Glyph.FINA_FA,
    Glyph.FINA_KA,
    Glyph.FINA_KHA,
    Glyph.FINA_TSA,
    Glyph.FINA_ZA,
    Glyph.FINA_HAA,
    Glyph.FINA_ZRA,
})


#: The space glyphs and the ASCII space.
_SPACES: Final[AbstractSet[int]] = frozenset({SPACE, Glyph.UNKNOWN_SPACE, Glyph.SUFFIX_SPACE})


#: The glyphs after which a space is decoded as a narrow no-break space,
#: because they only occur at the start of a suffix.
_SUFFIX_STARTS: Final[AbstractSet[int]] = frozenset({
    Glyph.MEDI_A_FVS2,
    Glyph.FINA_I,
    Glyph.MEDI_I,
    Glyph.MEDI_I_SUFFIX,
    Glyph.ISOL_I_SUFFIX,
    Glyph.MEDI_O,
    Glyph.MEDI_O_BP,
    Glyph.FINA_O,
    Glyph.MEDI_U,
    Glyph.MEDI_U_BP,
    Glyph.FINA_U,
    Glyph.MEDI_OE,
    Glyph.MEDI_OE_BP,
    Glyph.FINA_OE,
    Glyph.MEDI_UE,
    Glyph.MEDI_UE_BP,
    Glyph.FINA_UE,
    Glyph.FINA_YA,
    Glyph.INIT_YA_FVS1,
})


def _joined_above(letter: Letter) -> Sequence[int]:
    return ZWJ, letter


def _joined_below(letter: Letter) -> Sequence[int]:
    return letter, ZWJ


def _joined_both(letter: Letter) -> Sequence[int]:
    return ZWJ, letter, ZWJ


#: The decodings of glyphs that do not depend on their neighbors. A
#: glyph that is missing from the table for its location decodes as its
#: letter.
_TABLES: Final[Mapping[Letter, Mapping[Location, Mapping[int, Sequence[int]]]]] = {
    Letter.A: {
        Location.ISOLATE: {
            Glyph.ISOL_A_FVS1: (Letter.A, FVS1),
            Glyph.INIT_A: _joined_below(Letter.A),
            Glyph.MEDI_A_FVS2: (Letter.A, FVS2, ZWJ),
            Glyph.FINA_A: _joined_above(Letter.A),
            **dict.fromkeys([Glyph.FINA_A_BP, Glyph.FINA_A_FVS1, Glyph.FINA_A_MVS], (ZWJ, Letter.A, FVS1)),
            **dict.fromkeys([Glyph.MEDI_A, Glyph.MEDI_A_BP, Glyph.MEDI_A_UNKNOWN], _joined_both(Letter.A)),
            Glyph.MEDI_A_FVS1: (ZWJ, Letter.A, FVS1, ZWJ),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.MEDI_A, Glyph.MEDI_A_BP, Glyph.MEDI_A_UNKNOWN], _joined_above(Letter.A)),
            Glyph.MEDI_A_FVS1: (ZWJ, Letter.A, FVS1),
        },
        Location.MEDIAL: {
            Glyph.MEDI_A_FVS1: (Letter.A, FVS1),
        },
        Location.FINAL: {
            Glyph.FINA_A_MVS: (MVS, Letter.A),
            **dict.fromkeys([Glyph.MEDI_A, Glyph.MEDI_A_BP, Glyph.MEDI_A_UNKNOWN], _joined_below(Letter.A)),
            Glyph.MEDI_A_FVS1: (Letter.A, FVS1, ZWJ),
        },
    },
    Letter.E: {
        Location.ISOLATE: {
            Glyph.INIT_E: _joined_below(Letter.E),
            Glyph.INIT_E_FVS1: (Letter.E, FVS1, ZWJ),
            Glyph.FINA_E: _joined_above(Letter.E),
            **dict.fromkeys([Glyph.FINA_E_BP, Glyph.FINA_E_FVS1, Glyph.FINA_E_MVS], (ZWJ, Letter.E, FVS1)),
            **dict.fromkeys([Glyph.MEDI_E, Glyph.MEDI_E_BP, Glyph.MEDI_E_UNKNOWN], _joined_both(Letter.E)),
        },
        Location.INITIAL: {
            Glyph.INIT_E_FVS1: (Letter.E, FVS1),
            **dict.fromkeys([Glyph.MEDI_E, Glyph.MEDI_E_BP, Glyph.MEDI_E_UNKNOWN], _joined_above(Letter.E)),
        },
        Location.FINAL: {
            Glyph.FINA_E_MVS: (MVS, Letter.E),
            **dict.fromkeys([Glyph.MEDI_E, Glyph.MEDI_E_BP, Glyph.MEDI_E_UNKNOWN], _joined_below(Letter.E)),
        },
    },
    Letter.I: {
        Location.ISOLATE: {
            Glyph.INIT_I: _joined_below(Letter.I),
            **dict.fromkeys([Glyph.MEDI_I, Glyph.MEDI_I_BP, Glyph.MEDI_I_SUFFIX], _joined_both(Letter.I)),
            Glyph.MEDI_I_FVS1: (ZWJ, Letter.I, FVS1, ZWJ),
            Glyph.MEDI_I_DOUBLE_TOOTH: (ZWJ, Letter.YA, Letter.I, ZWJ),
        },
        Location.INITIAL: {
            Glyph.MEDI_I_FVS1: (ZWJ, Letter.I, FVS1),
            Glyph.MEDI_I_DOUBLE_TOOTH: (ZWJ, Letter.YA, Letter.I),
        },
        Location.MEDIAL: {
            Glyph.MEDI_I_FVS1: (Letter.I, FVS1),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.MEDI_I, Glyph.MEDI_I_BP, Glyph.MEDI_I_SUFFIX], _joined_below(Letter.I)),
            Glyph.MEDI_I_FVS1: (Letter.I, FVS1, ZWJ),
            Glyph.MEDI_I_DOUBLE_TOOTH: (Letter.YA, Letter.I, ZWJ),
        },
    },
    Letter.O: {
        Location.ISOLATE: {
            Glyph.INIT_O: _joined_below(Letter.O),
            **dict.fromkeys([Glyph.FINA_O_FVS1, Glyph.FINA_O_BP], (ZWJ, Letter.O, FVS1)),
            Glyph.MEDI_O_FVS1: (ZWJ, Letter.O, FVS1, ZWJ),
            **dict.fromkeys([Glyph.MEDI_O, Glyph.MEDI_O_BP], _joined_both(Letter.O)),
        },
        Location.INITIAL: {
            Glyph.MEDI_O_FVS1: (ZWJ, Letter.O, FVS1),
            **dict.fromkeys([Glyph.MEDI_O, Glyph.MEDI_O_BP], _joined_above(Letter.O)),
        },
        Location.MEDIAL: {
            Glyph.MEDI_O_FVS1: (Letter.O, FVS1),
        },
        Location.FINAL: {
            Glyph.FINA_O_FVS1: (Letter.O, FVS1),
            Glyph.MEDI_O_FVS1: (Letter.O, FVS1, ZWJ),
            **dict.fromkeys([Glyph.MEDI_O, Glyph.MEDI_O_BP], _joined_below(Letter.O)),
        },
    },
    Letter.U: {
        Location.ISOLATE: {
            Glyph.INIT_U: _joined_below(Letter.U),
            **dict.fromkeys([Glyph.FINA_U_FVS1, Glyph.FINA_U_BP], (ZWJ, Letter.U, FVS1)),
            Glyph.MEDI_U_FVS1: (ZWJ, Letter.U, FVS1, ZWJ),
            **dict.fromkeys([Glyph.MEDI_U, Glyph.MEDI_U_BP], _joined_both(Letter.U)),
        },
        Location.INITIAL: {
            Glyph.MEDI_U_FVS1: (ZWJ, Letter.U, FVS1),
        },
        Location.MEDIAL: {
            Glyph.MEDI_U_FVS1: (Letter.U, FVS1),
        },
        Location.FINAL: {
            Glyph.FINA_U_FVS1: (Letter.U, FVS1),
            Glyph.MEDI_U_FVS1: (Letter.U, FVS1, ZWJ),
            **dict.fromkeys([Glyph.MEDI_U, Glyph.MEDI_U_BP], _joined_below(Letter.U)),
        },
    },
    Letter.OE: {
        Location.ISOLATE: {
            # Unicode has no isolated OE with FVS1, but UE looks the same.
            Glyph.ISOL_OE_FVS1: (Letter.UE, FVS1),
            Glyph.INIT_OE: _joined_below(Letter.OE),
            **dict.fromkeys([Glyph.FINA_OE_FVS1, Glyph.FINA_OE_FVS1_BP], (ZWJ, Letter.OE, FVS1)),
            # Unicode has no equivalent.
            **dict.fromkeys([Glyph.FINA_OE_FVS2, Glyph.FINA_OE_BP], (ZWJ, Letter.O, FVS1)),
            Glyph.MEDI_OE_FVS2: (ZWJ, Letter.OE, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_OE, Glyph.MEDI_OE_BP], _joined_both(Letter.OE)),
            **dict.fromkeys([Glyph.MEDI_OE_FVS1, Glyph.MEDI_OE_FVS1_BP], (ZWJ, Letter.OE, FVS1, ZWJ)),
        },
        Location.INITIAL: {
            Glyph.MEDI_OE_FVS2: (ZWJ, Letter.OE, FVS2),
            **dict.fromkeys([Glyph.MEDI_OE, Glyph.MEDI_OE_BP], _joined_above(Letter.OE)),
            **dict.fromkeys([Glyph.MEDI_OE_FVS1, Glyph.MEDI_OE_FVS1_BP], (ZWJ, Letter.OE, FVS1)),
        },
        Location.MEDIAL: {
            Glyph.MEDI_OE_FVS2: (Letter.OE, FVS2),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.FINA_OE_FVS1, Glyph.FINA_OE_FVS1_BP], (Letter.OE, FVS1)),
            Glyph.MEDI_OE_FVS2: (Letter.OE, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_OE, Glyph.MEDI_OE_BP], _joined_below(Letter.OE)),
            **dict.fromkeys([Glyph.MEDI_OE_FVS1, Glyph.MEDI_OE_FVS1_BP], (Letter.OE, FVS1, ZWJ)),
        },
    },
    Letter.UE: {
        Location.ISOLATE: {
            Glyph.ISOL_UE_FVS1: (Letter.UE, FVS1),
            Glyph.INIT_UE: _joined_below(Letter.UE),
            **dict.fromkeys([Glyph.FINA_UE_FVS1, Glyph.FINA_UE_FVS1_BP], (ZWJ, Letter.UE, FVS1)),
            # Unicode has no equivalent.
            **dict.fromkeys([Glyph.FINA_UE_FVS2, Glyph.FINA_UE_BP], (ZWJ, Letter.U, FVS1)),
            Glyph.MEDI_UE_FVS2: (ZWJ, Letter.UE, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_UE, Glyph.MEDI_UE_BP], _joined_both(Letter.UE)),
            **dict.fromkeys([Glyph.MEDI_UE_FVS1, Glyph.MEDI_UE_FVS1_BP], (ZWJ, Letter.UE, FVS1, ZWJ)),
        },
        Location.INITIAL: {
            Glyph.MEDI_UE_FVS2: (ZWJ, Letter.UE, FVS2),
            **dict.fromkeys([Glyph.MEDI_UE_FVS1, Glyph.MEDI_UE_FVS1_BP], (ZWJ, Letter.UE, FVS1)),
        },
        Location.MEDIAL: {
            Glyph.MEDI_UE_FVS2: (Letter.UE, FVS2),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.FINA_UE_FVS1, Glyph.FINA_UE_FVS1_BP], (Letter.UE, FVS1)),
            Glyph.MEDI_UE_FVS2: (Letter.UE, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_UE, Glyph.MEDI_UE_BP], _joined_below(Letter.UE)),
            **dict.fromkeys([Glyph.MEDI_UE_FVS1, Glyph.MEDI_UE_FVS1_BP], (Letter.UE, FVS1, ZWJ)),
        },
    },
    Letter.EE: {
        Location.ISOLATE: {
            Glyph.INIT_EE: _joined_below(Letter.EE),
            Glyph.MEDI_EE: _joined_both(Letter.EE),
            Glyph.FINA_EE: _joined_above(Letter.EE),
        },
        Location.INITIAL: {
            Glyph.MEDI_EE: _joined_above(Letter.EE),
        },
        Location.FINAL: {
            Glyph.MEDI_EE: _joined_below(Letter.EE),
        },
    },
    Letter.NA: {
        Location.ISOLATE: {
            **dict.fromkeys([Glyph.INIT_NA_FVS1_STEM, Glyph.INIT_NA_FVS1_TOOTH], (Letter.NA, FVS1, ZWJ)),
            Glyph.FINA_NA: _joined_above(Letter.NA),
            Glyph.MEDI_NA_FVS2: (ZWJ, Letter.NA, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_NA_STEM, Glyph.MEDI_NA_TOOTH, Glyph.MEDI_NA_NG], _joined_both(Letter.NA)),
            **dict.fromkeys(
                [Glyph.MEDI_NA_FVS1_STEM, Glyph.MEDI_NA_FVS1_TOOTH, Glyph.MEDI_NA_FVS1_NG],
                (ZWJ, Letter.NA, FVS1, ZWJ),
            ),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.INIT_NA_FVS1_STEM, Glyph.INIT_NA_FVS1_TOOTH], (Letter.NA, FVS1)),
        },
        Location.FINAL: {
            Glyph.MEDI_NA_FVS2: (Letter.NA, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_NA_STEM, Glyph.MEDI_NA_TOOTH, Glyph.MEDI_NA_NG], _joined_below(Letter.NA)),
            **dict.fromkeys(
                [Glyph.MEDI_NA_FVS1_STEM, Glyph.MEDI_NA_FVS1_TOOTH, Glyph.MEDI_NA_FVS1_NG],
                (Letter.NA, FVS1, ZWJ),
            ),
        },
    },
    Letter.ANG: {
        Location.ISOLATE: {
            Glyph.FINA_ANG: _joined_above(Letter.ANG),
        },
    },
    Letter.BA: {
        Location.ISOLATE: {
            Glyph.FINA_BA: _joined_above(Letter.BA),
            Glyph.FINA_BA_FVS1: (ZWJ, Letter.BA, FVS1),
        },
    },
    Letter.PA: {
        Location.ISOLATE: {
            Glyph.FINA_PA: _joined_above(Letter.PA),
        },
    },
    Letter.QA: {
        Location.ISOLATE: {
            **dict.fromkeys(
                [
                    Glyph.ISOL_QA_FVS1,
                    Glyph.INIT_QA_FVS1_FEM_OU,
                    Glyph.MEDI_QA_FVS1_FEM,
                    Glyph.MEDI_QA_FVS1_FEM_OU,
                    Glyph.MEDI_QA_FEM_CONSONANT_DOTTED,
                ],
                (Letter.QA, FVS1),
            ),
            # A dotted masculine Q is a G.
            **dict.fromkeys([Glyph.INIT_QA_FVS1_STEM, Glyph.INIT_QA_FVS1_TOOTH], (Letter.GA,)),
            Glyph.FINA_QA: _joined_above(Letter.QA),
            Glyph.MEDI_QA_FEM_CONSONANT: (ZWJ, Letter.GA, FVS3, ZWJ),
            Glyph.MEDI_QA_FVS1: _joined_both(Letter.GA),
            Glyph.MEDI_QA_FVS2: (ZWJ, Letter.GA, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_QA_STEM, Glyph.MEDI_QA_TOOTH], _joined_both(Letter.QA)),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.INIT_QA_FVS1_STEM, Glyph.INIT_QA_FVS1_TOOTH], (Letter.GA,)),
            **dict.fromkeys([Glyph.MEDI_QA_STEM, Glyph.MEDI_QA_TOOTH], _joined_above(Letter.QA)),
        },
        Location.MEDIAL: {
            **dict.fromkeys([Glyph.MEDI_QA_FVS1, Glyph.MEDI_QA_FVS2], (Letter.GA,)),
        },
        Location.FINAL: {
            Glyph.MEDI_QA_FEM_CONSONANT: (Letter.GA, FVS3, ZWJ),
            Glyph.MEDI_QA_FVS1: _joined_below(Letter.GA),
            Glyph.MEDI_QA_FVS2: (Letter.GA, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_QA_STEM, Glyph.MEDI_QA_TOOTH], _joined_below(Letter.QA)),
        },
    },
    Letter.GA: {
        Location.ISOLATE: {
            # An undotted masculine G is a Q.
            **dict.fromkeys([Glyph.INIT_GA_FVS1_STEM, Glyph.INIT_GA_FVS1_TOOTH], (Letter.QA,)),
            Glyph.FINA_GA: _joined_above(Letter.GA),
            Glyph.FINA_GA_FVS2: (ZWJ, Letter.GA, FVS2),
            Glyph.MEDI_GA: _joined_both(Letter.GA),
            **dict.fromkeys([Glyph.MEDI_GA_FVS1_STEM, Glyph.MEDI_GA_FVS1_TOOTH], (ZWJ, Letter.GA, FVS1, ZWJ)),
            Glyph.MEDI_GA_FVS2: (ZWJ, Letter.GA, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_GA_FVS3_STEM, Glyph.MEDI_GA_FVS3_TOOTH], (ZWJ, Letter.GA, FVS3, ZWJ)),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.INIT_GA_FVS1_STEM, Glyph.INIT_GA_FVS1_TOOTH], (Letter.QA,)),
        },
        Location.FINAL: {
            Glyph.MEDI_GA: _joined_below(Letter.GA),
            **dict.fromkeys([Glyph.MEDI_GA_FVS1_STEM, Glyph.MEDI_GA_FVS1_TOOTH], (Letter.GA, FVS1, ZWJ)),
            Glyph.MEDI_GA_FVS2: (Letter.GA, FVS2, ZWJ),
            **dict.fromkeys([Glyph.MEDI_GA_FVS3_STEM, Glyph.MEDI_GA_FVS3_TOOTH], (Letter.GA, FVS3, ZWJ)),
        },
    },
    Letter.MA: {
        Location.ISOLATE: {
            Glyph.FINA_MA: _joined_above(Letter.MA),
            **dict.fromkeys([Glyph.MEDI_MA_BP, Glyph.MEDI_MA_STEM_LONG, Glyph.MEDI_MA_TOOTH], _joined_both(Letter.MA)),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.MEDI_MA_BP, Glyph.MEDI_MA_STEM_LONG, Glyph.MEDI_MA_TOOTH], _joined_above(Letter.MA)),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.MEDI_MA_BP, Glyph.MEDI_MA_STEM_LONG, Glyph.MEDI_MA_TOOTH], _joined_below(Letter.MA)),
        },
    },
    Letter.LA: {
        Location.ISOLATE: {
            Glyph.FINA_LA: _joined_above(Letter.LA),
            **dict.fromkeys([Glyph.MEDI_LA_BP, Glyph.MEDI_LA_STEM_LONG, Glyph.MEDI_LA_TOOTH], _joined_both(Letter.LA)),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.MEDI_LA_BP, Glyph.MEDI_LA_STEM_LONG, Glyph.MEDI_LA_TOOTH], _joined_above(Letter.LA)),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.MEDI_LA_BP, Glyph.MEDI_LA_STEM_LONG, Glyph.MEDI_LA_TOOTH], _joined_below(Letter.LA)),
        },
    },
    Letter.SA: {
        Location.ISOLATE: {
            Glyph.FINA_SA: _joined_above(Letter.SA),
            Glyph.FINA_SA_FVS1: (ZWJ, Letter.SA, FVS1),
            **dict.fromkeys([Glyph.MEDI_SA_STEM, Glyph.MEDI_SA_TOOTH], _joined_both(Letter.SA)),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.MEDI_SA_STEM, Glyph.MEDI_SA_TOOTH], _joined_above(Letter.SA)),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.MEDI_SA_STEM, Glyph.MEDI_SA_TOOTH], _joined_below(Letter.SA)),
        },
    },
    Letter.SHA: {
        Location.ISOLATE: {
            Glyph.FINA_SHA: _joined_above(Letter.SHA),
            **dict.fromkeys([Glyph.MEDI_SHA_STEM, Glyph.MEDI_SHA_TOOTH], _joined_both(Letter.SHA)),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.MEDI_SHA_STEM, Glyph.MEDI_SHA_TOOTH], _joined_above(Letter.SHA)),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.MEDI_SHA_STEM, Glyph.MEDI_SHA_TOOTH], _joined_below(Letter.SHA)),
        },
    },
    Letter.TA: {
        Location.ISOLATE: {
            Glyph.FINA_TA: _joined_above(Letter.TA),
            Glyph.MEDI_TA: _joined_both(Letter.TA),
            **dict.fromkeys([Glyph.MEDI_TA_FVS1_STEM, Glyph.MEDI_TA_FVS1_TOOTH], (ZWJ, Letter.TA, FVS1, ZWJ)),
        },
        Location.INITIAL: {
            Glyph.MEDI_TA: _joined_above(Letter.TA),
            **dict.fromkeys([Glyph.MEDI_TA_FVS1_STEM, Glyph.MEDI_TA_FVS1_TOOTH], (ZWJ, Letter.TA, FVS1)),
        },
        Location.MEDIAL: {
            **dict.fromkeys([Glyph.MEDI_TA_FVS1_STEM, Glyph.MEDI_TA_FVS1_TOOTH], (Letter.TA, FVS1)),
        },
        Location.FINAL: {
            Glyph.MEDI_TA: _joined_below(Letter.TA),
            **dict.fromkeys([Glyph.MEDI_TA_FVS1_STEM, Glyph.MEDI_TA_FVS1_TOOTH], (Letter.TA, FVS1, ZWJ)),
        },
    },
    Letter.DA: {
        Location.ISOLATE: {
            # An isolated D that looks like a T is a T.
            **dict.fromkeys([Glyph.INIT_DA_STEM, Glyph.INIT_DA_TOOTH], (Letter.TA,)),
            Glyph.FINA_DA: _joined_above(Letter.DA),
            Glyph.FINA_DA_FVS1: (ZWJ, Letter.DA, FVS1),
            Glyph.MEDI_DA: _joined_both(Letter.DA),
            Glyph.MEDI_DA_FVS1: (ZWJ, Letter.DA, FVS1, ZWJ),
        },
        Location.INITIAL: {
            Glyph.MEDI_DA: _joined_above(Letter.DA),
        },
        Location.FINAL: {
            Glyph.MEDI_DA: _joined_below(Letter.DA),
            Glyph.MEDI_DA_FVS1: (Letter.DA, FVS1, ZWJ),
        },
    },
    Letter.CHA: {
        Location.ISOLATE: {
            Glyph.FINA_CHA: _joined_above(Letter.CHA),
        },
        Location.FINAL: {
            Glyph.MEDI_CHA: _joined_below(Letter.CHA),
        },
    },
    Letter.JA: {
        Location.ISOLATE: {
            Glyph.FINA_JA: _joined_above(Letter.JA),
            Glyph.MEDI_JA: _joined_both(Letter.JA),
            # The old form looks like a final I.
            Glyph.MEDI_JA_FVS1: _joined_above(Letter.I),
        },
        Location.INITIAL: {
            Glyph.MEDI_JA: _joined_above(Letter.JA),
        },
        Location.FINAL: {
            Glyph.MEDI_JA: _joined_below(Letter.JA),
            Glyph.MEDI_JA_FVS1: (Letter.I,),
        },
    },
    Letter.YA: {
        Location.ISOLATE: {
            Glyph.FINA_YA: _joined_above(Letter.YA),
            Glyph.MEDI_YA: _joined_both(Letter.YA),
        },
        Location.FINAL: {
            Glyph.MEDI_YA: _joined_below(Letter.YA),
        },
    },
    Letter.RA: {
        Location.ISOLATE: {
            Glyph.FINA_RA: _joined_above(Letter.RA),
        },
        Location.FINAL: {
            **dict.fromkeys([Glyph.MEDI_RA_STEM, Glyph.MEDI_RA_TOOTH], _joined_below(Letter.RA)),
        },
    },
    Letter.WA: {
        Location.ISOLATE: {
            Glyph.FINA_WA: _joined_above(Letter.WA),
            # This looks like a final U.
            Glyph.FINA_WA_FVS1: _joined_above(Letter.U),
        },
        Location.FINAL: {
            Glyph.FINA_WA_FVS1: (Letter.WA, FVS1),
            Glyph.MEDI_WA: _joined_below(Letter.WA),
        },
    },
    Letter.FA: {
        Location.ISOLATE: {
            Glyph.FINA_FA: _joined_above(Letter.FA),
        },
    },
    Letter.KA: {
        Location.ISOLATE: {
            Glyph.FINA_KA: _joined_above(Letter.KA),
        },
    },
    Letter.KHA: {
        Location.ISOLATE: {
            Glyph.FINA_KHA: _joined_above(Letter.KHA),
        },
    },
    Letter.TSA: {
        Location.ISOLATE: {
            Glyph.FINA_TSA: _joined_above(Letter.TSA),
        },
        Location.FINAL: {
            Glyph.MEDI_TSA: _joined_below(Letter.TSA),
        },
    },
    Letter.ZA: {
        Location.ISOLATE: {
            Glyph.FINA_ZA: _joined_above(Letter.ZA),
        },
        Location.FINAL: {
            Glyph.MEDI_ZA: _joined_below(Letter.ZA),
        },
    },
    Letter.HAA: {
        Location.ISOLATE: {
            Glyph.FINA_HAA: _joined_above(Letter.HAA),
            Glyph.MEDI_HAA: _joined_both(Letter.HAA),
        },
        Location.INITIAL: {
            Glyph.MEDI_HAA: _joined_above(Letter.HAA),
        },
        Location.FINAL: {
            Glyph.MEDI_HAA: _joined_below(Letter.HAA),
        },
    },
    Letter.ZRA: {
        Location.ISOLATE: {
            Glyph.FINA_ZRA: _joined_above(Letter.ZRA),
        },
        Location.FINAL: {
            Glyph.MEDI_ZRA: _joined_below(Letter.ZRA),
        },
    },
    Letter.LHA: {
        Location.ISOLATE: {
            **dict.fromkeys([Glyph.MEDI_LHA, Glyph.MEDI_LHA_BP], _joined_above(Letter.LHA)),
        },
        Location.INITIAL: {
            **dict.fromkeys([Glyph.MEDI_LHA, Glyph.MEDI_LHA_BP], _joined_above(Letter.LHA)),
        },
    },
}


def _decode_from_table(letter: Letter, step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    return _TABLES.get(letter, {}).get(step.location, {}).get(step.glyph, (letter,))


def _is_suffix(output: Sequence[int]) -> bool:
    return bool(output) and output[0] == NNBS


def _joiner_unless_suffix(output: Sequence[int]) -> Sequence[int]:
    return () if _is_suffix(output) else (ZWJ,)


def _is_a_glyph(cp: int) -> bool:
    return LETTER_START[Letter.A] <= cp <= Glyph.MEDI_A_UNKNOWN


def _is_i_glyph(cp: int) -> bool:
    return Glyph.ISOL_I <= cp <= Glyph.ISOL_I_SUFFIX


def _is_ma_glyph(cp: int) -> bool:
    return Glyph.INIT_MA_TOOTH <= cp <= Glyph.MEDI_MA_BP


def _decode_i(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    match step.location:
        case Location.ISOLATE if step.glyph in {Glyph.FINA_I, Glyph.FINA_I_BP, Glyph.ISOL_I_SUFFIX}:
            return *_joiner_unless_suffix(output), Letter.I
        case Location.INITIAL if step.glyph in {Glyph.MEDI_I, Glyph.MEDI_I_BP, Glyph.MEDI_I_SUFFIX}:
            return *_joiner_unless_suffix(output), Letter.I
        case Location.MEDIAL if step.glyph in {Glyph.MEDI_I, Glyph.MEDI_I_BP}:
            if _is_a_glyph(step.above) and _is_ma_glyph(step.below):
                # Undo the diphthong, as in NAIMA.
                return Letter.I, FVS2
            return (Letter.I,)
    return _decode_from_table(Letter.I, step, output)


def _decode_o(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if step.location == Location.ISOLATE and step.glyph == Glyph.FINA_O:
        # U is the standard spelling of the suffix.
        return (Letter.U,) if _is_suffix(output) else _joined_above(Letter.O)
    return _decode_from_table(Letter.O, step, output)


def _decode_u(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    match step.location:
        case Location.ISOLATE if step.glyph == Glyph.FINA_U:
            return *_joiner_unless_suffix(output), Letter.U
        case Location.INITIAL if step.glyph in {Glyph.MEDI_U, Glyph.MEDI_U_BP}:
            return *_joiner_unless_suffix(output), Letter.U
    return _decode_from_table(Letter.U, step, output)


def _decode_oe(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if step.location == Location.ISOLATE and step.glyph == Glyph.FINA_OE:
        # UE is the standard spelling of the suffix.
        return (Letter.UE,) if _is_suffix(output) else _joined_above(Letter.OE)
    return _decode_from_table(Letter.OE, step, output)


def _decode_ue(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    match step.location:
        case Location.ISOLATE if step.glyph == Glyph.FINA_UE:
            return *_joiner_unless_suffix(output), Letter.UE
        case Location.INITIAL if step.glyph in {Glyph.MEDI_UE, Glyph.MEDI_UE_BP}:
            return *_joiner_unless_suffix(output), Letter.UE
        case Location.MEDIAL if step.glyph == Glyph.MEDI_UE_FVS1:
            # The long tooth is the default in the first syllable.
            if needs_long_tooth_u([*output, Letter.UE], len(output)):
                return (Letter.UE,)
            return Letter.UE, FVS1
    return _decode_from_table(Letter.UE, step, output)


def _decode_ee(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if step.location == Location.MEDIAL:
        if is_vowel_glyph(step.above) and is_vowel_glyph(step.below):
            return (Letter.WA,)
        return (Letter.EE,)
    return _decode_from_table(Letter.EE, step, output)


def _decode_na(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if step.location == Location.MEDIAL:
        if step.glyph in {Glyph.MEDI_NA_NG, Glyph.MEDI_NA_STEM, Glyph.MEDI_NA_TOOTH}:
            if is_vowel_glyph(step.above) and is_vowel_glyph(step.below):
                return _joined_below(Letter.NA)
        elif step.glyph in {Glyph.MEDI_NA_FVS1_NG, Glyph.MEDI_NA_FVS1_STEM, Glyph.MEDI_NA_FVS1_TOOTH}:
            if is_consonant_glyph(step.below):
                return Letter.NA, FVS1
        return (Letter.NA,)
    return _decode_from_table(Letter.NA, step, output)


def _decode_qa(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if (step.location == Location.MEDIAL
        and step.glyph in {Glyph.MEDI_QA_STEM, Glyph.MEDI_QA_TOOTH, Glyph.MEDI_QA_FEM_CONSONANT}
    ):
        # A Q before a consonant is used like a G.
        return (Letter.GA,) if is_consonant_glyph(step.below) else (Letter.QA,)
    return _decode_from_table(Letter.QA, step, output)


def _decode_ga(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    gender = get_word_gender(output)
    match step.location:
        case Location.MEDIAL if step.glyph in {Glyph.MEDI_GA_FVS3_STEM, Glyph.MEDI_GA_FVS3_TOOTH}:
            return (Letter.GA, FVS3) if gender == Gender.MASCULINE else (Letter.GA,)
        case Location.FINAL if step.glyph == Glyph.FINA_GA_FVS1:
            return (Letter.GA, FVS1) if gender == Gender.NEUTER else (Letter.GA,)
        case Location.FINAL if step.glyph == Glyph.FINA_GA_FVS2:
            return (Letter.GA, FVS2) if gender == Gender.MASCULINE else (Letter.GA,)
    return _decode_from_table(Letter.GA, step, output)


def _decode_da(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if step.location == Location.INITIAL and step.glyph in {Glyph.INIT_DA_FVS1, Glyph.MEDI_DA_FVS1}:
        return (Letter.DA,) if _is_suffix(output) else (Letter.DA, FVS1)
    return _decode_from_table(Letter.DA, step, output)


def _decode_ja(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if step.location == Location.INITIAL and step.glyph in {Glyph.INIT_JA_STEM, Glyph.INIT_JA_TOOTH}:
        # A J at the start of a suffix stands for Y.
        return (Letter.YA,) if _is_suffix(output) else (Letter.JA,)
    return _decode_from_table(Letter.JA, step, output)


def _decode_ya(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    match step.location:
        case Location.INITIAL if step.glyph == Glyph.MEDI_YA:
            return (Letter.YA,) if _is_suffix(output) else (Letter.YA, FVS1)
        case Location.MEDIAL if step.glyph == Glyph.MEDI_YA_FVS1:
            if is_vowel_glyph(step.above) and _is_i_glyph(step.below):
                return Letter.YA, FVS1
            return (Letter.YA,)
    return _decode_from_table(Letter.YA, step, output)


def _decode_wa(step: GlyphStep, output: Sequence[int]) -> Sequence[int]:
    if step.location == Location.MEDIAL:
        if is_consonant_glyph(step.above) and is_consonant_glyph(step.below):
            return (Letter.EE,)
        return (Letter.WA,)
    return _decode_from_table(Letter.WA, step, output)


_DECODERS: Final[Mapping[int, Decoder]] = {
    **{letter: functools.partial(_decode_from_table, letter) for letter in Letter},
    Letter.I: _decode_i,
    Letter.O: _decode_o,
    Letter.U: _decode_u,
    Letter.OE: _decode_oe,
    Letter.UE: _decode_ue,
    Letter.EE: _decode_ee,
    Letter.NA: _decode_na,
    Letter.QA: _decode_qa,
    Letter.GA: _decode_ga,
    Letter.DA: _decode_da,
    Letter.JA: _decode_ja,
    Letter.YA: _decode_ya,
    Letter.WA: _decode_wa,
}


def _location(above: int, below: int) -> Location:
    top = not is_letter_glyph(above)
    bottom = not is_letter_glyph(below)
    if top:
        return Location.ISOLATE if bottom else Location.INITIAL
    return Location.FINAL if bottom else Location.MEDIAL


def _decode_space(glyph: int, below: int) -> int:
    if glyph == Glyph.SUFFIX_SPACE or below in _SUFFIX_STARTS:
        return NNBS
    return SPACE


def unshape_word(text: str) -> str:
    """Converts one run of legacy glyph codes to Unicode.

    A run is a sequence of legacy glyphs, optionally starting with a
    space. Where a glyph that can only end a word is followed by a glyph
    that can only start a word, a space is inserted between them.

    Args:
        text: A run of legacy glyph codes.

    Returns:
        The Unicode text for `text`.
    """
    glyphs = string_to_cps(text)
    output: list[int] = []
    above = 0
    for index, glyph in enumerate(glyphs):
        below = glyphs[index + 1] if index + 1 < len(glyphs) else 0
        if glyph in _SPACES:
            output.append(_decode_space(glyph, below))
        elif glyph < LETTER_START[Letter.A]:
            output.append(from_glyph(glyph))
        elif (letter := glyph_letter(glyph)) is not None:
            output += _DECODERS[letter](GlyphStep(glyph, _location(above, below), above, below), output)
        above = glyph
        if glyph in FINAL_OR_ISOLATE_GLYPHS and below in INITIAL_OR_ISOLATE_GLYPHS:
            output.append(SPACE)
            above = 0
    return cps_to_string(output)
