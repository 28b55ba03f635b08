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

"""Legacy glyph codes.

Legacy Mongolian fonts predate OpenType shaping. They map one private
use code point to each pre-shaped positional form of a letter, digit, or
punctuation mark. `Glyph` names those code points.

Several positional forms share one glyph in the legacy fonts, so
several members are aliases of one value. For example, `Glyph.ISOL_U`
and `Glyph.INIT_U` are both U+E28C.

The member names use the following components:

* ``ISOL``, ``INIT``, ``MEDI``, ``FINA``: the positional form.
* ``FVS1``, ``FVS2``, ``FVS3``: the form a free variation selector
  selects.
* ``MVS``: the form before a vowel separator.
* ``BP``: the form after a round letter (BA, PA, FA, KA, KHA, and
  sometimes QA and GA).
* ``OU``: the form before O, U, OE, or UE.
* ``TOOTH``, ``STEM``: the form above a glyph whose top is a tooth or a
  stem.
* ``FEM``: the feminine form of QA or GA.
* ``SUFFIX``: the form used in a suffix run.
"""


from __future__ import annotations


__all__ = [
    'Glyph',
    'LETTER_START',
    'MENKSOFT_END',
    'MENKSOFT_START',
    'glyph_letter',
    'is_consonant_glyph',
    'is_letter_glyph',
    'is_vowel_glyph',
]


import bisect
import enum
from typing import Final
from typing import TYPE_CHECKING

from utils import Letter


if TYPE_CHECKING:
    from collections.abc import Mapping


#: The first legacy glyph code.
MENKSOFT_START: Final[int] = 0xE234


#: The last legacy glyph code.
MENKSOFT_END: Final[int] = 0xE34F


class Glyph(enum.IntEnum):
    """A legacy glyph code.
    """

    # Punctuation and digits
    BIRGA = 0xE234
    ELLIPSIS = 0xE235
    COMMA = 0xE236
    FULL_STOP = 0xE237
    COLON = 0xE238
    FOUR_DOTS = 0xE239
    TODO_SOFT_HYPHEN = 0xE23A
    SIBE_SYLLABLE_BOUNDARY_MARKER = 0xE23B
    MANCHU_COMMA = 0xE23C
    MANCHU_FULL_STOP = 0xE23D
    NIRUGU = 0xE23E
    BIRGA_WITH_ORNAMENT = 0xE23F
    ROTATED_BIRGA = 0xE240
    DOUBLE_BIRGA_WITH_ORNAMENT = 0xE241
    TRIPLE_BIRGA_WITH_ORNAMENT = 0xE242
    MIDDLE_DOT = 0xE243
    ZERO = 0xE244
    ONE = 0xE245
    TWO = 0xE246
    THREE = 0xE247
    FOUR = 0xE248
    FIVE = 0xE249
    SIX = 0xE24A
    SEVEN = 0xE24B
    EIGHT = 0xE24C
    NINE = 0xE24D
    QUESTION_EXCLAMATION = 0xE24E
    EXCLAMATION_QUESTION = 0xE24F
    EXCLAMATION = 0xE250
    QUESTION = 0xE251
    SEMICOLON = 0xE252
    LEFT_PARENTHESIS = 0xE253
    RIGHT_PARENTHESIS = 0xE254
    LEFT_ANGLE_BRACKET = 0xE255
    RIGHT_ANGLE_BRACKET = 0xE256
    LEFT_TORTOISE_SHELL_BRACKET = 0xE257
    RIGHT_TORTOISE_SHELL_BRACKET = 0xE258
    LEFT_DOUBLE_ANGLE_BRACKET = 0xE259
    RIGHT_DOUBLE_ANGLE_BRACKET = 0xE25A
    LEFT_WHITE_CORNER_BRACKET = 0xE25B
    RIGHT_WHITE_CORNER_BRACKET = 0xE25C
    FULL_WIDTH_COMMA = 0xE25D
    X = 0xE25E
    REFERENCE_MARK = 0xE25F
    EN_DASH = 0xE260
    EM_DASH = 0xE261

    # Spaces
    UNKNOWN_SPACE = 0xE262
    SUFFIX_SPACE = 0xE263

    # A
    ISOL_A = 0xE264
    ISOL_A_FVS1 = 0xE265
    INIT_A = 0xE266
    MEDI_A_FVS2 = 0xE267
    FINA_A = 0xE268
    FINA_A_FVS1 = 0xE269
    FINA_A_MVS = 0xE26A
    FINA_A_BP = 0xE26B
    MEDI_A = 0xE26C
    MEDI_A_BP = 0xE26D
    MEDI_A_FVS1 = 0xE26E
    MEDI_A_UNKNOWN = 0xE26F

    # E
    ISOL_E = 0xE270
    INIT_E = 0xE271
    INIT_E_FVS1 = 0xE272
    FINA_E = 0xE273
    FINA_E_MVS = 0xE274
    FINA_E_BP = 0xE275
    MEDI_E = 0xE276
    MEDI_E_BP = 0xE277
    MEDI_E_UNKNOWN = 0xE278
    FINA_E_FVS1 = 0xE269

    # I
    ISOL_I = 0xE279
    INIT_I = 0xE27A
    FINA_I = 0xE27B
    FINA_I_BP = 0xE27C
    MEDI_I_FVS1 = 0xE27D
    MEDI_I = 0xE27E
    MEDI_I_BP = 0xE27F
    MEDI_I_SUFFIX = 0xE280
    MEDI_I_DOUBLE_TOOTH = 0xE281
    ISOL_I_SUFFIX = 0xE282

    # O
    ISOL_O = 0xE283
    INIT_O = 0xE284
    FINA_O = 0xE285
    FINA_O_FVS1 = 0xE286
    FINA_O_BP = 0xE287
    MEDI_O_FVS1 = 0xE288
    MEDI_O = 0xE289
    MEDI_O_BP = 0xE28A

    # U
    ISOL_U_ALT = 0xE28B
    ISOL_U = 0xE28C
    INIT_U = 0xE28C
    FINA_U = 0xE28D
    FINA_U_FVS1 = 0xE28E
    FINA_U_BP = 0xE28F
    MEDI_U_FVS1 = 0xE290
    MEDI_U = 0xE291
    MEDI_U_BP = 0xE292

    # OE
    ISOL_OE = 0xE293
    ISOL_OE_FVS1 = 0xE294
    INIT_OE = 0xE295
    FINA_OE = 0xE296
    FINA_OE_FVS1 = 0xE297
    FINA_OE_FVS1_BP = 0xE298
    FINA_OE_FVS2 = 0xE299
    FINA_OE_BP = 0xE29A
    MEDI_OE_FVS2 = 0xE29B
    MEDI_OE_FVS1 = 0xE29C
    MEDI_OE_FVS1_BP = 0xE29D
    MEDI_OE = 0xE29E
    MEDI_OE_BP = 0xE29F

    # UE
    ISOL_UE_ALT = 0xE2A0
    ISOL_UE_FVS1 = 0xE2A1
    ISOL_UE = 0xE2A2
    INIT_UE = 0xE2A2
    FINA_UE = 0xE2A3
    FINA_UE_FVS1 = 0xE2A4
    FINA_UE_FVS1_BP = 0xE2A5
    FINA_UE_FVS2 = 0xE2A6
    FINA_UE_BP = 0xE2A7
    MEDI_UE_FVS2 = 0xE2A8
    MEDI_UE_FVS1 = 0xE2A9
    MEDI_UE_FVS1_BP = 0xE2AA
    MEDI_UE = 0xE2AB
    MEDI_UE_BP = 0xE2AC

    # EE
    ISOL_EE = 0xE2AD
    INIT_EE = 0xE2AE
    FINA_EE = 0xE2AF
    MEDI_EE = 0xE2B0

    # NA
    INIT_NA_TOOTH = 0xE2B1
    INIT_NA_FVS1_TOOTH = 0xE2B2
    ISOL_NA = 0xE2B3
    INIT_NA_STEM = 0xE2B3
    INIT_NA_FVS1_STEM = 0xE2B4
    FINA_NA = 0xE2B5
    MEDI_NA_FVS2 = 0xE2B6
    MEDI_NA_FVS1_TOOTH = 0xE2B7
    MEDI_NA_FVS3 = 0xE2B7
    MEDI_NA_TOOTH = 0xE2B8
    MEDI_NA_FVS1_STEM = 0xE2B9
    MEDI_NA_STEM = 0xE2BA
    MEDI_NA_FVS1_NG = 0xE2BF
    MEDI_NA_NG = 0xE2C0

    # ANG, which sits inside the NA block
    FINA_ANG = 0xE2BB
    ISOL_ANG = 0xE2BC
    INIT_ANG_TOOTH = 0xE2BC
    MEDI_ANG_TOOTH = 0xE2BC
    INIT_ANG_ROUND = 0xE2BD
    MEDI_ANG_ROUND = 0xE2BD
    INIT_ANG_STEM = 0xE2BE
    MEDI_ANG_STEM = 0xE2BE

    # BA
    ISOL_BA = 0xE2C1
    INIT_BA = 0xE2C1
    INIT_BA_OU = 0xE2C2
    FINA_BA = 0xE2C3
    FINA_BA_FVS1 = 0xE2C4
    MEDI_BA_TOOTH = 0xE2C5
    MEDI_BA_OU = 0xE2C6
    INIT_BA_STEM = 0xE2C7
    MEDI_BA_STEM = 0xE2C7

    # PA
    ISOL_PA = 0xE2C8
    INIT_PA = 0xE2C8
    INIT_PA_OU = 0xE2C9
    FINA_PA = 0xE2CA
    MEDI_PA_TOOTH = 0xE2CB
    MEDI_PA_OU = 0xE2CC
    INIT_PA_STEM = 0xE2CD
    MEDI_PA_STEM = 0xE2CD

    # QA
    INIT_QA_TOOTH = 0xE2CE
    INIT_QA_FVS1_TOOTH = 0xE2CF
    INIT_QA_FEM = 0xE2D0
    INIT_QA_FVS1_FEM = 0xE2D1
    ISOL_QA_FVS1 = 0xE2D1
    ISOL_QA = 0xE2D2
    INIT_QA_STEM = 0xE2D2
    INIT_QA_FVS1_STEM = 0xE2D3
    INIT_QA_FEM_OU = 0xE2D4
    INIT_QA_FVS1_FEM_OU = 0xE2D5
    FINA_QA = 0xE2D6
    MEDI_QA_FVS3 = 0xE2D6
    MEDI_QA_FVS2 = 0xE2D7
    MEDI_QA_TOOTH = 0xE2D8
    MEDI_QA_FVS1 = 0xE2D9
    MEDI_QA_FEM = 0xE2DA
    MEDI_QA_FVS1_FEM = 0xE2DB
    MEDI_QA_STEM = 0xE2DC
    MEDI_QA_FEM_OU = 0xE2DD
    MEDI_QA_FVS1_FEM_OU = 0xE2DE
    MEDI_QA_FEM_CONSONANT = 0xE2DF
    MEDI_QA_FEM_CONSONANT_DOTTED = 0xE2E0

    # GA
    INIT_GA_TOOTH = 0xE2E1
    INIT_GA_FVS1_TOOTH = 0xE2E2
    INIT_GA_FEM = 0xE2E3
    ISOL_GA = 0xE2E4
    INIT_GA_STEM = 0xE2E4
    INIT_GA_FVS1_STEM = 0xE2E5
    INIT_GA_FEM_OU = 0xE2E6
    FINA_GA = 0xE2E7
    FINA_GA_FVS1 = 0xE2E7
    FINA_GA_FVS2 = 0xE2E8
    MEDI_GA_FVS2 = 0xE2E9
    MEDI_GA_FVS1_TOOTH = 0xE2EA
    MEDI_GA_FEM = 0xE2EB
    MEDI_GA_FVS1_STEM = 0xE2EC
    MEDI_GA_FEM_OU = 0xE2ED
    MEDI_GA = 0xE2EE
    MEDI_GA_FVS3_TOOTH = 0xE2EF
    MEDI_GA_FVS3_STEM = 0xE2F0

    # MA
    INIT_MA_TOOTH = 0xE2F1
    ISOL_MA = 0xE2F2
    INIT_MA_STEM_LONG = 0xE2F2
    FINA_MA = 0xE2F3
    MEDI_MA_TOOTH = 0xE2F4
    MEDI_MA_STEM_LONG = 0xE2F5
    MEDI_MA_BP = 0xE2F6

    # LA
    INIT_LA_TOOTH = 0xE2F7
    ISOL_LA = 0xE2F8
    INIT_LA_STEM_LONG = 0xE2F8
    FINA_LA = 0xE2F9
    MEDI_LA_TOOTH = 0xE2FA
    MEDI_LA_STEM_LONG = 0xE2FB
    MEDI_LA_BP = 0xE2FC

    # SA
    INIT_SA_TOOTH = 0xE2FD
    ISOL_SA = 0xE2FE
    INIT_SA_STEM = 0xE2FE
    FINA_SA = 0xE2FF
    # The legacy fonts have no glyph for FVS2, so it shares the default.
    FINA_SA_FVS2 = 0xE2FF
    FINA_SA_FVS1 = 0xE300
    MEDI_SA_TOOTH = 0xE301
    MEDI_SA_STEM = 0xE302

    # SHA
    INIT_SHA_TOOTH = 0xE303
    ISOL_SHA = 0xE304
    INIT_SHA_STEM = 0xE304
    FINA_SHA = 0xE305
    MEDI_SHA_TOOTH = 0xE306
    MEDI_SHA_STEM = 0xE307

    # TA
    INIT_TA_TOOTH = 0xE308
    ISOL_TA = 0xE309
    INIT_TA_STEM = 0xE309
    FINA_TA = 0xE30A
    MEDI_TA = 0xE30B
    MEDI_TA_FVS1_TOOTH = 0xE30C
    MEDI_TA_FVS1_STEM = 0xE30D

    # DA
    INIT_DA_TOOTH = 0xE30E
    INIT_DA_STEM = 0xE30F
    ISOL_DA = 0xE310
    INIT_DA_FVS1 = 0xE310
    FINA_DA = 0xE311
    FINA_DA_FVS1 = 0xE312
    MEDI_DA_FVS1 = 0xE313
    MEDI_DA = 0xE314

    # CHA
    ISOL_CHA = 0xE315
    INIT_CHA = 0xE315
    FINA_CHA = 0xE316
    MEDI_CHA = 0xE317

    # JA
    ISOL_JA = 0xE318
    INIT_JA_TOOTH = 0xE319
    INIT_JA_STEM = 0xE31A
    FINA_JA = 0xE31B
    MEDI_JA_FVS1 = 0xE31C
    MEDI_JA = 0xE31D

    # YA
    ISOL_YA = 0xE31E
    INIT_YA = 0xE31E
    FINA_YA = 0xE31F
    MEDI_YA_FVS2 = 0xE31F
    MEDI_YA_FVS1 = 0xE320
    MEDI_YA = 0xE321
    INIT_YA_FVS1 = 0xE321

    # RA
    ISOL_RA = 0xE322
    INIT_RA_STEM = 0xE322
    INIT_RA_TOOTH = 0xE323
    FINA_RA = 0xE325
    MEDI_RA_STEM = 0xE326
    MEDI_RA_TOOTH = 0xE327

    # WA
    ISOL_WA = 0xE329
    INIT_WA = 0xE329
    FINA_WA = 0xE32A
    FINA_WA_FVS1 = 0xE32B
    MEDI_WA = 0xE32C

    # FA
    ISOL_FA = 0xE32D
    INIT_FA = 0xE32D
    INIT_FA_OU = 0xE32E
    FINA_FA = 0xE32F
    MEDI_FA_TOOTH = 0xE330
    MEDI_FA_OU = 0xE331
    INIT_FA_STEM = 0xE332
    MEDI_FA_STEM = 0xE332

    # KA
    ISOL_KA = 0xE333
    INIT_KA = 0xE333
    INIT_KA_OU = 0xE334
    FINA_KA = 0xE335
    MEDI_KA_TOOTH = 0xE336
    MEDI_KA_OU = 0xE337
    MEDI_KA_STEM = 0xE338

    # KHA
    ISOL_KHA = 0xE339
    INIT_KHA = 0xE339
    INIT_KHA_OU = 0xE33A
    FINA_KHA = 0xE33B
    MEDI_KHA_TOOTH = 0xE33C
    MEDI_KHA_OU = 0xE33D
    MEDI_KHA_STEM = 0xE33E

    # TSA
    ISOL_TSA = 0xE33F
    INIT_TSA = 0xE33F
    FINA_TSA = 0xE340
    MEDI_TSA = 0xE341

    # ZA
    ISOL_ZA = 0xE342
    INIT_ZA = 0xE342
    FINA_ZA = 0xE343
    MEDI_ZA = 0xE344

    # HAA
    ISOL_HAA = 0xE345
    INIT_HAA = 0xE345
    FINA_HAA = 0xE346
    MEDI_HAA = 0xE347

    # ZRA
    ISOL_ZRA = 0xE348
    INIT_ZRA = 0xE348
    MEDI_ZRA = 0xE349
    FINA_ZRA = 0xE34A

    # LHA
    ISOL_LHA = 0xE34B
    INIT_LHA = 0xE34B
    MEDI_LHA = 0xE34C
    FINA_LHA = 0xE34C
    MEDI_LHA_BP = 0xE34D
    FINA_LHA_BP = 0xE34D

    # ZHI
    ISOL_ZHI = 0xE34E
    INIT_ZHI = 0xE34E
    MEDI_ZHI = 0xE34E
    FINA_ZHI = 0xE34E

    # CHI
    ISOL_CHI = 0xE34F
    INIT_CHI = 0xE34F
    MEDI_CHI = 0xE34F
    FINA_CHI = 0xE34F


#: The first glyph code of each letter’s block. ANG is missing because
#: its glyphs sit in the middle of the NA block.
LETTER_START: Final[Mapping[Letter, int]] = {
    Letter.A: 0xE264,
    Letter.E: 0xE270,
    Letter.I: 0xE279,
    Letter.O: 0xE283,
    Letter.U: 0xE28B,
    Letter.OE: 0xE293,
    Letter.UE: 0xE2A0,
    Letter.EE: 0xE2AD,
    Letter.NA: 0xE2B1,
    Letter.BA: 0xE2C1,
    Letter.PA: 0xE2C8,
    Letter.QA: 0xE2CE,
    Letter.GA: 0xE2E1,
    Letter.MA: 0xE2F1,
    Letter.LA: 0xE2F7,
    Letter.SA: 0xE2FD,
    Letter.SHA: 0xE303,
    Letter.TA: 0xE308,
    Letter.DA: 0xE30E,
    Letter.CHA: 0xE315,
    Letter.JA: 0xE318,
    Letter.YA: 0xE31E,
    Letter.RA: 0xE322,
    Letter.WA: 0xE329,
    Letter.FA: 0xE32D,
    Letter.KA: 0xE333,
    Letter.KHA: 0xE339,
    Letter.TSA: 0xE33F,
    Letter.ZA: 0xE342,
    Letter.HAA: 0xE345,
    Letter.ZRA: 0xE348,
    Letter.LHA: 0xE34B,
    Letter.ZHI: 0xE34E,
    Letter.CHI: 0xE34F,
}


_ANG_START: Final[int] = Glyph.FINA_ANG


_ANG_END: Final[int] = Glyph.MEDI_ANG_STEM


_STARTS: Final[list[int]] = sorted(LETTER_START.values())


_LETTERS_BY_START: Final[list[Letter]] = sorted(LETTER_START, key=LETTER_START.__getitem__)


assert _STARTS == [*LETTER_START.values()], 'Letter blocks are out of order'


def is_letter_glyph(cp: int) -> bool:
    """Returns whether a code point is a legacy letter glyph.

    Punctuation, digits, and spaces are legacy glyphs but not letter
    glyphs.
    """
    return LETTER_START[Letter.A] <= cp <= MENKSOFT_END


def is_consonant_glyph(cp: int) -> bool:
    return LETTER_START[Letter.NA] <= cp <= MENKSOFT_END


def is_vowel_glyph(cp: int) -> bool:
    return is_letter_glyph(cp) and not is_consonant_glyph(cp)


def glyph_letter(cp: int) -> Letter | None:
    """Returns the letter a legacy glyph is a form of.

    Args:
        cp: A code point.

    Returns:
        The letter whose block contains `cp`, or ``None`` if `cp` is not
        a legacy letter glyph.
    """
    if not is_letter_glyph(cp):
        return None
    if _ANG_START <= cp <= _ANG_END:
        return Letter.ANG
    return _LETTERS_BY_START[bisect.bisect_right(_STARTS, cp) - 1]
