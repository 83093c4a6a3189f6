"""
Unicode区间表模块 - 零宽字符表与宽字符表

这个模块提供了：
- Interval 区间类型（闭区间 [first, last]）
- ZERO_WIDTH_TABLE：Mn、Me、Cf 类字符以及 ZERO WIDTH SPACE (U+200B)
- WIDE_TABLE：East Asian Width 属性为 W 或 F 的字符
- 区间表一致性校验

两张表均来自 Unicode 8.0.0 字符数据库：
- http://www.unicode.org/Public/8.0.0/ucd/extracted/DerivedGeneralCategory.txt
- http://www.unicode.org/Public/8.0.0/ucd/EastAsianWidth.txt

表内容可以用 scripts/generate_tables.py 重新生成。二分查找要求表严格升序
且互不重叠，修改表之后必须运行 validate_tables()。
"""

import logging
from typing import Iterable, NamedTuple, Sequence, Tuple

# 表数据对应的Unicode版本
UNICODE_VERSION = "8.0.0"

# 日志记录器
logger = logging.getLogger(__name__)


class TableError(ValueError):
    """区间表不满足排序/不重叠约束时抛出"""
    pass


class Interval(NamedTuple):
    """码点闭区间 [first, last]"""
    first: int
    last: int


# 零宽字符区间表（已排序、互不重叠）
# U+00AD 虽然在表中，但宽度计算的快速路径会把它当作宽度1处理
ZERO_WIDTH_TABLE: Tuple[Interval, ...] = (
    Interval(0x00ad, 0x00ad),  # SOFT HYPHEN to SOFT HYPHEN
    Interval(0x0300, 0x036f),  # COMBINING GRAVE ACCENT to COMBINING LATIN SMALL LETTER X
    Interval(0x0483, 0x0489),  # COMBINING CYRILLIC TITLO to COMBINING CYRILLIC MILLIONS SIGN
    Interval(0x0591, 0x05bd),  # HEBREW ACCENT ETNAHTA to HEBREW POINT METEG
    Interval(0x05bf, 0x05bf),  # HEBREW POINT RAFE to HEBREW POINT RAFE
    Interval(0x05c1, 0x05c2),  # HEBREW POINT SHIN DOT to HEBREW POINT SIN DOT
    Interval(0x05c4, 0x05c5),  # HEBREW MARK UPPER DOT to HEBREW MARK LOWER DOT
    Interval(0x05c7, 0x05c7),  # HEBREW POINT QAMATS QATAN to HEBREW POINT QAMATS QATAN
    Interval(0x0600, 0x0605),  # ARABIC NUMBER SIGN to ARABIC NUMBER MARK ABOVE
    Interval(0x0610, 0x061a),  # ARABIC SIGN SALLALLAHOU ALAYHE WASSALLAM to ARABIC SMALL KASRA
    Interval(0x061c, 0x061c),  # ARABIC LETTER MARK to ARABIC LETTER MARK
    Interval(0x064b, 0x065f),  # ARABIC FATHATAN to ARABIC WAVY HAMZA BELOW
    Interval(0x0670, 0x0670),  # ARABIC LETTER SUPERSCRIPT ALEF to ARABIC LETTER SUPERSCRIPT ALEF
    Interval(0x06d6, 0x06dd),  # ARABIC SMALL HIGH LIGATURE SAD WITH LAM WITH ALEF MAKSURA to ARABIC END OF AYAH
    Interval(0x06df, 0x06e4),  # ARABIC SMALL HIGH ROUNDED ZERO to ARABIC SMALL HIGH MADDA
    Interval(0x06e7, 0x06e8),  # ARABIC SMALL HIGH YEH to ARABIC SMALL HIGH NOON
    Interval(0x06ea, 0x06ed),  # ARABIC EMPTY CENTRE LOW STOP to ARABIC SMALL LOW MEEM
    Interval(0x070f, 0x070f),  # SYRIAC ABBREVIATION MARK to SYRIAC ABBREVIATION MARK
    Interval(0x0711, 0x0711),  # SYRIAC LETTER SUPERSCRIPT ALAPH to SYRIAC LETTER SUPERSCRIPT ALAPH
    Interval(0x0730, 0x074a),  # SYRIAC PTHAHA ABOVE to SYRIAC BARREKH
    Interval(0x07a6, 0x07b0),  # THAANA ABAFILI to THAANA SUKUN
    Interval(0x07eb, 0x07f3),  # NKO COMBINING SHORT HIGH TONE to NKO COMBINING DOUBLE DOT ABOVE
    Interval(0x0816, 0x0819),  # SAMARITAN MARK IN to SAMARITAN MARK DAGESH
    Interval(0x081b, 0x0823),  # SAMARITAN MARK EPENTHETIC YUT to SAMARITAN VOWEL SIGN A
    Interval(0x0825, 0x0827),  # SAMARITAN VOWEL SIGN SHORT A to SAMARITAN VOWEL SIGN U
    Interval(0x0829, 0x082d),  # SAMARITAN VOWEL SIGN LONG I to SAMARITAN MARK NEQUDAA
    Interval(0x0859, 0x085b),  # MANDAIC AFFRICATION MARK to MANDAIC GEMINATION MARK
    Interval(0x08e3, 0x0902),  # ARABIC TURNED DAMMA BELOW to DEVANAGARI SIGN ANUSVARA
    Interval(0x093a, 0x093a),  # DEVANAGARI VOWEL SIGN OE to DEVANAGARI VOWEL SIGN OE
    Interval(0x093c, 0x093c),  # DEVANAGARI SIGN NUKTA to DEVANAGARI SIGN NUKTA
    Interval(0x0941, 0x0948),  # DEVANAGARI VOWEL SIGN U to DEVANAGARI VOWEL SIGN AI
    Interval(0x094d, 0x094d),  # DEVANAGARI SIGN VIRAMA to DEVANAGARI SIGN VIRAMA
    Interval(0x0951, 0x0957),  # DEVANAGARI STRESS SIGN UDATTA to DEVANAGARI VOWEL SIGN UUE
    Interval(0x0962, 0x0963),  # DEVANAGARI VOWEL SIGN VOCALIC L to DEVANAGARI VOWEL SIGN VOCALIC LL
    Interval(0x0981, 0x0981),  # BENGALI SIGN CANDRABINDU to BENGALI SIGN CANDRABINDU
    Interval(0x09bc, 0x09bc),  # BENGALI SIGN NUKTA to BENGALI SIGN NUKTA
    Interval(0x09c1, 0x09c4),  # BENGALI VOWEL SIGN U to BENGALI VOWEL SIGN VOCALIC RR
    Interval(0x09cd, 0x09cd),  # BENGALI SIGN VIRAMA to BENGALI SIGN VIRAMA
    Interval(0x09e2, 0x09e3),  # BENGALI VOWEL SIGN VOCALIC L to BENGALI VOWEL SIGN VOCALIC LL
    Interval(0x0a01, 0x0a02),  # GURMUKHI SIGN ADAK BINDI to GURMUKHI SIGN BINDI
    Interval(0x0a3c, 0x0a3c),  # GURMUKHI SIGN NUKTA to GURMUKHI SIGN NUKTA
    Interval(0x0a41, 0x0a42),  # GURMUKHI VOWEL SIGN U to GURMUKHI VOWEL SIGN UU
    Interval(0x0a47, 0x0a48),  # GURMUKHI VOWEL SIGN EE to GURMUKHI VOWEL SIGN AI
    Interval(0x0a4b, 0x0a4d),  # GURMUKHI VOWEL SIGN OO to GURMUKHI SIGN VIRAMA
    Interval(0x0a51, 0x0a51),  # GURMUKHI SIGN UDAAT to GURMUKHI SIGN UDAAT
    Interval(0x0a70, 0x0a71),  # GURMUKHI TIPPI to GURMUKHI ADDAK
    Interval(0x0a75, 0x0a75),  # GURMUKHI SIGN YAKASH to GURMUKHI SIGN YAKASH
    Interval(0x0a81, 0x0a82),  # GUJARATI SIGN CANDRABINDU to GUJARATI SIGN ANUSVARA
    Interval(0x0abc, 0x0abc),  # GUJARATI SIGN NUKTA to GUJARATI SIGN NUKTA
    Interval(0x0ac1, 0x0ac5),  # GUJARATI VOWEL SIGN U to GUJARATI VOWEL SIGN CANDRA E
    Interval(0x0ac7, 0x0ac8),  # GUJARATI VOWEL SIGN E to GUJARATI VOWEL SIGN AI
    Interval(0x0acd, 0x0acd),  # GUJARATI SIGN VIRAMA to GUJARATI SIGN VIRAMA
    Interval(0x0ae2, 0x0ae3),  # GUJARATI VOWEL SIGN VOCALIC L to GUJARATI VOWEL SIGN VOCALIC LL
    Interval(0x0b01, 0x0b01),  # ORIYA SIGN CANDRABINDU to ORIYA SIGN CANDRABINDU
    Interval(0x0b3c, 0x0b3c),  # ORIYA SIGN NUKTA to ORIYA SIGN NUKTA
    Interval(0x0b3f, 0x0b3f),  # ORIYA VOWEL SIGN I to ORIYA VOWEL SIGN I
    Interval(0x0b41, 0x0b44),  # ORIYA VOWEL SIGN U to ORIYA VOWEL SIGN VOCALIC RR
    Interval(0x0b4d, 0x0b4d),  # ORIYA SIGN VIRAMA to ORIYA SIGN VIRAMA
    Interval(0x0b56, 0x0b56),  # ORIYA AI LENGTH MARK to ORIYA AI LENGTH MARK
    Interval(0x0b62, 0x0b63),  # ORIYA VOWEL SIGN VOCALIC L to ORIYA VOWEL SIGN VOCALIC LL
    Interval(0x0b82, 0x0b82),  # TAMIL SIGN ANUSVARA to TAMIL SIGN ANUSVARA
    Interval(0x0bc0, 0x0bc0),  # TAMIL VOWEL SIGN II to TAMIL VOWEL SIGN II
    Interval(0x0bcd, 0x0bcd),  # TAMIL SIGN VIRAMA to TAMIL SIGN VIRAMA
    Interval(0x0c00, 0x0c00),  # TELUGU SIGN COMBINING CANDRABINDU ABOVE to TELUGU SIGN COMBINING CANDRABINDU ABOVE
    Interval(0x0c3e, 0x0c40),  # TELUGU VOWEL SIGN AA to TELUGU VOWEL SIGN II
    Interval(0x0c46, 0x0c48),  # TELUGU VOWEL SIGN E to TELUGU VOWEL SIGN AI
    Interval(0x0c4a, 0x0c4d),  # TELUGU VOWEL SIGN O to TELUGU SIGN VIRAMA
    Interval(0x0c55, 0x0c56),  # TELUGU LENGTH MARK to TELUGU AI LENGTH MARK
    Interval(0x0c62, 0x0c63),  # TELUGU VOWEL SIGN VOCALIC L to TELUGU VOWEL SIGN VOCALIC LL
    Interval(0x0c81, 0x0c81),  # KANNADA SIGN CANDRABINDU to KANNADA SIGN CANDRABINDU
    Interval(0x0cbc, 0x0cbc),  # KANNADA SIGN NUKTA to KANNADA SIGN NUKTA
    Interval(0x0cbf, 0x0cbf),  # KANNADA VOWEL SIGN I to KANNADA VOWEL SIGN I
    Interval(0x0cc6, 0x0cc6),  # KANNADA VOWEL SIGN E to KANNADA VOWEL SIGN E
    Interval(0x0ccc, 0x0ccd),  # KANNADA VOWEL SIGN AU to KANNADA SIGN VIRAMA
    Interval(0x0ce2, 0x0ce3),  # KANNADA VOWEL SIGN VOCALIC L to KANNADA VOWEL SIGN VOCALIC LL
    Interval(0x0d01, 0x0d01),  # MALAYALAM SIGN CANDRABINDU to MALAYALAM SIGN CANDRABINDU
    Interval(0x0d41, 0x0d44),  # MALAYALAM VOWEL SIGN U to MALAYALAM VOWEL SIGN VOCALIC RR
    Interval(0x0d4d, 0x0d4d),  # MALAYALAM SIGN VIRAMA to MALAYALAM SIGN VIRAMA
    Interval(0x0d62, 0x0d63),  # MALAYALAM VOWEL SIGN VOCALIC L to MALAYALAM VOWEL SIGN VOCALIC LL
    Interval(0x0dca, 0x0dca),  # SINHALA SIGN AL-LAKUNA to SINHALA SIGN AL-LAKUNA
    Interval(0x0dd2, 0x0dd4),  # SINHALA VOWEL SIGN KETTI IS-PILLA to SINHALA VOWEL SIGN KETTI PAA-PILLA
    Interval(0x0dd6, 0x0dd6),  # SINHALA VOWEL SIGN DIGA PAA-PILLA to SINHALA VOWEL SIGN DIGA PAA-PILLA
    Interval(0x0e31, 0x0e31),  # THAI CHARACTER MAI HAN-AKAT to THAI CHARACTER MAI HAN-AKAT
    Interval(0x0e34, 0x0e3a),  # THAI CHARACTER SARA I to THAI CHARACTER PHINTHU
    Interval(0x0e47, 0x0e4e),  # THAI CHARACTER MAITAIKHU to THAI CHARACTER YAMAKKAN
    Interval(0x0eb1, 0x0eb1),  # LAO VOWEL SIGN MAI KAN to LAO VOWEL SIGN MAI KAN
    Interval(0x0eb4, 0x0eb9),  # LAO VOWEL SIGN I to LAO VOWEL SIGN UU
    Interval(0x0ebb, 0x0ebc),  # LAO VOWEL SIGN MAI KON to LAO SEMIVOWEL SIGN LO
    Interval(0x0ec8, 0x0ecd),  # LAO TONE MAI EK to LAO NIGGAHITA
    Interval(0x0f18, 0x0f19),  # TIBETAN ASTROLOGICAL SIGN -KHYUD PA to TIBETAN ASTROLOGICAL SIGN SDONG TSHUGS
    Interval(0x0f35, 0x0f35),  # TIBETAN MARK NGAS BZUNG NYI ZLA to TIBETAN MARK NGAS BZUNG NYI ZLA
    Interval(0x0f37, 0x0f37),  # TIBETAN MARK NGAS BZUNG SGOR RTAGS to TIBETAN MARK NGAS BZUNG SGOR RTAGS
    Interval(0x0f39, 0x0f39),  # TIBETAN MARK TSA -PHRU to TIBETAN MARK TSA -PHRU
    Interval(0x0f71, 0x0f7e),  # TIBETAN VOWEL SIGN AA to TIBETAN SIGN RJES SU NGA RO
    Interval(0x0f80, 0x0f84),  # TIBETAN VOWEL SIGN REVERSED I to TIBETAN MARK HALANTA
    Interval(0x0f86, 0x0f87),  # TIBETAN SIGN LCI RTAGS to TIBETAN SIGN YANG RTAGS
    Interval(0x0f8d, 0x0f97),  # TIBETAN SUBJOINED SIGN LCE TSA CAN to TIBETAN SUBJOINED LETTER JA
    Interval(0x0f99, 0x0fbc),  # TIBETAN SUBJOINED LETTER NYA to TIBETAN SUBJOINED LETTER FIXED-FORM RA
    Interval(0x0fc6, 0x0fc6),  # TIBETAN SYMBOL PADMA GDAN to TIBETAN SYMBOL PADMA GDAN
    Interval(0x102d, 0x1030),  # MYANMAR VOWEL SIGN I to MYANMAR VOWEL SIGN UU
    Interval(0x1032, 0x1037),  # MYANMAR VOWEL SIGN AI to MYANMAR SIGN DOT BELOW
    Interval(0x1039, 0x103a),  # MYANMAR SIGN VIRAMA to MYANMAR SIGN ASAT
    Interval(0x103d, 0x103e),  # MYANMAR CONSONANT SIGN MEDIAL WA to MYANMAR CONSONANT SIGN MEDIAL HA
    Interval(0x1058, 0x1059),  # MYANMAR VOWEL SIGN VOCALIC L to MYANMAR VOWEL SIGN VOCALIC LL
    Interval(0x105e, 0x1060),  # MYANMAR CONSONANT SIGN MON MEDIAL NA to MYANMAR CONSONANT SIGN MON MEDIAL LA
    Interval(0x1071, 0x1074),  # MYANMAR VOWEL SIGN GEBA KAREN I to MYANMAR VOWEL SIGN KAYAH EE
    Interval(0x1082, 0x1082),  # MYANMAR CONSONANT SIGN SHAN MEDIAL WA to MYANMAR CONSONANT SIGN SHAN MEDIAL WA
    Interval(0x1085, 0x1086),  # MYANMAR VOWEL SIGN SHAN E ABOVE to MYANMAR VOWEL SIGN SHAN FINAL Y
    Interval(0x108d, 0x108d),  # MYANMAR SIGN SHAN COUNCIL EMPHATIC TONE to MYANMAR SIGN SHAN COUNCIL EMPHATIC TONE
    Interval(0x109d, 0x109d),  # MYANMAR VOWEL SIGN AITON AI to MYANMAR VOWEL SIGN AITON AI
    Interval(0x135d, 0x135f),  # ETHIOPIC COMBINING GEMINATION AND VOWEL LENGTH MARK to ETHIOPIC COMBINING GEMINATION MARK
    Interval(0x1712, 0x1714),  # TAGALOG VOWEL SIGN I to TAGALOG SIGN VIRAMA
    Interval(0x1732, 0x1734),  # HANUNOO VOWEL SIGN I to HANUNOO SIGN PAMUDPOD
    Interval(0x1752, 0x1753),  # BUHID VOWEL SIGN I to BUHID VOWEL SIGN U
    Interval(0x1772, 0x1773),  # TAGBANWA VOWEL SIGN I to TAGBANWA VOWEL SIGN U
    Interval(0x17b4, 0x17b5),  # KHMER VOWEL INHERENT AQ to KHMER VOWEL INHERENT AA
    Interval(0x17b7, 0x17bd),  # KHMER VOWEL SIGN I to KHMER VOWEL SIGN UA
    Interval(0x17c6, 0x17c6),  # KHMER SIGN NIKAHIT to KHMER SIGN NIKAHIT
    Interval(0x17c9, 0x17d3),  # KHMER SIGN MUUSIKATOAN to KHMER SIGN BATHAMASAT
    Interval(0x17dd, 0x17dd),  # KHMER SIGN ATTHACAN to KHMER SIGN ATTHACAN
    Interval(0x180b, 0x180e),  # MONGOLIAN FREE VARIATION SELECTOR ONE to MONGOLIAN VOWEL SEPARATOR
    Interval(0x18a9, 0x18a9),  # MONGOLIAN LETTER ALI GALI DAGALGA to MONGOLIAN LETTER ALI GALI DAGALGA
    Interval(0x1920, 0x1922),  # LIMBU VOWEL SIGN A to LIMBU VOWEL SIGN U
    Interval(0x1927, 0x1928),  # LIMBU VOWEL SIGN E to LIMBU VOWEL SIGN O
    Interval(0x1932, 0x1932),  # LIMBU SMALL LETTER ANUSVARA to LIMBU SMALL LETTER ANUSVARA
    Interval(0x1939, 0x193b),  # LIMBU SIGN MUKPHRENG to LIMBU SIGN SA-I
    Interval(0x1a17, 0x1a18),  # BUGINESE VOWEL SIGN I to BUGINESE VOWEL SIGN U
    Interval(0x1a1b, 0x1a1b),  # BUGINESE VOWEL SIGN AE to BUGINESE VOWEL SIGN AE
    Interval(0x1a56, 0x1a56),  # TAI THAM CONSONANT SIGN MEDIAL LA to TAI THAM CONSONANT SIGN MEDIAL LA
    Interval(0x1a58, 0x1a5e),  # TAI THAM SIGN MAI KANG LAI to TAI THAM CONSONANT SIGN SA
    Interval(0x1a60, 0x1a60),  # TAI THAM SIGN SAKOT to TAI THAM SIGN SAKOT
    Interval(0x1a62, 0x1a62),  # TAI THAM VOWEL SIGN MAI SAT to TAI THAM VOWEL SIGN MAI SAT
    Interval(0x1a65, 0x1a6c),  # TAI THAM VOWEL SIGN I to TAI THAM VOWEL SIGN OA BELOW
    Interval(0x1a73, 0x1a7c),  # TAI THAM VOWEL SIGN OA ABOVE to TAI THAM SIGN KHUEN-LUE KARAN
    Interval(0x1a7f, 0x1a7f),  # TAI THAM COMBINING CRYPTOGRAMMIC DOT to TAI THAM COMBINING CRYPTOGRAMMIC DOT
    Interval(0x1ab0, 0x1abe),  # COMBINING DOUBLED CIRCUMFLEX ACCENT to COMBINING PARENTHESES OVERLAY
    Interval(0x1b00, 0x1b03),  # BALINESE SIGN ULU RICEM to BALINESE SIGN SURANG
    Interval(0x1b34, 0x1b34),  # BALINESE SIGN REREKAN to BALINESE SIGN REREKAN
    Interval(0x1b36, 0x1b3a),  # BALINESE VOWEL SIGN ULU to BALINESE VOWEL SIGN RA REPA
    Interval(0x1b3c, 0x1b3c),  # BALINESE VOWEL SIGN LA LENGA to BALINESE VOWEL SIGN LA LENGA
    Interval(0x1b42, 0x1b42),  # BALINESE VOWEL SIGN PEPET to BALINESE VOWEL SIGN PEPET
    Interval(0x1b6b, 0x1b73),  # BALINESE MUSICAL SYMBOL COMBINING TEGEH to BALINESE MUSICAL SYMBOL COMBINING GONG
    Interval(0x1b80, 0x1b81),  # SUNDANESE SIGN PANYECEK to SUNDANESE SIGN PANGLAYAR
    Interval(0x1ba2, 0x1ba5),  # SUNDANESE CONSONANT SIGN PANYAKRA to SUNDANESE VOWEL SIGN PANYUKU
    Interval(0x1ba8, 0x1ba9),  # SUNDANESE VOWEL SIGN PAMEPET to SUNDANESE VOWEL SIGN PANEULEUNG
    Interval(0x1bab, 0x1bad),  # SUNDANESE SIGN VIRAMA to SUNDANESE CONSONANT SIGN PASANGAN WA
    Interval(0x1be6, 0x1be6),  # BATAK SIGN TOMPI to BATAK SIGN TOMPI
    Interval(0x1be8, 0x1be9),  # BATAK VOWEL SIGN PAKPAK E to BATAK VOWEL SIGN EE
    Interval(0x1bed, 0x1bed),  # BATAK VOWEL SIGN KARO O to BATAK VOWEL SIGN KARO O
    Interval(0x1bef, 0x1bf1),  # BATAK VOWEL SIGN U FOR SIMALUNGUN SA to BATAK CONSONANT SIGN H
    Interval(0x1c2c, 0x1c33),  # LEPCHA VOWEL SIGN E to LEPCHA CONSONANT SIGN T
    Interval(0x1c36, 0x1c37),  # LEPCHA SIGN RAN to LEPCHA SIGN NUKTA
    Interval(0x1cd0, 0x1cd2),  # VEDIC TONE KARSHANA to VEDIC TONE PRENKHA
    Interval(0x1cd4, 0x1ce0),  # VEDIC SIGN YAJURVEDIC MIDLINE SVARITA to VEDIC TONE RIGVEDIC KASHMIRI INDEPENDENT SVARITA
    Interval(0x1ce2, 0x1ce8),  # VEDIC SIGN VISARGA SVARITA to VEDIC SIGN VISARGA ANUDATTA WITH TAIL
    Interval(0x1ced, 0x1ced),  # VEDIC SIGN TIRYAK to VEDIC SIGN TIRYAK
    Interval(0x1cf4, 0x1cf4),  # VEDIC TONE CANDRA ABOVE to VEDIC TONE CANDRA ABOVE
    Interval(0x1cf8, 0x1cf9),  # VEDIC TONE RING ABOVE to VEDIC TONE DOUBLE RING ABOVE
    Interval(0x1dc0, 0x1df5),  # COMBINING DOTTED GRAVE ACCENT to COMBINING UP TACK ABOVE
    Interval(0x1dfc, 0x1dff),  # COMBINING DOUBLE INVERTED BREVE BELOW to COMBINING RIGHT ARROWHEAD AND DOWN ARROWHEAD BELOW
    Interval(0x200b, 0x200f),  # ZERO WIDTH SPACE to RIGHT-TO-LEFT MARK
    Interval(0x202a, 0x202e),  # LEFT-TO-RIGHT EMBEDDING to RIGHT-TO-LEFT OVERRIDE
    Interval(0x2060, 0x2064),  # WORD JOINER to INVISIBLE PLUS
    Interval(0x2066, 0x206f),  # LEFT-TO-RIGHT ISOLATE to NOMINAL DIGIT SHAPES
    Interval(0x20d0, 0x20f0),  # COMBINING LEFT HARPOON ABOVE to COMBINING ASTERISK ABOVE
    Interval(0x2cef, 0x2cf1),  # COPTIC COMBINING NI ABOVE to COPTIC COMBINING SPIRITUS LENIS
    Interval(0x2d7f, 0x2d7f),  # TIFINAGH CONSONANT JOINER to TIFINAGH CONSONANT JOINER
    Interval(0x2de0, 0x2dff),  # COMBINING CYRILLIC LETTER BE to COMBINING CYRILLIC LETTER IOTIFIED BIG YUS
    Interval(0x302a, 0x302d),  # IDEOGRAPHIC LEVEL TONE MARK to IDEOGRAPHIC ENTERING TONE MARK
    Interval(0x3099, 0x309a),  # COMBINING KATAKANA-HIRAGANA VOICED SOUND MARK to COMBINING KATAKANA-HIRAGANA SEMI-VOICED SOUND MARK
    Interval(0xa66f, 0xa672),  # COMBINING CYRILLIC VZMET to COMBINING CYRILLIC THOUSAND MILLIONS SIGN
    Interval(0xa674, 0xa67d),  # COMBINING CYRILLIC LETTER UKRAINIAN IE to COMBINING CYRILLIC PAYEROK
    Interval(0xa69e, 0xa69f),  # COMBINING CYRILLIC LETTER EF to COMBINING CYRILLIC LETTER IOTIFIED E
    Interval(0xa6f0, 0xa6f1),  # BAMUM COMBINING MARK KOQNDON to BAMUM COMBINING MARK TUKWENTIS
    Interval(0xa802, 0xa802),  # SYLOTI NAGRI SIGN DVISVARA to SYLOTI NAGRI SIGN DVISVARA
    Interval(0xa806, 0xa806),  # SYLOTI NAGRI SIGN HASANTA to SYLOTI NAGRI SIGN HASANTA
    Interval(0xa80b, 0xa80b),  # SYLOTI NAGRI SIGN ANUSVARA to SYLOTI NAGRI SIGN ANUSVARA
    Interval(0xa825, 0xa826),  # SYLOTI NAGRI VOWEL SIGN U to SYLOTI NAGRI VOWEL SIGN E
    Interval(0xa8c4, 0xa8c4),  # SAURASHTRA SIGN VIRAMA to SAURASHTRA SIGN VIRAMA
    Interval(0xa8e0, 0xa8f1),  # COMBINING DEVANAGARI DIGIT ZERO to COMBINING DEVANAGARI SIGN AVAGRAHA
    Interval(0xa926, 0xa92d),  # KAYAH LI VOWEL UE to KAYAH LI TONE CALYA PLOPHU
    Interval(0xa947, 0xa951),  # REJANG VOWEL SIGN I to REJANG CONSONANT SIGN R
    Interval(0xa980, 0xa982),  # JAVANESE SIGN PANYANGGA to JAVANESE SIGN LAYAR
    Interval(0xa9b3, 0xa9b3),  # JAVANESE SIGN CECAK TELU to JAVANESE SIGN CECAK TELU
    Interval(0xa9b6, 0xa9b9),  # JAVANESE VOWEL SIGN WULU to JAVANESE VOWEL SIGN SUKU MENDUT
    Interval(0xa9bc, 0xa9bc),  # JAVANESE VOWEL SIGN PEPET to JAVANESE VOWEL SIGN PEPET
    Interval(0xa9e5, 0xa9e5),  # MYANMAR SIGN SHAN SAW to MYANMAR SIGN SHAN SAW
    Interval(0xaa29, 0xaa2e),  # CHAM VOWEL SIGN AA to CHAM VOWEL SIGN OE
    Interval(0xaa31, 0xaa32),  # CHAM VOWEL SIGN AU to CHAM VOWEL SIGN UE
    Interval(0xaa35, 0xaa36),  # CHAM CONSONANT SIGN LA to CHAM CONSONANT SIGN WA
    Interval(0xaa43, 0xaa43),  # CHAM CONSONANT SIGN FINAL NG to CHAM CONSONANT SIGN FINAL NG
    Interval(0xaa4c, 0xaa4c),  # CHAM CONSONANT SIGN FINAL M to CHAM CONSONANT SIGN FINAL M
    Interval(0xaa7c, 0xaa7c),  # MYANMAR SIGN TAI LAING TONE-2 to MYANMAR SIGN TAI LAING TONE-2
    Interval(0xaab0, 0xaab0),  # TAI VIET MAI KANG to TAI VIET MAI KANG
    Interval(0xaab2, 0xaab4),  # TAI VIET VOWEL I to TAI VIET VOWEL U
    Interval(0xaab7, 0xaab8),  # TAI VIET MAI KHIT to TAI VIET VOWEL IA
    Interval(0xaabe, 0xaabf),  # TAI VIET VOWEL AM to TAI VIET TONE MAI EK
    Interval(0xaac1, 0xaac1),  # TAI VIET TONE MAI THO to TAI VIET TONE MAI THO
    Interval(0xaaec, 0xaaed),  # MEETEI MAYEK VOWEL SIGN UU to MEETEI MAYEK VOWEL SIGN AAI
    Interval(0xaaf6, 0xaaf6),  # MEETEI MAYEK VIRAMA to MEETEI MAYEK VIRAMA
    Interval(0xabe5, 0xabe5),  # MEETEI MAYEK VOWEL SIGN ANAP to MEETEI MAYEK VOWEL SIGN ANAP
    Interval(0xabe8, 0xabe8),  # MEETEI MAYEK VOWEL SIGN UNAP to MEETEI MAYEK VOWEL SIGN UNAP
    Interval(0xabed, 0xabed),  # MEETEI MAYEK APUN IYEK to MEETEI MAYEK APUN IYEK
    Interval(0xfb1e, 0xfb1e),  # HEBREW POINT JUDEO-SPANISH VARIKA to HEBREW POINT JUDEO-SPANISH VARIKA
    Interval(0xfe00, 0xfe0f),  # VARIATION SELECTOR-1 to VARIATION SELECTOR-16
    Interval(0xfe20, 0xfe2f),  # COMBINING LIGATURE LEFT HALF to COMBINING CYRILLIC TITLO RIGHT HALF
    Interval(0xfeff, 0xfeff),  # ZERO WIDTH NO-BREAK SPACE to ZERO WIDTH NO-BREAK SPACE
    Interval(0xfff9, 0xfffb),  # INTERLINEAR ANNOTATION ANCHOR to INTERLINEAR ANNOTATION TERMINATOR
    Interval(0x101fd, 0x101fd),  # PHAISTOS DISC SIGN COMBINING OBLIQUE STROKE to PHAISTOS DISC SIGN COMBINING OBLIQUE STROKE
    Interval(0x102e0, 0x102e0),  # COPTIC EPACT THOUSANDS MARK to COPTIC EPACT THOUSANDS MARK
    Interval(0x10376, 0x1037a),  # COMBINING OLD PERMIC LETTER AN to COMBINING OLD PERMIC LETTER SII
    Interval(0x10a01, 0x10a03),  # KHAROSHTHI VOWEL SIGN I to KHAROSHTHI VOWEL SIGN VOCALIC R
    Interval(0x10a05, 0x10a06),  # KHAROSHTHI VOWEL SIGN E to KHAROSHTHI VOWEL SIGN O
    Interval(0x10a0c, 0x10a0f),  # KHAROSHTHI VOWEL LENGTH MARK to KHAROSHTHI SIGN VISARGA
    Interval(0x10a38, 0x10a3a),  # KHAROSHTHI SIGN BAR ABOVE to KHAROSHTHI SIGN DOT BELOW
    Interval(0x10a3f, 0x10a3f),  # KHAROSHTHI VIRAMA to KHAROSHTHI VIRAMA
    Interval(0x10ae5, 0x10ae6),  # MANICHAEAN ABBREVIATION MARK ABOVE to MANICHAEAN ABBREVIATION MARK BELOW
    Interval(0x11001, 0x11001),  # BRAHMI SIGN ANUSVARA to BRAHMI SIGN ANUSVARA
    Interval(0x11038, 0x11046),  # BRAHMI VOWEL SIGN AA to BRAHMI VIRAMA
    Interval(0x1107f, 0x11081),  # BRAHMI NUMBER JOINER to KAITHI SIGN ANUSVARA
    Interval(0x110b3, 0x110b6),  # KAITHI VOWEL SIGN U to KAITHI VOWEL SIGN AI
    Interval(0x110b9, 0x110ba),  # KAITHI SIGN VIRAMA to KAITHI SIGN NUKTA
    Interval(0x110bd, 0x110bd),  # KAITHI NUMBER SIGN to KAITHI NUMBER SIGN
    Interval(0x11100, 0x11102),  # CHAKMA SIGN CANDRABINDU to CHAKMA SIGN VISARGA
    Interval(0x11127, 0x1112b),  # CHAKMA VOWEL SIGN A to CHAKMA VOWEL SIGN UU
    Interval(0x1112d, 0x11134),  # CHAKMA VOWEL SIGN AI to CHAKMA MAAYYAA
    Interval(0x11173, 0x11173),  # MAHAJANI SIGN NUKTA to MAHAJANI SIGN NUKTA
    Interval(0x11180, 0x11181),  # SHARADA SIGN CANDRABINDU to SHARADA SIGN ANUSVARA
    Interval(0x111b6, 0x111be),  # SHARADA VOWEL SIGN U to SHARADA VOWEL SIGN O
    Interval(0x111ca, 0x111cc),  # SHARADA SIGN NUKTA to SHARADA EXTRA SHORT VOWEL MARK
    Interval(0x1122f, 0x11231),  # KHOJKI VOWEL SIGN U to KHOJKI VOWEL SIGN AI
    Interval(0x11234, 0x11234),  # KHOJKI SIGN ANUSVARA to KHOJKI SIGN ANUSVARA
    Interval(0x11236, 0x11237),  # KHOJKI SIGN NUKTA to KHOJKI SIGN SHADDA
    Interval(0x112df, 0x112df),  # KHUDAWADI SIGN ANUSVARA to KHUDAWADI SIGN ANUSVARA
    Interval(0x112e3, 0x112ea),  # KHUDAWADI VOWEL SIGN U to KHUDAWADI SIGN VIRAMA
    Interval(0x11300, 0x11301),  # GRANTHA SIGN COMBINING ANUSVARA ABOVE to GRANTHA SIGN CANDRABINDU
    Interval(0x1133c, 0x1133c),  # GRANTHA SIGN NUKTA to GRANTHA SIGN NUKTA
    Interval(0x11340, 0x11340),  # GRANTHA VOWEL SIGN II to GRANTHA VOWEL SIGN II
    Interval(0x11366, 0x1136c),  # COMBINING GRANTHA DIGIT ZERO to COMBINING GRANTHA DIGIT SIX
    Interval(0x11370, 0x11374),  # COMBINING GRANTHA LETTER A to COMBINING GRANTHA LETTER PA
    Interval(0x114b3, 0x114b8),  # TIRHUTA VOWEL SIGN U to TIRHUTA VOWEL SIGN VOCALIC LL
    Interval(0x114ba, 0x114ba),  # TIRHUTA VOWEL SIGN SHORT E to TIRHUTA VOWEL SIGN SHORT E
    Interval(0x114bf, 0x114c0),  # TIRHUTA SIGN CANDRABINDU to TIRHUTA SIGN ANUSVARA
    Interval(0x114c2, 0x114c3),  # TIRHUTA SIGN VIRAMA to TIRHUTA SIGN NUKTA
    Interval(0x115b2, 0x115b5),  # SIDDHAM VOWEL SIGN U to SIDDHAM VOWEL SIGN VOCALIC RR
    Interval(0x115bc, 0x115bd),  # SIDDHAM SIGN CANDRABINDU to SIDDHAM SIGN ANUSVARA
    Interval(0x115bf, 0x115c0),  # SIDDHAM SIGN VIRAMA to SIDDHAM SIGN NUKTA
    Interval(0x115dc, 0x115dd),  # SIDDHAM VOWEL SIGN ALTERNATE U to SIDDHAM VOWEL SIGN ALTERNATE UU
    Interval(0x11633, 0x1163a),  # MODI VOWEL SIGN U to MODI VOWEL SIGN AI
    Interval(0x1163d, 0x1163d),  # MODI SIGN ANUSVARA to MODI SIGN ANUSVARA
    Interval(0x1163f, 0x11640),  # MODI SIGN VIRAMA to MODI SIGN ARDHACANDRA
    Interval(0x116ab, 0x116ab),  # TAKRI SIGN ANUSVARA to TAKRI SIGN ANUSVARA
    Interval(0x116ad, 0x116ad),  # TAKRI VOWEL SIGN AA to TAKRI VOWEL SIGN AA
    Interval(0x116b0, 0x116b5),  # TAKRI VOWEL SIGN U to TAKRI VOWEL SIGN AU
    Interval(0x116b7, 0x116b7),  # TAKRI SIGN NUKTA to TAKRI SIGN NUKTA
    Interval(0x1171d, 0x1171f),  # AHOM CONSONANT SIGN MEDIAL LA to AHOM CONSONANT SIGN MEDIAL LIGATING RA
    Interval(0x11722, 0x11725),  # AHOM VOWEL SIGN I to AHOM VOWEL SIGN UU
    Interval(0x11727, 0x1172b),  # AHOM VOWEL SIGN AW to AHOM SIGN KILLER
    Interval(0x16af0, 0x16af4),  # BASSA VAH COMBINING HIGH TONE to BASSA VAH COMBINING HIGH-LOW TONE
    Interval(0x16b30, 0x16b36),  # PAHAWH HMONG MARK CIM TUB to PAHAWH HMONG MARK CIM TAUM
    Interval(0x16f8f, 0x16f92),  # MIAO TONE RIGHT to MIAO TONE BELOW
    Interval(0x1bc9d, 0x1bc9e),  # DUPLOYAN THICK LETTER SELECTOR to DUPLOYAN DOUBLE MARK
    Interval(0x1bca0, 0x1bca3),  # SHORTHAND FORMAT LETTER OVERLAP to SHORTHAND FORMAT UP STEP
    Interval(0x1d167, 0x1d169),  # MUSICAL SYMBOL COMBINING TREMOLO-1 to MUSICAL SYMBOL COMBINING TREMOLO-3
    Interval(0x1d173, 0x1d182),  # MUSICAL SYMBOL BEGIN BEAM to MUSICAL SYMBOL COMBINING LOURE
    Interval(0x1d185, 0x1d18b),  # MUSICAL SYMBOL COMBINING DOIT to MUSICAL SYMBOL COMBINING TRIPLE TONGUE
    Interval(0x1d1aa, 0x1d1ad),  # MUSICAL SYMBOL COMBINING DOWN BOW to MUSICAL SYMBOL COMBINING SNAP PIZZICATO
    Interval(0x1d242, 0x1d244),  # COMBINING GREEK MUSICAL TRISEME to COMBINING GREEK MUSICAL PENTASEME
    Interval(0x1da00, 0x1da36),  # SIGNWRITING HEAD RIM to SIGNWRITING AIR SUCKING IN
    Interval(0x1da3b, 0x1da6c),  # SIGNWRITING MOUTH CLOSED NEUTRAL to SIGNWRITING EXCITEMENT
    Interval(0x1da75, 0x1da75),  # SIGNWRITING UPPER BODY TILTING FROM HIP JOINTS to SIGNWRITING UPPER BODY TILTING FROM HIP JOINTS
    Interval(0x1da84, 0x1da84),  # SIGNWRITING LOCATION HEAD NECK to SIGNWRITING LOCATION HEAD NECK
    Interval(0x1da9b, 0x1da9f),  # SIGNWRITING FILL MODIFIER-2 to SIGNWRITING FILL MODIFIER-6
    Interval(0x1daa1, 0x1daaf),  # SIGNWRITING ROTATION MODIFIER-2 to SIGNWRITING ROTATION MODIFIER-16
    Interval(0x1e8d0, 0x1e8d6),  # MENDE KIKAKUI COMBINING NUMBER TEENS to MENDE KIKAKUI COMBINING NUMBER MILLIONS
    Interval(0xe0001, 0xe0001),  # LANGUAGE TAG to LANGUAGE TAG
    Interval(0xe0020, 0xe007f),  # TAG SPACE to CANCEL TAG
    Interval(0xe0100, 0xe01ef),  # VARIATION SELECTOR-17 to VARIATION SELECTOR-256
)

# 宽字符区间表（已排序、互不重叠）
WIDE_TABLE: Tuple[Interval, ...] = (
    Interval(0x1100, 0x115f),  # HANGUL CHOSEONG KIYEOK to HANGUL CHOSEONG FILLER
    Interval(0x2329, 0x232a),  # LEFT-POINTING ANGLE BRACKET to RIGHT-POINTING ANGLE BRACKET
    Interval(0x2e80, 0x2e99),  # CJK RADICAL REPEAT to CJK RADICAL RAP
    Interval(0x2e9b, 0x2ef3),  # CJK RADICAL CHOKE to CJK RADICAL C-SIMPLIFIED TURTLE
    Interval(0x2f00, 0x2fd5),  # KANGXI RADICAL ONE to KANGXI RADICAL FLUTE
    Interval(0x2ff0, 0x2ffb),  # IDEOGRAPHIC DESCRIPTION CHARACTER LEFT TO RIGHT to IDEOGRAPHIC DESCRIPTION CHARACTER OVERLAID
    Interval(0x3000, 0x303e),  # IDEOGRAPHIC SPACE to IDEOGRAPHIC VARIATION INDICATOR
    Interval(0x3041, 0x3096),  # HIRAGANA LETTER SMALL A to HIRAGANA LETTER SMALL KE
    Interval(0x3099, 0x30ff),  # COMBINING KATAKANA-HIRAGANA VOICED SOUND MARK to KATAKANA DIGRAPH KOTO
    Interval(0x3105, 0x312d),  # BOPOMOFO LETTER B to BOPOMOFO LETTER IH
    Interval(0x3131, 0x318e),  # HANGUL LETTER KIYEOK to HANGUL LETTER ARAEAE
    Interval(0x3190, 0x31ba),  # IDEOGRAPHIC ANNOTATION LINKING MARK to BOPOMOFO LETTER ZY
    Interval(0x31c0, 0x31e3),  # CJK STROKE T to CJK STROKE Q
    Interval(0x31f0, 0x321e),  # KATAKANA LETTER SMALL KU to PARENTHESIZED KOREAN CHARACTER O HU
    Interval(0x3220, 0x3247),  # PARENTHESIZED IDEOGRAPH ONE to CIRCLED IDEOGRAPH KOTO
    Interval(0x3250, 0x32fe),  # PARTNERSHIP SIGN to CIRCLED KATAKANA WO
    Interval(0x3300, 0x4dbf),  # SQUARE APAATO to U+4DBF
    Interval(0x4e00, 0xa48c),  # <CJK Ideograph, First> to YI SYLLABLE YYR
    Interval(0xa490, 0xa4c6),  # YI RADICAL QOT to YI RADICAL KE
    Interval(0xa960, 0xa97c),  # HANGUL CHOSEONG TIKEUT-MIEUM to HANGUL CHOSEONG SSANGYEORINHIEUH
    Interval(0xac00, 0xd7a3),  # <Hangul Syllable, First> to <Hangul Syllable, Last>
    Interval(0xf900, 0xfaff),  # CJK COMPATIBILITY IDEOGRAPH-F900 to U+FAFF
    Interval(0xfe10, 0xfe19),  # PRESENTATION FORM FOR VERTICAL COMMA to PRESENTATION FORM FOR VERTICAL HORIZONTAL ELLIPSIS
    Interval(0xfe30, 0xfe52),  # PRESENTATION FORM FOR VERTICAL TWO DOT LEADER to SMALL FULL STOP
    Interval(0xfe54, 0xfe66),  # SMALL SEMICOLON to SMALL EQUALS SIGN
    Interval(0xfe68, 0xfe6b),  # SMALL REVERSE SOLIDUS to SMALL COMMERCIAL AT
    Interval(0xff01, 0xff60),  # FULLWIDTH EXCLAMATION MARK to FULLWIDTH RIGHT WHITE PARENTHESIS
    Interval(0xffe0, 0xffe6),  # FULLWIDTH CENT SIGN to FULLWIDTH WON SIGN
    Interval(0x1b000, 0x1b001),  # KATAKANA LETTER ARCHAIC E to HIRAGANA LETTER ARCHAIC YE
    Interval(0x1f200, 0x1f202),  # SQUARE HIRAGANA HOKA to SQUARED KATAKANA SA
    Interval(0x1f210, 0x1f23a),  # SQUARED CJK UNIFIED IDEOGRAPH-624B to SQUARED CJK UNIFIED IDEOGRAPH-55B6
    Interval(0x1f240, 0x1f248),  # TORTOISE SHELL BRACKETED CJK UNIFIED IDEOGRAPH-672C to TORTOISE SHELL BRACKETED CJK UNIFIED IDEOGRAPH-6557
    Interval(0x1f250, 0x1f251),  # CIRCLED IDEOGRAPH ADVANTAGE to CIRCLED IDEOGRAPH ACCEPT
    Interval(0x20000, 0x2fffd),  # CJK UNIFIED IDEOGRAPH-20000 to U+2FFFD
    Interval(0x30000, 0x3fffd),  # U+30000 to U+3FFFD
)


def validate_table(table: Sequence[Interval], name: str = "table") -> int:
    """
    检查区间表是否满足二分查找的前提条件。

    Args:
        table: 区间表
        name: 表名，仅用于错误信息

    Returns:
        int: 区间数量

    Raises:
        TableError: 表为空、区间首尾颠倒、或相邻区间未严格升序
    """
    if not table:
        raise TableError(f"{name}: interval table is empty")

    previous = None
    for index, (first, last) in enumerate(table):
        if first > last:
            raise TableError(
                f"{name}[{index}]: first 0x{first:04x} > last 0x{last:04x}")
        if previous is not None and previous.last >= first:
            raise TableError(
                f"{name}[{index}]: 0x{first:04x} does not follow "
                f"0x{previous.last:04x}")
        previous = Interval(first, last)

    logger.debug(f"{name}: {len(table)} intervals ok")
    return len(table)


def validate_tables() -> None:
    """校验内置的两张区间表"""
    validate_table(ZERO_WIDTH_TABLE, "ZERO_WIDTH_TABLE")
    validate_table(WIDE_TABLE, "WIDE_TABLE")


def table_contains(table: Iterable[Interval], ucs: int) -> bool:
    """
    线性扫描判断码点是否落在某个区间内。

    比 bisearch() 慢得多，只用于交叉校验。
    """
    return any(first <= ucs <= last for first, last in table)


__all__ = [
    'Interval',
    'TableError',
    'UNICODE_VERSION',
    'ZERO_WIDTH_TABLE',
    'WIDE_TABLE',
    'validate_table',
    'validate_tables',
    'table_contains',
]
