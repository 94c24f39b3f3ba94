"""
Regelkatalog für Bahasa Indonesia (Basis: KBBI, PUEBI, SPOK).

Der Katalog ist statisch und wird beim Import einmal kompiliert. Die Regeln
sind nach Kategorie gruppiert, in derselben Reihenfolge, in der die RuleEngine
sie prüft. Einträge mit enabled=False (objectWithPreposition, missingPeriod)
bleiben dokumentiert im Katalog, werden aber nicht ausgeführt.

Alle Wort-Regeln laufen mit IGNORECASE | ASCII: [a-z], \\b und die
Groß-/Kleinschreibung verhalten sich damit wie ASCII-Regexe mit Flag "gi".
Muster werden über compile_pattern gebaut, \\s trifft also jedes
Unicode-Leerzeichen wie in JavaScript.
"""

from __future__ import annotations

import re
from typing import Optional

from app.services.grammar.patterns import WORD_FLAGS, compile_pattern
from app.services.grammar.rule_models import PatternRule, RuleVerdict
from app.services.grammar.word_lists import PROPER_PLACE_NAMES

DEFAULT_RULE_LABEL = "Aturan umum tata bahasa Indonesia"
EFFECTIVENESS_RULE_LABEL = "Kalimat Efektif"


# -----------------------------
# 1. Struktur kalimat (SPOK)
# -----------------------------

PREPOSITION_BEFORE_SUBJECT = PatternRule(
    name="prepositionBeforeSubject",
    pattern=compile_pattern(
        r"\b(bagi|untuk|kepada|dari|oleh)\s+([a-z\s]+)\s+(ini|itu|tersebut|harus|perlu|wajib)\b",
        WORD_FLAGS,
    ),
    message=(
        "Hindari penggunaan kata depan sebelum subjek. "
        "Subjek sebaiknya tidak didahului kata depan"
    ),
    severity="warning",
    category="struktur",
    rule="SPOK - Subjek tidak boleh didahului kata depan",
    explanation=(
        "Menurut aturan SPOK, subjek tidak boleh didahului kata depan "
        "seperti 'bagi', 'untuk', 'kepada'"
    ),
)

OBJECT_WITH_PREPOSITION = PatternRule(
    name="objectWithPreposition",
    pattern=compile_pattern(
        r"\b(di|ke|dari|pada|dengan|untuk|kepada|oleh)\s+([a-z]+)\s+(yang|ini|itu)\s+([a-z]+)\b",
        WORD_FLAGS,
    ),
    message="Objek tidak boleh didahului kata depan",
    severity="error",
    category="struktur",
    rule="SPOK - Objek tidak didahului kata depan",
    enabled=False,
)

STRUCTURE_RULES = (PREPOSITION_BEFORE_SUBJECT, OBJECT_WITH_PREPOSITION)


# -----------------------------
# 2. Kata berimbuhan
# -----------------------------

def _join_groups(match: re.Match) -> str:
    return f"{match.group(1).lower()}{match.group(2).lower()}"


# "di" fehlt hier, dafür gibt es die eigene Disambiguierung
SEPARATED_PREFIX = PatternRule(
    name="separatedPrefix",
    pattern=compile_pattern(r"\b(me|ber|ter|pe)\s+([a-z]{2,})\b", WORD_FLAGS),
    message="Awalan 'me-', 'ber-', 'ter-', 'pe-' harus SERANGKAI dengan kata dasar",
    severity="error",
    category="imbuhan",
    rule="KBBI - Awalan harus serangkai",
    explanation="Menurut KBBI, awalan harus ditulis serangkai dengan kata dasar",
    suggestion=_join_groups,
)

SEPARATED_SUFFIX = PatternRule(
    name="separatedSuffix",
    pattern=compile_pattern(r"\b([a-z]{2,})\s+(kan|i|an|nya)\b", WORD_FLAGS),
    message="Akhiran '-kan', '-i', '-an', '-nya' harus SERANGKAI dengan kata dasar",
    severity="error",
    category="imbuhan",
    rule="KBBI - Akhiran harus serangkai",
    explanation="Menurut KBBI, akhiran harus ditulis serangkai dengan kata dasar",
    suggestion=_join_groups,
)

SEPARATED_CONFIX = PatternRule(
    name="separatedConfix",
    pattern=compile_pattern(r"\b(ke|pe|per|me)\s+([a-z]{2,})\s+(an|kan)\b", WORD_FLAGS),
    message="Konfiks 'ke-an', 'pe-an', 'per-an', 'me-kan' harus SERANGKAI",
    severity="error",
    category="imbuhan",
    rule="KBBI - Konfiks harus serangkai",
    explanation="Menurut KBBI, konfiks harus ditulis serangkai",
)

AFFIX_RULES = (SEPARATED_PREFIX, SEPARATED_SUFFIX, SEPARATED_CONFIX)


# -----------------------------
# 5. Tanda baca (PUEBI)
# -----------------------------

COMMA_BEFORE_CONJUNCTION = PatternRule(
    name="commaBeforeConjunction",
    pattern=compile_pattern(r",\s*(dan|atau|tetapi|melainkan)\s+[a-z]", WORD_FLAGS),
    message=(
        "Tanda koma tidak diperlukan sebelum konjungsi jika induk kalimat "
        "mendahului anak kalimat"
    ),
    severity="warning",
    category="tanda-baca",
    rule="PUEBI - Penggunaan koma sebelum konjungsi",
)

_SENTENCE_END = re.compile(r"[.!?;:]")


def _check_missing_period(match: re.Match, text: str) -> Optional[RuleVerdict]:
    before = text[max(0, match.start() - 10):match.start()]
    if _SENTENCE_END.search(before):
        return None
    return RuleVerdict(
        message="Mungkin perlu tanda titik (.) sebelum kalimat baru",
        severity="suggestion",
        category="tanda-baca",
        rule="PUEBI - Tanda titik di akhir kalimat",
    )


# case-sensitive: nur Klein- gefolgt von Großbuchstabe
MISSING_PERIOD = PatternRule(
    name="missingPeriod",
    pattern=compile_pattern(r"[a-z]\s+[A-Z]"),
    message="Mungkin perlu tanda titik (.) sebelum kalimat baru",
    severity="suggestion",
    category="tanda-baca",
    rule="PUEBI - Tanda titik di akhir kalimat",
    check=_check_missing_period,
    enabled=False,
)

PUNCTUATION_RULES = (COMMA_BEFORE_CONJUNCTION, MISSING_PERIOD)


# -----------------------------
# 6. Kalimat efektif
# -----------------------------

UNNECESSARY_REPETITION = (
    PatternRule(
        name="repetitionSudahTelah",
        pattern=compile_pattern(r"\b(sudah|telah)\s+(sudah|telah)\b", WORD_FLAGS),
        message="Penggunaan ganda 'sudah' atau 'telah' tidak diperlukan",
        severity="error",
        category="efektivitas",
        rule="Kalimat Efektif - Hindari pengulangan",
    ),
    PatternRule(
        name="repetitionAkanHendak",
        pattern=compile_pattern(r"\b(akan|hendak)\s+(akan|hendak)\b", WORD_FLAGS),
        message="Penggunaan ganda 'akan' atau 'hendak' tidak diperlukan",
        severity="error",
        category="efektivitas",
    ),
    PatternRule(
        name="repetitionPronoun",
        pattern=compile_pattern(r"\b(saya|aku|kita|kami)\s+(saya|aku|kita|kami)\b", WORD_FLAGS),
        message="Penggunaan ganda kata ganti tidak diperlukan",
        severity="warning",
        category="efektivitas",
    ),
    PatternRule(
        name="repetitionYangBahwa",
        pattern=compile_pattern(r"\b(yang|bahwa)\s+(yang|bahwa)\b", WORD_FLAGS),
        message="Penggunaan ganda 'yang' atau 'bahwa' mungkin tidak diperlukan",
        severity="warning",
        category="efektivitas",
    ),
    PatternRule(
        name="repetitionPun",
        pattern=compile_pattern(r"\b(pun)\s+(pun)\b", WORD_FLAGS),
        message="Penggunaan ganda 'pun' tidak diperlukan",
        severity="error",
        category="efektivitas",
    ),
)


def _check_parallelism(match: re.Match, text: str) -> Optional[RuleVerdict]:
    forms = [match.group(1), match.group(2), match.group(4)]

    has_kan = any(f.endswith("kan") for f in forms)
    has_i = any(f.endswith("i") for f in forms)
    has_an = any(f.endswith("an") for f in forms)

    mixed = (
        (has_kan and not all(f.endswith("kan") for f in forms))
        or (has_i and not all(f.endswith("i") for f in forms))
        or (has_an and not all(f.endswith("an") for f in forms))
    )
    if not mixed:
        return None

    return RuleVerdict(
        message="Unsur setara harus menggunakan pola kata yang sama (keparalelan)",
        severity="warning",
        category="efektivitas",
        rule="Kalimat Efektif - Keparalelan bentuk",
        explanation="Unsur-unsur yang setara dalam kalimat harus menggunakan pola kata yang sama",
    )


PARALLELISM = PatternRule(
    name="parallelism",
    pattern=compile_pattern(
        r"\b([a-z]+(?:kan|i)?)\s*,\s*([a-z]+(?:kan|i)?)\s*,\s*(dan|atau)\s+([a-z]+(?:an|kan|i)?)\b",
        WORD_FLAGS,
    ),
    message="Unsur setara harus menggunakan pola kata yang sama (keparalelan)",
    severity="warning",
    category="efektivitas",
    rule="Kalimat Efektif - Keparalelan bentuk",
    check=_check_parallelism,
)

EFFECTIVENESS_RULES = UNNECESSARY_REPETITION + (PARALLELISM,)


# -----------------------------
# 7. Konjungsi
# -----------------------------

WRONG_CONJUNCTION = PatternRule(
    name="wrongConjunction",
    pattern=compile_pattern(r"\b(karena|sebab)\s+(maka|sehingga)\b", WORD_FLAGS),
    message="Hindari penggunaan 'karena/sebab' dengan 'maka/sehingga' secara bersamaan",
    severity="warning",
    category="konjungsi",
    rule="KBBI - Penggunaan konjungsi",
)

CONJUNCTION_RULES = (WRONG_CONJUNCTION,)


# -----------------------------
# 8. Spasi
# -----------------------------

# jede Folge von Leerraum zählt, auch NBSP und Em-Space
DOUBLE_SPACES = PatternRule(
    name="doubleSpaces",
    pattern=compile_pattern(r"\s{2,}"),
    message="Spasi ganda tidak diperlukan",
    severity="warning",
    category="format",
    rule="PUEBI - Spasi",
    suggestion=" ",
)

SPACING_RULES = (DOUBLE_SPACES,)


# -----------------------------
# 9. Kapitalisasi
# -----------------------------

PLACE_NAME_PATTERN = compile_pattern(
    r"\b([a-z]+)\s+(" + "|".join(PROPER_PLACE_NAMES) + r")\b",
    WORD_FLAGS,
)

PLACE_NAME_MESSAGE = "Nama tempat harus diawali huruf kapital"
PLACE_NAME_RULE = "PUEBI - Kapitalisasi nama tempat"


def all_rules() -> tuple[PatternRule, ...]:
    """Alle Regex-Regeln des Katalogs, inkl. deaktivierter Einträge."""
    return (
        STRUCTURE_RULES
        + AFFIX_RULES
        + PUNCTUATION_RULES
        + EFFECTIVENESS_RULES
        + CONJUNCTION_RULES
        + SPACING_RULES
    )


def disabled_rules() -> tuple[PatternRule, ...]:
    return tuple(r for r in all_rules() if not r.enabled)
