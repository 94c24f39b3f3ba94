"""
Prüffunktionen je Regelkategorie: text -> list[Finding].

Jede Funktion ist rein (liest nur Text, Katalog und Wortlisten). Die
Fehlerisolation pro Kategorie übernimmt die RuleEngine, nicht diese Funktionen.
"""

from __future__ import annotations

from typing import Iterable

from app.models.pydantic import Finding
from app.services.grammar.patterns import WORD_FLAGS, compile_pattern
from app.services.grammar.rule_models import PatternRule
from app.services.grammar.rules import (
    AFFIX_RULES,
    CONJUNCTION_RULES,
    EFFECTIVENESS_RULES,
    EFFECTIVENESS_RULE_LABEL,
    PLACE_NAME_MESSAGE,
    PLACE_NAME_PATTERN,
    PLACE_NAME_RULE,
    PUNCTUATION_RULES,
    SPACING_RULES,
    STRUCTURE_RULES,
)
from app.services.grammar.word_lists import (
    KE_PREFIX_STEMS,
    OTHER_PREPOSITIONS,
    PREPOSITION_PLACE_WORDS,
)


def _apply(rules: Iterable[PatternRule], text: str, default_rule: str | None = None) -> list[Finding]:
    out: list[Finding] = []
    for rule in rules:
        if not rule.enabled:
            continue
        out.extend(rule.findings(text, default_rule=default_rule))
    return out


def check_structure(text: str) -> list[Finding]:
    return _apply(STRUCTURE_RULES, text)


def check_affixes(text: str) -> list[Finding]:
    return _apply(AFFIX_RULES, text)


def check_punctuation(text: str) -> list[Finding]:
    return _apply(PUNCTUATION_RULES, text)


def check_effectiveness(text: str) -> list[Finding]:
    return _apply(EFFECTIVENESS_RULES, text, default_rule=EFFECTIVENESS_RULE_LABEL)


def check_conjunctions(text: str) -> list[Finding]:
    return _apply(CONJUNCTION_RULES, text)


def check_spacing(text: str) -> list[Finding]:
    return _apply(SPACING_RULES, text)


# -----------------------------
# Kata depan selain "di"
# -----------------------------

_PREPOSITION_PATTERNS = tuple(
    (
        prep,
        compile_pattern(
            r"\b" + prep + r"(" + "|".join(PREPOSITION_PLACE_WORDS) + r")\b",
            WORD_FLAGS,
        ),
    )
    for prep in OTHER_PREPOSITIONS
)

KE_PREFIX_PATTERN = compile_pattern(r"\bke([a-z]{3,})\b", WORD_FLAGS)


def ke_prefix_candidates(text: str) -> list[str]:
    """
    Wörter mit "ke"-Anfang, die weder Ortswort noch bekanntes ke-Präfix sind.

    Das ke-Präfix (kehilangan, keberuntungan) ist legitim und wird nie
    gemeldet. Die Funktion wird vom Prüflauf nicht aufgerufen und liefert
    keine Findings, nur die Kandidaten.
    """
    candidates: list[str] = []
    for match in KE_PREFIX_PATTERN.finditer(text):
        word_after_ke = match.group(1).lower()
        if word_after_ke in PREPOSITION_PLACE_WORDS:
            continue
        if any(stem in word_after_ke for stem in KE_PREFIX_STEMS):
            continue
        candidates.append(word_after_ke)
    return candidates


def check_prepositions_other(text: str) -> list[Finding]:
    issues: list[Finding] = []
    for prep, pattern in _PREPOSITION_PATTERNS:
        for match in pattern.finditer(text):
            issues.append(
                Finding(
                    index=match.start(),
                    length=len(match.group(0)),
                    message=f"Kata depan '{prep}' harus TERPISAH dari kata yang mengikutinya",
                    severity="error",
                    category="kata-depan",
                    rule=f"KBBI - Kata depan '{prep}' harus terpisah",
                    suggestion=f"{prep} {match.group(1)}",
                    explanation=(
                        f"Menurut KBBI, kata depan '{prep}' harus ditulis terpisah "
                        "dari kata yang mengikutinya"
                    ),
                )
            )
    return issues


# -----------------------------
# Kapitalisasi
# -----------------------------

def check_capitalization(text: str) -> list[Finding]:
    issues: list[Finding] = []
    for match in PLACE_NAME_PATTERN.finditer(text):
        word, place = match.group(1), match.group(2)
        if not word or not place:
            continue
        # Offset nimmt genau ein Leerzeichen zwischen den Wörtern an
        issues.append(
            Finding(
                index=match.start() + len(word) + 1,
                length=len(place),
                message=PLACE_NAME_MESSAGE,
                severity="error",
                category="diksi",
                rule=PLACE_NAME_RULE,
                suggestion=place[0].upper() + place[1:],
            )
        )
    return issues


__all__ = [
    "check_affixes",
    "check_capitalization",
    "check_conjunctions",
    "check_effectiveness",
    "check_prepositions_other",
    "check_punctuation",
    "check_spacing",
    "check_structure",
    "ke_prefix_candidates",
]
