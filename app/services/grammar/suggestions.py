"""
Hilfsfunktionen rund um ein einzelnes Finding: Korrekturvorschläge,
Kategorie- und Regel-Label mit Fallback.
"""

import re

from app.models.pydantic import Finding
from app.services.grammar.patterns import WHITESPACE_RUN, WORD_FLAGS
from app.services.grammar.rules import DEFAULT_RULE_LABEL

_SPLIT_PREPOSITION = re.compile(r"(di|ke|dari)([a-z]+)", WORD_FLAGS)


def get_suggestions(text: str, finding: Finding) -> list[str]:
    """
    Alle Korrekturvorschläge für ein Finding, der eigene Vorschlag zuerst.

    Zusätzlich:
    - kata-depan mit "TERPISAH": erste Präposition im markierten Text abtrennen
    - imbuhan: Leerzeichen im markierten Text entfernen
    Doppelte Vorschläge werden nicht entfernt.
    """
    suggestions: list[str] = []

    if finding.suggestion:
        suggestions.append(finding.suggestion)

    error_text = text[finding.index:finding.index + finding.length]

    if finding.category == "kata-depan" and "TERPISAH" in finding.message:
        fixed = _SPLIT_PREPOSITION.sub(r"\1 \2", error_text, count=1)
        if fixed != error_text:
            suggestions.append(fixed)

    if finding.category == "imbuhan":
        fixed = WHITESPACE_RUN.sub("", error_text)
        if fixed != error_text:
            suggestions.append(fixed)

    return suggestions


def get_category(finding: Finding) -> str:
    return finding.category or "umum"


def get_rule(finding: Finding) -> str:
    return finding.rule or DEFAULT_RULE_LABEL
