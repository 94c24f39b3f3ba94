"""
RuleEngine: regelbasierter Grammatik-Checker für Bahasa Indonesia.

- Hält zwei unveränderliche Wortlisten (transitive Verben, Ortswörter) und
  den statischen Regelkatalog.
- check_text(text) prüft alle Kategorien in fester Reihenfolge und liefert
  eine frische Liste von Findings. Es gibt keinen Zustand zwischen Aufrufen,
  die Engine kann also parallel aus mehreren Threads benutzt werden.
- Wirft eine Kategorie eine Exception, wird sie geloggt und trägt keine
  Findings bei; die übrigen Kategorien laufen weiter.

Keine Deduplizierung: überlappende Findings verschiedener Regeln bleiben alle
erhalten. Das Auflösen von Überlappungen ist Sache der Darstellung.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, Iterable, Optional

from app.models.pydantic import Finding
from app.services.grammar.checks import (
    check_affixes,
    check_capitalization,
    check_conjunctions,
    check_effectiveness,
    check_prepositions_other,
    check_punctuation,
    check_spacing,
    check_structure,
)
from app.services.grammar.di_disambiguation import check_prepositions_di
from app.services.grammar.patterns import strip_ws
from app.services.grammar.word_lists import PLACE_WORDS, TRANSITIVE_VERBS

logger = logging.getLogger(__name__)

CategoryCheck = Callable[[str], list[Finding]]


class RuleEngine:
    def __init__(
        self,
        transitive_verbs: Optional[Iterable[str]] = None,
        place_words: Optional[Iterable[str]] = None,
    ) -> None:
        self.transitive_verbs: AbstractSet[str] = (
            frozenset(transitive_verbs) if transitive_verbs is not None else TRANSITIVE_VERBS
        )
        self.place_words: AbstractSet[str] = (
            frozenset(place_words) if place_words is not None else PLACE_WORDS
        )

    def categories(self) -> list[tuple[str, CategoryCheck]]:
        """Kategorien in Prüfreihenfolge."""
        return [
            ("structure", check_structure),
            ("affixes", check_affixes),
            ("prepositions_di", self._check_prepositions_di),
            ("prepositions_other", check_prepositions_other),
            ("punctuation", check_punctuation),
            ("effectiveness", check_effectiveness),
            ("conjunctions", check_conjunctions),
            ("spacing", check_spacing),
            ("capitalization", check_capitalization),
        ]

    def check_text(self, text: Optional[str]) -> list[Finding]:
        findings: list[Finding] = []

        if not text or not strip_ws(text):
            return findings

        for name, check in self.categories():
            try:
                findings.extend(check(text))
            except Exception:
                # Kategorie fällt aus, der Rest läuft weiter
                logger.warning("Error checking %s", name, exc_info=True)

        return findings

    # ---------- intern ---------- #

    def _check_prepositions_di(self, text: str) -> list[Finding]:
        return check_prepositions_di(text, self.transitive_verbs, self.place_words)
