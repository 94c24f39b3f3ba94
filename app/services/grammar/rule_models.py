"""
Datenmodelle für den Regelkatalog des Grammatik-Checkers.

- PatternRule: eine Regex-basierte Regel mit Meldung, Schweregrad, Kategorie,
  optionaler Erklärung und optionalem Korrekturvorschlag.
- RuleVerdict: Ergebnis einer zusätzlichen Prüfung (check) auf einem Match,
  z.B. bei der Keparalelan-Regel. Überschreibt Meldung/Schweregrad der Regel.

Vorschläge sind ein kleiner Variantentyp:
  None            -> kein Vorschlag
  str             -> fester Ersatztext
  Callable[Match] -> Ersatztext wird aus dem Match berechnet (Imbuhan-Regeln)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from app.models.pydantic import Category, Finding, Severity

SuggestionFn = Callable[[re.Match], str]
Suggestion = Union[None, str, SuggestionFn]


@dataclass(frozen=True)
class RuleVerdict:
    message: str
    severity: Severity
    category: Category
    rule: Optional[str] = None
    explanation: Optional[str] = None


CheckFn = Callable[[re.Match, str], Optional[RuleVerdict]]


@dataclass(frozen=True)
class PatternRule:
    name: str
    pattern: re.Pattern
    message: str
    severity: Severity
    category: Category
    rule: Optional[str] = None
    explanation: Optional[str] = None
    suggestion: Suggestion = None
    check: Optional[CheckFn] = None
    # False: Regel steht im Katalog, wird vom RuleEngine-Durchlauf aber nie aufgerufen
    enabled: bool = True

    def suggest(self, match: re.Match) -> Optional[str]:
        if self.suggestion is None:
            return None
        if callable(self.suggestion):
            return self.suggestion(match)
        return self.suggestion

    def findings(self, text: str, default_rule: Optional[str] = None) -> list[Finding]:
        """
        Wendet die Regel auf den ganzen Text an (globaler Scan, aufsteigende Offsets).

        Matches der Länge 0 werden verworfen; sie haben keinen markierbaren Span.
        """
        out: list[Finding] = []
        for match in self.pattern.finditer(text):
            if match.end() == match.start():
                continue

            if self.check is not None:
                verdict = self.check(match, text)
                if verdict is None:
                    continue
                out.append(
                    Finding(
                        index=match.start(),
                        length=match.end() - match.start(),
                        message=verdict.message,
                        severity=verdict.severity,
                        category=verdict.category,
                        rule=verdict.rule,
                        explanation=verdict.explanation,
                        suggestion=self.suggest(match),
                    )
                )
                continue

            out.append(
                Finding(
                    index=match.start(),
                    length=match.end() - match.start(),
                    message=self.message,
                    severity=self.severity,
                    category=self.category,
                    rule=self.rule or default_rule,
                    explanation=self.explanation,
                    suggestion=self.suggest(match),
                )
            )
        return out
