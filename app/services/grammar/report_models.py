"""
Datenmodelle für den Grammatik-Report.

- ReportSource: ein geprüfter Text samt Findings (und optional Herkunft,
  z.B. "p dalam div").
- ReportEntry: ein Finding, aufbereitet für Menschen: markierter Text,
  Kontext links/rechts, Vorschau des ganzen Textes, Label mit Fallbacks.
- GrammarReport: alle Einträge, getrennt nach errors/warnings und gruppiert
  nach Kategorie, plus Zähler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.models.pydantic import Finding, Severity


@dataclass
class ReportSource:
    text: str
    findings: List[Finding] = field(default_factory=list)
    element_context: Optional[str] = None


class EntryContext(BaseModel):
    before: str = ""
    after: str = ""
    full_text: str = ""


class ReportEntry(BaseModel):
    text: str
    message: str
    severity: Severity
    category: str = "umum"
    rule: str = "Aturan umum"
    explanation: str = ""
    suggestion: str = ""
    context: EntryContext = Field(default_factory=EntryContext)
    element_context: str = ""
    position: int = Field(ge=0)


class CategoryBucket(BaseModel):
    errors: List[ReportEntry] = Field(default_factory=list)
    warnings: List[ReportEntry] = Field(default_factory=list)


class GrammarReport(BaseModel):
    total_errors: int = 0
    error_count: int = 0
    warning_count: int = 0
    errors: List[ReportEntry] = Field(default_factory=list)
    warnings: List[ReportEntry] = Field(default_factory=list)
    by_category: Dict[str, CategoryBucket] = Field(default_factory=dict)
