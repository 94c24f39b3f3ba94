"""
Baut aus mehreren geprüften Texten einen zusammenfassenden Grammatik-Report.

1) Jedes Finding wird zu einem ReportEntry (markierter Text, Kontext,
   Fallback-Labels für Kategorie/Regel).
2) severity == "error" -> errors, alles andere (warning, suggestion) -> warnings.
3) Zusätzlich Gruppierung nach Kategorie.

Reihenfolge: Texte in Eingabereihenfolge, Findings in Engine-Reihenfolge.
"""

from __future__ import annotations

from typing import Iterable

from app.models.pydantic import Finding, OffsetUnit
from app.services.grammar.offsets import utf16_offset
from app.services.grammar.patterns import strip_ws
from app.services.grammar.report_models import (
    CategoryBucket,
    EntryContext,
    GrammarReport,
    ReportEntry,
    ReportSource,
)

DEFAULT_CONTEXT_CHARS = 30
DEFAULT_PREVIEW_CHARS = 200


def _build_entry(
    source: ReportSource,
    finding: Finding,
    context_chars: int,
    preview_chars: int,
    offset_unit: OffsetUnit,
) -> ReportEntry:
    text = source.text
    start = finding.index
    end = finding.index + finding.length

    full_text = text[:preview_chars]
    if len(text) > preview_chars:
        full_text += "..."

    return ReportEntry(
        text=text[start:end],
        message=finding.message,
        severity=finding.severity,
        category=finding.category or "umum",
        rule=finding.rule or "Aturan umum",
        explanation=finding.explanation or "",
        suggestion=finding.suggestion or "",
        context=EntryContext(
            before=strip_ws(text[max(0, start - context_chars):start]),
            after=strip_ws(text[end:min(len(text), end + context_chars)]),
            full_text=full_text,
        ),
        element_context=source.element_context or "",
        # Kontext wird immer über Python-Indizes geschnitten, nur position folgt offset_unit
        position=utf16_offset(text, start) if offset_unit == "utf16" else start,
    )


def build_report(
    sources: Iterable[ReportSource],
    context_chars: int = DEFAULT_CONTEXT_CHARS,
    preview_chars: int = DEFAULT_PREVIEW_CHARS,
    offset_unit: OffsetUnit = "codepoint",
) -> GrammarReport:
    report = GrammarReport()

    for source in sources:
        if not source.findings:
            continue

        for finding in source.findings:
            entry = _build_entry(source, finding, context_chars, preview_chars, offset_unit)
            bucket = report.by_category.setdefault(entry.category, CategoryBucket())

            if finding.severity == "error":
                report.errors.append(entry)
                report.error_count += 1
                bucket.errors.append(entry)
            else:
                report.warnings.append(entry)
                report.warning_count += 1
                bucket.warnings.append(entry)

            report.total_errors += 1

    return report
