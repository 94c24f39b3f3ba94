"""
Umrechnung von Python-String-Indizes in UTF-16-Code-Units.

Browser-Hosts (JavaScript) zählen Offsets in UTF-16. Zeichen außerhalb der
BMP (z.B. Emoji) belegen dort zwei Einheiten, in Python nur einen Index.
"""

from app.models.pydantic import Finding


def utf16_offset(text: str, index: int) -> int:
    """UTF-16-Offset des Python-Index `index` in `text`."""
    return index + sum(1 for ch in text[:index] if ord(ch) > 0xFFFF)


def to_utf16(text: str, finding: Finding) -> Finding:
    start = utf16_offset(text, finding.index)
    end = utf16_offset(text, finding.end)
    if start == finding.index and end == finding.end:
        return finding
    return finding.model_copy(update={"index": start, "length": end - start})


def findings_to_utf16(text: str, findings: list[Finding]) -> list[Finding]:
    return [to_utf16(text, f) for f in findings]
