"""
Regex-Hilfen mit JavaScript-Semantik für Leerraum.

Die Wort-Regeln laufen mit IGNORECASE | ASCII, damit [a-z], \\b und die
Groß-/Kleinschreibung wie bei ASCII-Regexen mit Flag "gi" funktionieren.
Das ASCII-Flag schränkt aber auch \\s auf [ \\t\\n\\r\\f\\v] ein. In JavaScript
umfasst \\s immer die Unicode-Leerzeichen (NBSP, Em-Space, U+3000, BOM, ...),
wie sie im DOM-Text häufig vorkommen. compile_pattern ersetzt deshalb jedes
\\s durch genau diese Zeichenmenge.
"""

from __future__ import annotations

import re

WORD_FLAGS = re.IGNORECASE | re.ASCII

WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(cp) for cp in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WHITESPACE_CLASS = "[" + WHITESPACE_CHARS + "]"

WHITESPACE_RUN = re.compile(WHITESPACE_CLASS + "+")


def translate_whitespace(pattern: str) -> str:
    """Ersetzt \\s im Muster durch die JS-Leerzeichenmenge, auch innerhalb von [...]."""
    out: list[str] = []
    in_class = False
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\" and i + 1 < len(pattern):
            pair = pattern[i:i + 2]
            if pair == r"\s":
                out.append(WHITESPACE_CHARS if in_class else WHITESPACE_CLASS)
            else:
                out.append(pair)
            i += 2
            continue
        if ch == "[" and not in_class:
            in_class = True
        elif ch == "]" and in_class:
            in_class = False
        out.append(ch)
        i += 1
    return "".join(out)


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    return re.compile(translate_whitespace(pattern), flags)


def strip_ws(text: str) -> str:
    """Wie String.prototype.trim()."""
    return text.strip(WHITESPACE_CHARS)


def split_ws(text: str) -> list[str]:
    """Wie text.trim().split(/\\s+/); leerer Text ergibt [""]."""
    return WHITESPACE_RUN.split(strip_ws(text))
