"""
Disambiguierung von "di": Passiv-Präfix oder Ortspräposition?

Im Indonesischen wird "di" vor einem Verb zusammengeschrieben (ditulis,
dibaca), vor einem Ort dagegen getrennt (di rumah, di Jakarta). Ohne
morphologische Analyse entscheidet eine Heuristik in fester Reihenfolge:

1. Wort nach "di" (Rohform oder um -kan/-i/-an gekürzte Form) ist ein
   transitives Verb            -> Passiv, kein Fund.
2. Wort nach "di" ist ein Ortswort -> Präposition, weiter mit 4.
3. In den folgenden ~50 Zeichen steht ein Agens-Marker
   (oleh/dari/untuk/kepada/dengan) -> Passiv, kein Fund.
4. Gruppe des Matches ist ein Ortswort -> error ("harus TERPISAH").
5. Im Fenster [-20, +50] steht "di/ke/dari/pada + Ortswort" -> warning.
6. Sonst kein Fund (im Zweifel lieber weniger Fehlalarme).
"""

from __future__ import annotations

from typing import AbstractSet

from app.models.pydantic import Finding
from app.services.grammar.patterns import WORD_FLAGS, compile_pattern, split_ws, strip_ws
from app.services.grammar.word_lists import (
    AGENTIVE_MARKERS,
    CONTEXT_PLACE_WORDS,
    CONTEXT_PREPOSITIONS,
)

DI_WORD_PATTERN = compile_pattern(r"\bdi([a-z]{2,})\b", WORD_FLAGS)

AGENTIVE_PATTERN = compile_pattern(r"\s+(" + "|".join(AGENTIVE_MARKERS) + r")\s+")

PLACE_CONTEXT_PATTERN = compile_pattern(
    r"\b(" + "|".join(CONTEXT_PREPOSITIONS) + r")\s+(" + "|".join(CONTEXT_PLACE_WORDS) + r")\b",
    WORD_FLAGS,
)

# Reihenfolge ist relevant: -kan vor -i vor -an
ROOT_SUFFIXES = ("kan", "i", "an")

AGENT_WINDOW = 50
CONTEXT_BEFORE = 20
CONTEXT_AFTER = 50

DI_RULE = "KBBI - Kata depan 'di' untuk tempat harus terpisah"


def strip_suffix(word: str) -> str:
    """Entfernt höchstens eine Endung (-kan, -i, -an) als Näherung an den Wortstamm."""
    for suffix in ROOT_SUFFIXES:
        if word.endswith(suffix):
            return word[: -len(suffix)]
    return word


def first_word_after_di(text: str, di_index: int) -> str:
    """
    Erstes whitespace-getrenntes Token nach "di", kleingeschrieben.

    Satzzeichen bleiben am Token hängen ("rumah," != "rumah").
    """
    return split_ws(text[di_index + 2:])[0].lower()


def is_di_prefix_verb(
    text: str,
    di_index: int,
    transitive_verbs: AbstractSet[str],
    place_words: AbstractSet[str],
) -> bool:
    after_di = strip_ws(text[di_index + 2:])
    first_word = first_word_after_di(text, di_index)

    base_word = strip_suffix(first_word)
    if base_word in transitive_verbs or first_word in transitive_verbs:
        return True

    if first_word in place_words:
        return False

    # Passiv-Konstruktionen haben meist einen Agens/Objekt-Anschluss
    context = after_di[:AGENT_WINDOW].lower()
    if AGENTIVE_PATTERN.search(context):
        return True

    return False


def has_place_context(text: str, di_index: int) -> bool:
    window = text[max(0, di_index - CONTEXT_BEFORE):min(len(text), di_index + CONTEXT_AFTER)]
    return PLACE_CONTEXT_PATTERN.search(window) is not None


def check_prepositions_di(
    text: str,
    transitive_verbs: AbstractSet[str],
    place_words: AbstractSet[str],
) -> list[Finding]:
    issues: list[Finding] = []

    for match in DI_WORD_PATTERN.finditer(text):
        di_index = match.start()
        word_after_di = match.group(1).lower()

        if is_di_prefix_verb(text, di_index, transitive_verbs, place_words):
            continue

        if word_after_di in place_words:
            issues.append(
                Finding(
                    index=di_index,
                    length=len(match.group(0)),
                    message=f"Kata depan 'di' harus TERPISAH dari kata tempat '{word_after_di}'",
                    severity="error",
                    category="kata-depan",
                    rule=DI_RULE,
                    suggestion=f"di {word_after_di}",
                    explanation=(
                        "Menurut KBBI, kata depan 'di' yang menunjukkan tempat harus ditulis "
                        f'terpisah. Contoh: "di {word_after_di}" bukan "di{word_after_di}"'
                    ),
                )
            )
        elif has_place_context(text, di_index):
            issues.append(
                Finding(
                    index=di_index,
                    length=len(match.group(0)),
                    message=(
                        f"Kata depan 'di' kemungkinan harus TERPISAH dari '{word_after_di}' "
                        "(menunjukkan tempat)"
                    ),
                    severity="warning",
                    category="kata-depan",
                    rule=DI_RULE,
                    suggestion=f"di {word_after_di}",
                    explanation="Jika 'di' menunjukkan tempat, harus ditulis terpisah",
                )
            )

    return issues
