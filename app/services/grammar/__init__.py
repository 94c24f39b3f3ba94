"""
Regelbasierter Grammatik-Checker für Bahasa Indonesia.

Unterstützt:
- Struktur (SPOK), Imbuhan, Kata depan ("di" mit Disambiguierung)
- Tanda baca, Kalimat efektif, Konjungsi, Spasi, Kapitalisasi
- Korrekturvorschläge und Report über mehrere Texte
"""

from app.services.grammar.report import build_report
from app.services.grammar.rule_engine import RuleEngine
from app.services.grammar.suggestions import get_category, get_rule, get_suggestions

__all__ = ["RuleEngine", "build_report", "get_category", "get_rule", "get_suggestions"]
