"""
Prüft einen Text (Argument, Datei oder stdin) mit der RuleEngine und gibt die
Findings als JSON aus.

Beispiele:
  python scripts/check_text.py "saya akan akan pergi"
  python scripts/check_text.py --file artikel.txt --report
  echo "dirumah saya" | python scripts/check_text.py -
"""

import argparse
import json
import logging
from pathlib import Path
import sys

from app.services.grammar.offsets import findings_to_utf16
from app.services.grammar.report import build_report
from app.services.grammar.report_models import ReportSource
from app.services.grammar.rule_engine import RuleEngine


def read_input(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text == "-" or args.text is None:
        return sys.stdin.read()
    return args.text


def main() -> int:
    ap = argparse.ArgumentParser(description="Grammatik-Check für Bahasa Indonesia")
    ap.add_argument("text", nargs="?", help="Zu prüfender Text ('-' = stdin)")
    ap.add_argument("--file", type=str, help="Pfad zu einer UTF-8-Textdatei")
    ap.add_argument(
        "--offset-unit",
        choices=["codepoint", "utf16"],
        default="codepoint",
        help="Einheit der Offsets in der Ausgabe",
    )
    ap.add_argument("--report", action="store_true", help="Report statt Rohliste ausgeben")
    ap.add_argument("--verbose", action="store_true", help="Debug-Logging aktivieren")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = read_input(args)
    engine = RuleEngine()
    findings = engine.check_text(text)

    if args.report:
        report = build_report(
            [ReportSource(text=text, findings=findings)],
            offset_unit=args.offset_unit,
        )
        print(json.dumps(report.model_dump(), indent=2, ensure_ascii=False))
        return 0

    if args.offset_unit == "utf16":
        findings = findings_to_utf16(text, findings)

    print(json.dumps([f.model_dump() for f in findings], indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
