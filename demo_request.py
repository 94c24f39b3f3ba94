#!/usr/bin/env python3
"""Demo-Request gegen einen laufenden Server (/check und /report)"""

import json
import sys

import requests

BASE_URL = "http://localhost:8000"

payload = {
    "text": "Saya akan akan pergi dirumah teman di jakarta.  Buku itu me lakukan tugas.",
    "offset_unit": "codepoint",
}

print("=" * 70)
print("INPUT:")
print("=" * 70)
print(json.dumps(payload, indent=2, ensure_ascii=False))
print()

try:
    response = requests.post(f"{BASE_URL}/check", json=payload, timeout=30)
    response.raise_for_status()
    result = response.json()
except requests.exceptions.ConnectionError:
    print(f"❌ Server nicht erreichbar unter {BASE_URL}")
    print("   Bitte starten Sie den Server mit: uvicorn app.server:app")
    sys.exit(1)
except Exception as e:
    print(f"❌ Fehler: {e}")
    sys.exit(1)

print("=" * 70)
print(f"OUTPUT: FINDINGS ({result['num_findings']})")
print("=" * 70)
text = payload["text"]
for i, f in enumerate(result["findings"], 1):
    covered = text[f["index"]:f["index"] + f["length"]]
    print(f"  Finding {i}: [{f['severity']}] {f['category']}")
    print(f"    Position: Zeichen {f['index']} (Länge {f['length']}) -> '{covered}'")
    print(f"    Regel: {f.get('rule') or 'N/A'}")
    print(f"    Meldung: {f['message']}")
    if f.get("suggestion"):
        print(f"    Vorschlag: '{f['suggestion']}'")
    print()

try:
    response = requests.post(
        f"{BASE_URL}/report",
        json={"texts": [{"text": text, "element_context": "demo"}]},
        timeout=30,
    )
    response.raise_for_status()
    report = response.json()
except Exception as e:
    print(f"❌ Fehler beim Report: {e}")
    sys.exit(1)

print("=" * 70)
print("OUTPUT: REPORT")
print("=" * 70)
print(f"  Gesamt:   {report['total_errors']}")
print(f"  Errors:   {report['error_count']}")
print(f"  Warnings: {report['warning_count']}")
for category, bucket in report["by_category"].items():
    print(f"  {category}: {len(bucket['errors'])} errors, {len(bucket['warnings'])} warnings")
