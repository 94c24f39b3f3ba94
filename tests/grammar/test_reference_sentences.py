"""
Referenzsätze mit exakt erwarteten Findings (Position, Länge, Schweregrad,
Kategorie, Vorschlag).
"""


def test_passive_di_before_transitive_verb_is_not_flagged(engine):
    findings = engine.check_text("ditulis dengan rapi")

    assert [f for f in findings if f.category == "kata-depan"] == []
    assert findings == []


def test_di_attached_to_place_word_is_error(engine):
    findings = engine.check_text("dirumah saya")

    assert len(findings) == 1
    f = findings[0]
    assert f.severity == "error"
    assert f.category == "kata-depan"
    assert f.index == 0
    assert f.length == 7
    assert f.suggestion == "di rumah"
    assert "TERPISAH" in f.message


def test_doubled_akan_is_error(engine):
    text = "saya akan akan pergi"
    findings = engine.check_text(text)

    assert len(findings) == 1
    f = findings[0]
    assert f.severity == "error"
    assert f.category == "efektivitas"
    assert text[f.index:f.index + f.length] == "akan akan"
    assert f.rule == "Kalimat Efektif"


def test_double_space_is_warning_with_single_space_suggestion(engine):
    text = "ini  adalah"
    findings = engine.check_text(text)

    assert len(findings) == 1
    f = findings[0]
    assert f.severity == "warning"
    assert f.category == "format"
    assert f.suggestion == " "
    assert (f.index, f.length) == (3, 2)


def test_lowercase_place_name_is_capitalization_error(engine):
    text = "kita pergi ke jakarta"
    findings = [f for f in engine.check_text(text) if f.category == "diksi"]

    assert len(findings) == 1
    f = findings[0]
    assert f.severity == "error"
    assert text[f.index:f.index + f.length] == "jakarta"
    assert f.suggestion == "Jakarta"


def test_separated_prefix_is_error_with_joined_suggestion(engine):
    findings = engine.check_text("me lakukan tugas")

    assert len(findings) == 1
    f = findings[0]
    assert f.severity == "error"
    assert f.category == "imbuhan"
    assert f.suggestion == "melakukan"
    assert (f.index, f.length) == (0, 10)
