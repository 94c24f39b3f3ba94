from app.core.config import Settings
from app.models.pydantic import CheckRequest, ReportRequest, ReportText
from app.services.grammar_service import GrammarService


def _service(**overrides):
    return GrammarService(settings=Settings(_env_file=None, **overrides))


def test_check_returns_findings_with_default_offsets():
    res = _service().check(CheckRequest(text="dirumah saya"))

    assert res.enabled is True
    assert res.offset_unit == "codepoint"
    assert res.num_findings == 1
    assert res.findings[0].suggestion == "di rumah"


def test_disabled_checker_returns_no_findings():
    res = _service(grammar_checker_enabled=False).check(CheckRequest(text="dirumah saya"))

    assert res.enabled is False
    assert res.num_findings == 0
    assert res.findings == []


def test_short_text_is_skipped():
    res = _service(min_text_length=10).check(CheckRequest(text="dirumah"))

    assert res.findings == []


def test_request_offset_unit_overrides_settings():
    res = _service(offset_unit="codepoint").check(
        CheckRequest(text="😀 dirumah", offset_unit="utf16")
    )

    assert res.offset_unit == "utf16"
    assert res.findings[0].index == 3


def test_settings_offset_unit_is_default():
    res = _service(offset_unit="utf16").check(CheckRequest(text="😀 dirumah"))

    assert res.offset_unit == "utf16"
    assert res.findings[0].index == 3


def test_report_over_multiple_texts():
    req = ReportRequest(
        texts=[
            ReportText(text="saya akan akan pergi", element_context="p"),
            ReportText(text="ini  adalah"),
            ReportText(text="ok"),
        ]
    )
    report = _service().report(req)

    assert report.total_errors == 2
    assert report.errors[0].element_context == "p"
    assert report.warnings[0].category == "format"


def test_report_respects_context_setting():
    req = ReportRequest(texts=[ReportText(text="kami semua akan akan pergi besok")])
    report = _service(report_context_chars=5).report(req)

    entry = report.errors[0]
    assert entry.context.before == "emua"
    assert entry.context.after == "perg"


def test_report_positions_follow_offset_unit():
    text = "\U0001F600 saya akan akan pergi"

    default = _service().report(ReportRequest(texts=[ReportText(text=text)]))
    utf16 = _service(offset_unit="utf16").report(ReportRequest(texts=[ReportText(text=text)]))
    override = _service().report(
        ReportRequest(texts=[ReportText(text=text)], offset_unit="utf16")
    )

    assert default.errors[0].position == 7
    assert utf16.errors[0].position == 8
    assert override.errors[0].position == 8
    # Kontext und markierter Text bleiben unverändert
    assert utf16.errors[0].text == "akan akan"
    assert utf16.errors[0].context.before == "\U0001F600 saya"
