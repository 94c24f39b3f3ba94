import logging
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.models.pydantic import CheckRequest, CheckResponse, Finding, ReportRequest
from app.services.grammar.offsets import findings_to_utf16
from app.services.grammar.patterns import strip_ws
from app.services.grammar.report import build_report
from app.services.grammar.report_models import GrammarReport, ReportSource
from app.services.grammar.rule_engine import RuleEngine

logger = logging.getLogger(__name__)


class GrammarService:
    def __init__(
        self,
        engine: Optional[RuleEngine] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.engine = engine or RuleEngine()
        self.settings = settings or default_settings

    def _findings_for(self, text: str) -> list[Finding]:
        # Schalter aus oder Text zu kurz: gar nicht erst prüfen
        if not self.settings.grammar_checker_enabled:
            return []
        if len(strip_ws(text or "")) < self.settings.min_text_length:
            return []

        findings = self.engine.check_text(text)
        logger.debug("check_text: %d chars, %d findings", len(text), len(findings))
        return findings

    def check(self, req: CheckRequest) -> CheckResponse:
        offset_unit = req.offset_unit or self.settings.offset_unit
        findings = self._findings_for(req.text)

        if offset_unit == "utf16":
            findings = findings_to_utf16(req.text, findings)

        return CheckResponse(
            enabled=self.settings.grammar_checker_enabled,
            offset_unit=offset_unit,
            num_findings=len(findings),
            findings=findings,
        )

    def report(self, req: ReportRequest) -> GrammarReport:
        sources = [
            ReportSource(
                text=item.text,
                findings=self._findings_for(item.text),
                element_context=item.element_context,
            )
            for item in req.texts
        ]
        return build_report(
            sources,
            context_chars=self.settings.report_context_chars,
            preview_chars=self.settings.report_preview_chars,
            offset_unit=req.offset_unit or self.settings.offset_unit,
        )
