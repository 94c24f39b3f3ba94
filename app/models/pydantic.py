from typing import List, Optional, Literal

from pydantic import BaseModel, ConfigDict, Field


Severity = Literal["error", "warning", "suggestion"]

Category = Literal[
    "struktur",
    "imbuhan",
    "kata-depan",
    "tanda-baca",
    "efektivitas",
    "konjungsi",
    "format",
    "diksi",
    "umum",
]

OffsetUnit = Literal["codepoint", "utf16"]


class Finding(BaseModel):
    """
    Ein einzelner Grammatikfund im geprüften Text.

    index/length beziehen sich auf Python-String-Indizes. Die Umrechnung in
    UTF-16-Code-Units (Browser-Host) passiert erst an der API-Grenze.
    """
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    length: int = Field(gt=0)
    severity: Severity
    category: Category = "umum"
    rule: Optional[str] = None
    message: str
    explanation: Optional[str] = None
    # bereits aufgelöst: Regeln mit Vorschlagsfunktion liefern hier den fertigen Text
    suggestion: Optional[str] = None

    @property
    def end(self) -> int:
        return self.index + self.length


class CheckRequest(BaseModel):
    """
    Request-Body für den /check-Endpoint.
    """
    text: str
    # None -> Default aus den Settings
    offset_unit: Optional[OffsetUnit] = None


class CheckResponse(BaseModel):
    """
    Response-Body für den /check-Endpoint.
    """
    enabled: bool
    offset_unit: OffsetUnit
    num_findings: int
    findings: List[Finding] = Field(default_factory=list)


class ReportText(BaseModel):
    text: str
    # z.B. "p dalam div" – frei wählbare Herkunftsangabe des Hosts
    element_context: Optional[str] = None


class ReportRequest(BaseModel):
    """
    Request-Body für den /report-Endpoint: mehrere Textstellen, ein Report.
    """
    texts: List[ReportText] = Field(default_factory=list)
    offset_unit: Optional[OffsetUnit] = None
