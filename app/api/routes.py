from fastapi import APIRouter, HTTPException

from app.models.pydantic import CheckRequest, CheckResponse, ReportRequest
from app.services.grammar.report_models import GrammarReport
from app.services.grammar_service import GrammarService

router = APIRouter()
grammar_service = GrammarService()

# einfacher Health-Check
@router.get("/health")
async def health():
    return {"status": "ok"}


# prüft einen einzelnen Text und liefert alle Findings
@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    try:
        return grammar_service.check(req)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# prüft mehrere Textstellen und fasst sie zu einem Report zusammen
@router.post("/report", response_model=GrammarReport)
def report(req: ReportRequest):
    try:
        return grammar_service.report(req)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
