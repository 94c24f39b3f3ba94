from dotenv import load_dotenv

load_dotenv()
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import router as api_router
from app.core.config import settings

VALID_OFFSET_UNITS = ("codepoint", "utf16")


def validate_startup_config():
    """Validiert die Konfiguration beim Startup (fail-fast)."""
    errors = []

    if settings.offset_unit not in VALID_OFFSET_UNITS:
        errors.append(
            f"OFFSET_UNIT must be one of {', '.join(VALID_OFFSET_UNITS)}, "
            f"got {settings.offset_unit!r}."
        )

    if settings.min_text_length < 0:
        errors.append("MIN_TEXT_LENGTH must not be negative.")

    if errors:
        error_msg = "Startup validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    validate_startup_config()
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Grammar Check API running"}
