import logging
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from passmeter import __version__
from passmeter.core.config import config
from passmeter.core.meter import StrengthMeter
from passmeter.core.strength import SPECIAL_CHARS, TIERS, classify

logger = logging.getLogger("passmeter.main")

BASE_DIR = Path(__file__).resolve().parent

# Longest candidate the API will classify
MAX_CANDIDATE_LENGTH = 1024

# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------
settings = config.get_settings()

# ---------------------------------------------------------------------------
# FastAPI application – docs only exposed in DEBUG mode
# ---------------------------------------------------------------------------
app = FastAPI(
    title="PassMeter",
    version=__version__,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)
app.state.meter = StrengthMeter(settings)


# ---------------------------------------------------------------------------
# Security headers middleware
# ---------------------------------------------------------------------------
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "no-referrer"
    response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"
    # Responses may carry generated passwords
    response.headers["Cache-Control"] = "no-store"
    response.headers["Content-Security-Policy"] = (
        "default-src 'self'; "
        "script-src 'self'; "
        "style-src 'self' 'unsafe-inline'; "
        "connect-src 'self';"
    )
    return response


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------
class StrengthRequest(BaseModel):
    password: str = Field(..., max_length=MAX_CANDIDATE_LENGTH)


# ---------------------------------------------------------------------------
# Static files & templates
# ---------------------------------------------------------------------------
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def get_meter(request: Request) -> StrengthMeter:
    return request.app.state.meter


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------
@app.get("/health", tags=["System"])
async def health_check():
    """Liveness probe – returns 200 when the app is running."""
    return {"status": "ok", "version": app.version}


# ---------------------------------------------------------------------------
# Page routes
# ---------------------------------------------------------------------------
@app.get("/", response_class=HTMLResponse)
async def read_root(request: Request, meter: StrengthMeter = Depends(get_meter)):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": meter.idle(),
            "min_length": meter.min_length,
            "special_chars": SPECIAL_CHARS,
            "catalog": meter.catalog,
        },
    )


# ---------------------------------------------------------------------------
# Strength API
# ---------------------------------------------------------------------------
@app.get("/api/policy")
async def read_policy(meter: StrengthMeter = Depends(get_meter)):
    return {
        "min_length": meter.min_length,
        "special_chars": SPECIAL_CHARS,
        "locale": meter.locale,
        "tiers": [
            {
                "level": level.value,
                "label": meter.catalog["labels"][level.value],
                "percentage": percentage,
                "color": color,
            }
            for level, (_label, percentage, color) in TIERS.items()
        ],
    }


@app.post("/api/strength")
async def check_strength(req: StrengthRequest, meter: StrengthMeter = Depends(get_meter)):
    """
    Classify a candidate password and return the verdict with its display state.
    The password is NEVER logged. A blank candidate yields no verdict and the idle meter.
    ``verdict.label`` is always the English tier name; ``meter.text`` is the
    label in the configured locale.
    """
    verdict, state = meter.evaluate(req.password)
    return {"verdict": verdict, "meter": state}


@app.post("/api/generate")
async def generate(meter: StrengthMeter = Depends(get_meter)):
    try:
        password, state = meter.generate()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return {
        "password": password,
        "verdict": classify(password, meter.min_length),
        "meter": state,
    }


# ---------------------------------------------------------------------------
# Application lifecycle
# ---------------------------------------------------------------------------
@app.on_event("startup")
async def startup_event():
    from passmeter.core.logger import setup_logging
    setup_logging(debug=settings.debug)
    logger.info(
        "PassMeter %s started (min_length=%d, locale=%s)",
        app.version, settings.min_length, settings.locale,
    )
