import logging
import re
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from chessmetrics.analysis import PositionSnapshot
from chessmetrics.config import Settings
from chessmetrics.errors import ChessMetricsError, InvalidPositionError
from chessmetrics.metrics import CATEGORIES, MetricCalculator, get_metric_bounds, metric_descriptors
from chessmetrics.metrics.registry import get_metric_class

logger = logging.getLogger(__name__)

settings = Settings()

calculator = MetricCalculator()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response


app = FastAPI(title="Chess Metrics", version=settings.api_version)
app.add_middleware(SecurityHeadersMiddleware)


# --- Request models ---

class AnalysisRequest(BaseModel):
    fen: str


# --- Error handling ---

_UNSAFE_PATTERNS = re.compile(
    r"javascript:|data:|vbscript:|on\w+=|\.\./|\.\.\\|[<>'\";(){}\[\]`\\]",
    re.IGNORECASE,
)


def _sanitize_for_error(text: str, max_length: int) -> str:
    """Strip markup/script fragments from user input echoed in errors."""
    if not isinstance(text, str) or not text:
        return "[invalid input]"
    return _UNSAFE_PATTERNS.sub("", text)[:max_length]


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}, "timestamp": _timestamp()}


@app.exception_handler(InvalidPositionError)
async def invalid_position_handler(request: Request, exc: InvalidPositionError):
    message = _sanitize_for_error(str(exc), settings.error_message_max_length)
    return JSONResponse(status_code=400, content=_error_body("INVALID_FEN", message))


@app.exception_handler(ChessMetricsError)
async def analysis_error_handler(request: Request, exc: ChessMetricsError):
    logger.exception("Error analyzing position: %s", exc)
    return JSONResponse(
        status_code=500,
        content=_error_body("ANALYSIS_ERROR", "Error analyzing chess position"),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        code, message = "NOT_FOUND", "Endpoint not found"
    else:
        code, message = "HTTP_ERROR", str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(code, message),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content=_error_body("INTERNAL_ERROR", "Internal server error"),
    )


# --- Endpoints ---

def _analyze(fen: str) -> dict:
    snapshot = PositionSnapshot.from_fen(
        fen, strict=settings.strict_fen, validate=settings.validate_positions,
    )
    report = calculator.calculate(snapshot)
    return {
        "version": settings.api_version,
        "fen": snapshot.fen,
        "gameType": "standard",
        **report.to_dict(),
    }


@app.get("/api/v1/health")
async def health():
    return {"status": "healthy", "version": settings.api_version, "timestamp": _timestamp()}


@app.get("/api/v1/standard/fen/{fen:path}")
async def analyze_fen_path(fen: str):
    return _analyze(fen)


@app.post("/api/analysis/position")
async def analysis_position(req: AnalysisRequest):
    return _analyze(req.fen)


@app.get("/api/v1/metrics")
async def list_metrics():
    result: dict[str, list[dict]] = {}
    for category in CATEGORIES:
        entries = []
        for desc in metric_descriptors(category):
            bounds = get_metric_bounds(desc.full_name)
            entries.append({
                "name": desc.name,
                "description": get_metric_class(desc.full_name).description,
                "min": bounds.min if bounds else None,
                "max": bounds.max if bounds else None,
            })
        result[category] = entries
    return result
