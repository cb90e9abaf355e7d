"""Module with the Web API routes."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from loguru import logger

from lexidetect.api.data_models import (
    AnalysisRequest,
    AnalysisResponse,
    HealthcheckResponse,
)
from lexidetect.api.rate_limiter import RateLimiter
from lexidetect.api.utils import get_ip_address_or_raise
from lexidetect.configuration import config
from lexidetect.detection.detector import MathematicalDetector
from lexidetect.validation import TextValidationError, validate_text

description = """
**Lexidetect** estimates how likely a text was written by a language model.

- Statistical signals: predictability, rhythm variance and vocabulary diversity.
- Fingerprints of GPT, Claude and Gemini writing styles.
- Critical sections explaining which parts of the text drove the verdict.
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load fingerprints and prepare the detector once for all requests."""
    app.state.detector = MathematicalDetector()
    logger.info(f"{config.project_name} detector is ready.")
    yield


router = APIRouter()


@router.get("/healthcheck")
async def healthcheck(request: Request) -> HealthcheckResponse:
    """Check whether the detector is ready to analyse texts."""
    return HealthcheckResponse(
        is_healthy=getattr(request.app.state, "detector", None) is not None
    )


@router.post("/analyse")
def analyse(analysis_request: AnalysisRequest, request: Request) -> AnalysisResponse:
    """Analyse a text and explain which parts of it look LLM-written."""
    rate_limiter: RateLimiter = request.app.state.rate_limiter
    rate_limiter(get_ip_address_or_raise(request))

    try:
        word_count = validate_text(analysis_request.text)
    except TextValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    detector: MathematicalDetector = request.app.state.detector
    result = detector.analyze(analysis_request.text)
    logger.info(
        f"Analysed {word_count} words: {result.ai_confidence}% AI confidence, "
        f"{len(result.critical_sections)} critical sections"
    )
    return AnalysisResponse.from_result(result, word_count=word_count)


def create_app(rate_limiter: RateLimiter | None = None) -> FastAPI:
    """
    Create the FastAPI application serving the detector.

    Args:
        rate_limiter (RateLimiter | None, optional): Limiter of requests per client.
            Defaults to a limiter configured from the configuration.

    Returns:
        FastAPI: The application.
    """
    fastapi_app = FastAPI(
        title=config.project_name,
        summary=f"{config.project_name} API detects LLM-written texts.",
        description=description,
        lifespan=lifespan,
        docs_url="/v1/docs",
        openapi_url="/v1/openapi.json",
        redoc_url="/v1/redoc",
    )
    fastapi_app.state.rate_limiter = rate_limiter or RateLimiter()
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @fastapi_app.get("/")
    async def root() -> RedirectResponse:
        """Redirect root to docs."""
        return RedirectResponse(url="/v1/docs")

    fastapi_app.include_router(router, prefix="/v1")
    return fastapi_app
