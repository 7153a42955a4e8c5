"""
HTTP API serving the scraped Vedic clock.
"""

from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from ..config import load_config
from ..models import ErrorBody, Snapshot
from ..orchestration.clock_service import ClockService
from .security import add_security_headers

GREETING = "Vedic Clock Scraper API OK. Use GET /api/vedic-time"


def get_clock_service(request: Request) -> ClockService:
    """Dependency returning the service attached at app creation."""
    return request.app.state.clock_service


def create_app(
    service: Optional[ClockService] = None,
    config: Optional[Dict[str, Any]] = None
) -> FastAPI:
    """
    Build the API application.

    Args:
        service: Clock service shared by all requests; built from config when omitted
        config: Configuration dictionary; loaded from file/environment when omitted

    Returns:
        Configured FastAPI app
    """
    if config is None:
        config = load_config()
    if service is None:
        service = ClockService(config)

    app = FastAPI(
        title="Vedic Clock Scraper API",
        description="Current Vedic Standard Time scraped from vedicstandardtime.com",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )
    app.state.clock_service = service

    # Empty allow-list: any origin (development default)
    allow_origins = config.get('server', {}).get('allow_origins') or ['*']
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    add_security_headers(app)

    @app.on_event("shutdown")
    async def shutdown():
        """Close the browser session."""
        try:
            await app.state.clock_service.close()
            logger.info("Browser session closed")
        except Exception as e:
            logger.warning(f"Error closing browser session: {e}")

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Liveness check."""
        return GREETING

    @app.get(
        "/api/vedic-time",
        response_model=Snapshot,
        responses={503: {"model": ErrorBody}}
    )
    async def vedic_time(clock_service: ClockService = Depends(get_clock_service)):
        """Current time and location shown on the upstream page."""
        try:
            return await clock_service.read_snapshot()
        except Exception as e:
            logger.error(f"Clock read failed: {e}")
            return JSONResponse(
                status_code=503,
                content=ErrorBody(detail=str(e)).model_dump()
            )

    return app
