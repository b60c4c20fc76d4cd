"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from umd_courses.api.dependencies import CatalogServices, build_services, get_course_client, get_services, load_config
from umd_courses.api.endpoints.settings import router as settings_router
from umd_courses.error_handler import ErrorHandler
from umd_courses.integrations.clients.real_http import UmdApiClient
from umd_courses.presentation import process_courses, render_courses_page

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="UMD Courses API",
    description="University of Maryland course catalog with cached UMD API access and a fixture-backed mock mode",
    version="1.0.0",
)

app.mount("/static", StaticFiles(directory=Path(__file__).resolve().parent.parent / "static"), name="static")

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

config = load_config()
app.state.services = build_services(config)

error_handler = ErrorHandler()
api_router = APIRouter()


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    payload = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=500, content=payload)


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {"service": "UMD Courses API", "status": "healthy", "version": "1.0.0", "timestamp": datetime.now().isoformat()}


@app.get("/health", tags=["Health"])
async def health_check(services: CatalogServices = Depends(get_services)):
    """Detailed health check (cache backend, mock mode)."""
    return {
        "status": "healthy",
        "cache": services.cache.ping(),
        "mock_mode_enabled": services.client.is_mock_mode_enabled(),
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/courses", response_class=HTMLResponse, tags=["Courses"])
async def courses_page(services: CatalogServices = Depends(get_services)):
    """The courses page."""
    client = services.client
    courses = await client.fetch_courses(services.config.page.course_limit)
    html = render_courses_page(
        process_courses(courses),
        mock_mode=client.is_mock_mode_enabled(),
        notices=client.notices(),
    )
    return HTMLResponse(content=html)


@api_router.get("/courses", tags=["Courses"])
async def list_courses(
    limit: int = Query(default=50, ge=1, description="Maximum number of courses to fetch"),
    client: UmdApiClient = Depends(get_course_client),
):
    """Course records exactly as the UMD API (or the fixture) returned them."""
    return await client.fetch_courses(limit)


@api_router.get("/courses/{course_id}", tags=["Courses"])
async def get_course(course_id: str, client: UmdApiClient = Depends(get_course_client)):
    course = await client.fetch_course(course_id)
    if course is None:
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found")
    return course


api_router.include_router(settings_router)
app.include_router(api_router, prefix="/api/v1")


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("Starting UMD Courses API...")
    services: CatalogServices = app.state.services
    if services.cache.ping():
        logger.info("Cache connection successful")
    else:
        logger.warning("Cache connection failed")
    if services.client.is_mock_mode_enabled():
        logger.info("Mock mode is enabled (strategy=%s)", services.config.mock.strategy.value)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down UMD Courses API...")
    await app.state.services.aclose()
