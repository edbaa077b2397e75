import logging
import time
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from .core.config import Config
from .core.middleware import log_requests, global_exception_handler
from .core.validation import validate_slug
from .services import cms
from .services.inspector import SCRIPT_PATH, component_tree, inject_inspector
from .services.site_config import get_site_config

logger = logging.getLogger(__name__)

# Initialize FastAPI
app = FastAPI(title="Marketing Site API")

# CORS setup
ALLOWED_ORIGINS = Config.allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def _inject_inspector(request, call_next):
    return await inject_inspector(request, call_next)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/api/site")
def site_config():
    return get_site_config()


@app.get("/api/blog")
def blog_posts():
    return cms.get_blog_posts()


@app.get("/api/blog/{slug}")
def blog_post(slug: str):
    validate_slug(slug)
    post = cms.get_blog_post_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=404, detail=f"Blog post not found: {slug}")
    return post


@app.get("/api/services")
def services():
    return cms.get_services()


@app.get("/api/testimonials")
def testimonials():
    return cms.get_testimonials()


@app.get("/api/team")
def team_members():
    return cms.get_team_members()


@app.get("/vf-inspector.js", include_in_schema=False)
async def inspector_script():
    """Serve the inspector overlay; only exists in development."""
    if not Config.is_development():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(SCRIPT_PATH, media_type="text/javascript")


@app.post("/__vf/tree", include_in_schema=False)
async def inspector_tree(request: Request):
    """Report the annotated components of a rendered HTML page."""
    if not Config.is_development():
        raise HTTPException(status_code=404, detail="Not Found")
    html = (await request.body()).decode("utf-8", errors="replace")
    return {"type": "vf-tree", "components": component_tree(html)}


@app.get("/health")
def health_check():
    """Basic health and dependency checks for the API."""
    health_start_time = time.time()

    try:
        # Check configuration and BCMS connectivity
        Config.validate()
        cms.get_client().entry.get_all(cms.TEMPLATES["service"])

        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": "marketing-site-api",
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2)
        }
    except Exception as e:
        health_duration = time.time() - health_start_time
        logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

        return {
            "status": "unhealthy",
            "service": "marketing-site-api",
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
            "response_time_ms": round(health_duration * 1000, 2)
        }


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": "Marketing Site API",
        "version": "1.0",
        "endpoints": {
            "site": "/api/site",
            "blog": "/api/blog",
            "blog_post": "/api/blog/{slug}",
            "services": "/api/services",
            "testimonials": "/api/testimonials",
            "team": "/api/team",
            "health": "/health"
        },
        "timestamp": datetime.now().isoformat(),
        "description": "Normalized BCMS content for the marketing site"
    }
