from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from app.api import api_router
from app.core.config import settings
from app.core.rate_limit import limiter
from app.services.catalog import get_registry
from app.services.status_poller import network_stats_poller


# Create FastAPI app
app = FastAPI(
    title="CortexHub",
    description="App catalog for Cortensor-powered applications",
    version="1.0.0"
)


@app.on_event("startup")
async def _start_services():
    # Fail at boot rather than on first request if the bundled catalog is broken
    get_registry()
    if settings.STATUS_POLL_ENABLED:
        network_stats_poller.start()


@app.on_event("shutdown")
async def _stop_services():
    await network_stats_poller.stop()

# Add rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

_origins_raw = (settings.CORS_ALLOW_ORIGINS or "").strip()
if _origins_raw == "*":
    _allow_origins = ["*"]
else:
    _allow_origins = [o.strip() for o in _origins_raw.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allow_origins,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {
        "name": "CortexHub",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Basic health check - API is running"""
    return {
        "status": "healthy",
        "build": {
            "git_sha": settings.BUILD_GIT_SHA,
            "image_tag": settings.BUILD_IMAGE_TAG,
        },
    }


@app.get("/health/detailed")
async def health_detailed():
    """Detailed health check with catalog and poller status"""
    status = {
        "api": "healthy",
        "catalog": "unknown",
        "network_poller": "stopped",
    }

    try:
        registry = get_registry()
        status["catalog"] = f"loaded: {len(registry.apps)} apps"
    except Exception as e:
        status["catalog"] = f"unavailable: {str(e)[:100]}"

    if network_stats_poller.is_running:
        status["network_poller"] = f"running: every {network_stats_poller.interval}s"

    overall_status = "healthy" if status["catalog"].startswith("loaded") else "degraded"

    return {
        "status": overall_status,
        "services": status,
        "version": "1.0.0",
        "build": {
            "git_sha": settings.BUILD_GIT_SHA,
            "image_tag": settings.BUILD_IMAGE_TAG,
        },
    }


# Include API routes
app.include_router(api_router, prefix="/v1")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        workers=settings.WORKERS,
        reload=True
    )
