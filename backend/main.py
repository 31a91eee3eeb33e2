import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import get_settings
from errors import DashboardError
from rate_limit import limiter
from routers.stats import router as stats_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "API Coverage Dashboard"
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    data_dir = Path(get_settings().DATA_DIR).resolve()
    logger.info(f"Starting {SERVICE_NAME}, reading snapshots from {data_dir}")
    if not data_dir.is_dir():
        logger.warning(f"Snapshot directory {data_dir} does not exist; all queries will be empty")
    yield
    logger.info(f"Shutting down {SERVICE_NAME}.")


app = FastAPI(
    title=SERVICE_NAME,
    version=VERSION,
    description="Aggregates daily API coverage and usage snapshots for the dashboard.",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(DashboardError)
async def dashboard_error_handler(request: Request, exc: DashboardError):
    logger.info(f"Rejected {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception(f"Error in {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers under /api
app.include_router(stats_router, prefix="/api")


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "api-coverage-dashboard", "version": VERSION}


@app.get("/")
def root():
    return {
        "name": SERVICE_NAME,
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
        "api": "/api",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.API_PORT)
