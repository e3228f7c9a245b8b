from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager

from epic_alignment.components.base.config import get_settings
from epic_alignment.components.base.logging import configure_logging, get_logger
from epic_alignment.components.analyze.router import router as analyze_router
from epic_alignment.components.suggest_stories.router import router as suggest_stories_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    settings = get_settings()
    configure_logging(settings.environment, settings.log_level)
    logger = get_logger("epic_alignment.main")

    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set - analyze and suggest_stories will fail")
    if settings.kpi_likelihood_enabled:
        logger.info("KPI likelihood estimate enabled")

    yield

    logger.info("Shutting down %s", settings.app_name)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount component routers
app.include_router(analyze_router, prefix="/api")
app.include_router(suggest_stories_router, prefix="/api")


@app.get("/api/health", response_class=PlainTextResponse)
async def health_check():
    """Health check endpoint."""
    return "ok"


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "epic_alignment.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )
