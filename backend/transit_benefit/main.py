"""FastAPI application for the transit benefit calculator."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transit_benefit.api.endpoints import router
from transit_benefit.config import settings
from transit_benefit.logger import setup_logging

logger = setup_logging()

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

logger.info("%s v%s ready", settings.API_TITLE, settings.API_VERSION)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": f"Welcome to the {settings.API_TITLE} API",
        "version": settings.API_VERSION,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("transit_benefit.main:app", host="0.0.0.0", port=8000, reload=True)
