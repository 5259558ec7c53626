"""FastAPI application entry point for the Brand Weaver API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brand_weaver.api.routes import deploy, downloads, extract, health, presets, website
from brand_weaver.config import get_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Report configuration on startup."""
    settings = get_settings()
    if settings.rapidapi_key:
        logger.info("Profile API host: %s", settings.rapidapi_host)
    elif settings.sample_fallback:
        logger.warning("RAPIDAPI_KEY not set; /api/extract will serve sample data")
    else:
        logger.warning("RAPIDAPI_KEY not set; /api/extract will fail")
    yield


app = FastAPI(
    title="Brand Weaver API",
    description="API for turning LinkedIn profiles into personal websites",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(extract.router, prefix="/api")
app.include_router(website.router, prefix="/api")
app.include_router(deploy.router, prefix="/api")
app.include_router(downloads.router, prefix="/api")
app.include_router(presets.router, prefix="/api")


def main(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run("brand_weaver.api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
