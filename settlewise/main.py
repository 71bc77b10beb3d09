import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from settlewise.config import settings
from settlewise.routes.v1.api import api_router


def create_app() -> FastAPI:
    """Settlement service app: the v1 valuation/analysis routes plus a health probe."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        docs_url=f"{settings.API_V1_STR}/docs",
    )
    app.include_router(api_router, prefix=settings.API_V1_STR)

    # Front-end origins allowed to call the API
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.BACKEND_CORS_ORIGINS),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    @app.get("/health")
    def health():
        return {"status": "ok", "service": settings.PROJECT_NAME, "version": settings.VERSION}

    return app


app = create_app()
