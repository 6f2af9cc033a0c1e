"""
FastAPI Application
===================
Main entry point for the Widget Schema API.

Run with:
    uvicorn widget_schema.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from widget_schema import __version__
from widget_schema.web_api.config import settings
from widget_schema.web_api.routers import assist, health, validate

app = FastAPI(
    title="Widget Schema API",
    description="Validation and authoring assistance for widget schema documents",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(validate.router, tags=["Validate"])
app.include_router(assist.router, tags=["Assist"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Widget Schema API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m widget_schema.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
