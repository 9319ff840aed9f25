"""
Service information API router.
"""
from fastapi import APIRouter, Request

router = APIRouter(
    tags=["Service"],
)


@router.get("/")
async def root(request: Request):
    """Root endpoint."""
    config = request.app.state.config.section("api")
    return {
        "message": config.get("title", "iLEAP Demo API"),
        "version": config.get("version", "0.2.0"),
        "docs": "/docs",
        "redoc": "/redoc",
    }


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "ileap-demo-api"}
