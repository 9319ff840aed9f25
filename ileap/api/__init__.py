"""
API routers module.
"""
from ileap.api.footprints import router as footprints_router
from ileap.api.schemas import router as schemas_router
from ileap.api.service import router as service_router
from ileap.api.tad import router as tad_router

__all__ = [
    "footprints_router",
    "schemas_router",
    "service_router",
    "tad_router",
]
