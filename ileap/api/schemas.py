"""
JSON Schema API router.

Serves the schema of each iLEAP record type, e.g. ``/toc.json``.
"""
import logging
from functools import lru_cache

from fastapi import APIRouter, HTTPException, status

from ileap.services.schema_gen.schema_generator import (
    SCHEMA_TYPES,
    schema_file_name,
    schema_for,
)

router = APIRouter(
    tags=["Schemas"],
)

logger = logging.getLogger(__name__)

MODELS_BY_FILE_NAME = {
    schema_file_name(type_name): model for type_name, model in SCHEMA_TYPES.items()
}


@lru_cache
def schema_document(name: str) -> dict:
    return schema_for(MODELS_BY_FILE_NAME[name])


@router.get("/{schema_name}.json")
async def get_schema(schema_name: str):
    """
    Get the JSON Schema of a record type.

    Args:
        schema_name: One of shipment-footprint, toc, hoc, tad
    """
    if schema_name not in MODELS_BY_FILE_NAME:
        logger.warning(f"Unknown schema {schema_name}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Schema {schema_name} not found",
        )

    return schema_document(schema_name)
