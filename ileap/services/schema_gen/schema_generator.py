"""
JSON Schema generation for the iLEAP record types.

For every record type two schemas are produced: the schema of the record
itself and the schema of a ProductFootprint carrying the record as a
DataModelExtension.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic.json_schema import GenerateJsonSchema

from ileap.pydantic_models.logistics import Hoc, ShipmentFootprint, Tad, Toc
from ileap.pydantic_models.pact import ProductFootprint

logger = logging.getLogger(__name__)

SCHEMA_DIALECT = GenerateJsonSchema.schema_dialect

SCHEMA_TYPES: dict[str, type[BaseModel]] = {
    "ShipmentFootprint": ShipmentFootprint,
    "Toc": Toc,
    "Tad": Tad,
    "Hoc": Hoc,
}


def schema_for(model: type[BaseModel], title: str | None = None) -> dict[str, Any]:
    """
    Validation JSON Schema of ``model`` using the camelCase wire names.

    Args:
        model: Pydantic model class
        title: Overrides the title pydantic derives from the class name
    """
    schema = model.model_json_schema(by_alias=True)
    schema = {"$schema": SCHEMA_DIALECT, **schema}
    if title is not None:
        schema["title"] = title
    return schema


def data_model_extension_schema(type_name: str) -> dict[str, Any]:
    return {
        "type": "object",
        "required": ["data", "dataSchema", "specVersion"],
        "properties": {
            "dataSchema": {"type": "string"},
            "documentation": {"type": "string"},
            "specVersion": {"$ref": "#/$defs/SpecVersionString"},
            "data": {"$ref": f"#/$defs/{type_name}"},
        },
    }


def replace_refs(node: Any, old: str, new: str) -> Any:
    """Point every ``$ref`` to ``old`` at ``new`` instead."""
    if isinstance(node, dict):
        if node.get("$ref") == old:
            node = {**node, "$ref": new}
        return {key: replace_refs(value, old, new) for key, value in node.items()}
    if isinstance(node, list):
        return [replace_refs(item, old, new) for item in node]
    return node


def gen_pcf_with_extension(model: type[BaseModel], type_name: str) -> dict[str, Any]:
    """
    Schema of a ProductFootprint whose extensions carry ``model`` records.

    pydantic names the parametrized extension ``DataModelExtension_{type_name}_``.
    That definition is replaced by a plain ``DataModelExtension`` and every
    reference to it is repointed.

    Args:
        model: Record type carried in the extension's ``data``
        type_name: Name of the record type, used in ``$defs`` references

    Returns:
        JSON Schema dict with a generic ``DataModelExtension`` definition
    """
    schema = schema_for(
        ProductFootprint[model],
        title=f"ProductFootprint_with_{type_name}_Extension",
    )
    schema["description"] = (
        f'Data Type "ProductFootprint" of PACT Tech Spec Version 2 '
        f"with {type_name} as a DataModelExtension"
    )
    generated = [
        name for name in schema.get("$defs", {}) if name.startswith("DataModelExtension_")
    ]
    for name in generated:
        del schema["$defs"][name]
        schema = replace_refs(schema, f"#/$defs/{name}", "#/$defs/DataModelExtension")
    schema.setdefault("$defs", {})["DataModelExtension"] = (
        data_model_extension_schema(type_name)
    )
    return schema


def schema_file_name(type_name: str) -> str:
    """
    Kebab-case file stem of a type name.

    Example:
        >>> schema_file_name("ShipmentFootprint")
        'shipment-footprint'
    """
    return re.sub(r"(?<!^)(?=[A-Z])", "-", type_name).lower()


def write_schema_file(schema: dict[str, Any], path: Path) -> Path:
    path.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path


def write_schemas(output_dir: Path | str) -> list[Path]:
    """
    Write ``{name}.json`` and ``pcf-{name}.json`` for every record type.

    Args:
        output_dir: Target directory, created when missing

    Returns:
        Paths of the written files
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for type_name, model in SCHEMA_TYPES.items():
        name = schema_file_name(type_name)
        written.append(write_schema_file(schema_for(model), output_dir / f"{name}.json"))
        written.append(
            write_schema_file(
                gen_pcf_with_extension(model, type_name),
                output_dir / f"pcf-{name}.json",
            )
        )
    return written
