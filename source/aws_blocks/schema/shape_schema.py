"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Any, Dict, Tuple

from botocore.model import OperationModel, Shape

from aws_blocks.model.block import ConfigField, FieldType, OutputSchema
from aws_blocks.schema.text import humanize, summarize

PRIMITIVE_TYPES = {
    "string": "string",
    "blob": "string",
    "timestamp": "string",
    "integer": "number",
    "long": "number",
    "float": "number",
    "double": "number",
    "boolean": "boolean",
}


def shape_to_schema(shape: Shape, path: Tuple[str, ...] = ()) -> Dict[str, Any]:
    """
    Maps a botocore shape onto a JSON schema. `path` holds the names of the
    structures currently being expanded; a structure that is already on the
    path is emitted as a bare object to stop the recursion.
    """
    if shape.type_name == "structure":
        if shape.metadata.get("document") or shape.name in path:
            return {"type": "object"}
        nested_path = path + (shape.name,)
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {
                name: shape_to_schema(member, nested_path)
                for name, member in shape.members.items()
            },
        }
        if shape.required_members:
            schema["required"] = list(shape.required_members)
        schema["additionalProperties"] = False
        return schema
    if shape.type_name == "list":
        return {"type": "array", "items": shape_to_schema(shape.member, path)}
    if shape.type_name == "map":
        return {
            "type": "object",
            "additionalProperties": shape_to_schema(shape.value, path),
        }
    return {"type": PRIMITIVE_TYPES.get(shape.type_name, "string")}


def _field_type(schema: Dict[str, Any]) -> FieldType:
    if set(schema) == {"type"} and schema["type"] in PRIMITIVE_TYPES.values():
        return str(schema["type"])
    return schema


def input_fields(operation_model: OperationModel) -> Dict[str, ConfigField]:
    shape = operation_model.input_shape
    if shape is None:
        return {}
    required = set(shape.required_members)
    return {
        name: ConfigField(
            name=humanize(name),
            description=summarize(member.documentation),
            type=_field_type(shape_to_schema(member, (shape.name,))),
            required=name in required,
        )
        for name, member in shape.members.items()
    }


def output_schema(operation_model: OperationModel, block_name: str) -> OutputSchema:
    shape = operation_model.output_shape
    properties: Dict[str, Any] = {}
    if shape is not None:
        for name, member in shape.members.items():
            schema = shape_to_schema(member, (shape.name,))
            description = summarize(member.documentation)
            if description:
                schema["description"] = description
            properties[name] = schema
    return OutputSchema(
        name=f"{block_name} Result",
        description=f"Result from {operation_model.name} operation",
        type={
            "type": "object",
            "properties": properties,
            "additionalProperties": True,
        },
    )
