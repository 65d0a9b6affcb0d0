"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from aws_blocks import events
from aws_blocks.aws_service.invoker import invoke_aws_operation
from aws_blocks.model.host import BlockInput

logger = logging.getLogger()
logger.setLevel(int(os.environ.get("LOGGING_LEVEL", logging.INFO)))

FieldType = Union[str, Dict[str, Any]]


@dataclass(frozen=True)
class ConfigField:
    """
    A single input field as presented by the host's configuration UI.

    `type` is either a primitive name ("string", "number", "boolean") or a
    JSON schema mapping for nested objects, arrays and maps.
    """

    name: str
    description: str
    type: FieldType
    required: bool = False

    def marshal(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "required": self.required,
        }


REGION_FIELD = ConfigField(
    name="Region",
    description="AWS region for this operation",
    type="string",
    required=True,
)

ASSUME_ROLE_ARN_FIELD = ConfigField(
    name="Assume Role ARN",
    description="Optional IAM role ARN to assume before executing this operation. "
    "If provided, the block will use STS to assume this role and use the temporary credentials.",
    type="string",
    required=False,
)


@dataclass(frozen=True)
class OutputSchema:
    name: str
    description: str
    type: Dict[str, Any]
    possible_primary_parents: List[str] = field(default_factory=lambda: ["default"])

    def marshal(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "possiblePrimaryParents": list(self.possible_primary_parents),
            "type": self.type,
        }


@dataclass(frozen=True)
class Block:
    key: str
    name: str
    description: str
    service_name: str
    operation_name: str
    config: Dict[str, ConfigField]
    output: OutputSchema
    serialize_response: bool = False

    def on_event(self, block_input: BlockInput) -> None:
        # Field values are never logged
        logger.info(
            f"Invoking {self.key} block with input fields: {sorted(block_input['event']['inputConfig'])}"
        )
        response = invoke_aws_operation(
            service_name=self.service_name,
            operation_name=self.operation_name,
            input_config=block_input["event"]["inputConfig"],
            app_config=block_input["app"]["config"],
            serialize_response=self.serialize_response,
        )
        events.emit(response)

    def schema(self) -> Dict[str, Any]:
        """Static part of the descriptor, without the event handler."""
        return {
            "name": self.name,
            "description": self.description,
            "inputs": {
                "default": {
                    "config": {
                        name: config_field.marshal()
                        for name, config_field in self.config.items()
                    },
                }
            },
            "outputs": {"default": self.output.marshal()},
        }

    def descriptor(self) -> Dict[str, Any]:
        descriptor = self.schema()
        descriptor["inputs"]["default"]["onEvent"] = self.on_event
        return descriptor
