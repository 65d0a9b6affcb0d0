"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import yaml

from aws_blocks.model.block import ASSUME_ROLE_ARN_FIELD, REGION_FIELD, Block
from aws_blocks.schema.service_model import available_services, load_operation_model
from aws_blocks.schema.shape_schema import input_fields, output_schema
from aws_blocks.schema.text import humanize, lower_camel, summarize
from aws_blocks.util.exceptions import InvalidCatalog, UnknownBlock

logger = logging.getLogger()
logger.setLevel(int(os.environ.get("LOGGING_LEVEL", logging.INFO)))

DEFAULT_CATALOG_PATH = Path(__file__).parent / "blocks.yaml"


@dataclass(frozen=True)
class CatalogEntry:
    group: str
    service_name: str
    operation_name: str
    serialize_response: bool = False

    @property
    def key(self) -> str:
        return f"{self.group}/{lower_camel(self.operation_name)}"


def build_block(
    group: str,
    service_name: str,
    operation_name: str,
    serialize_response: bool = False,
) -> Block:
    """Generates the block for one operation from its botocore model."""
    operation_model = load_operation_model(service_name, operation_name)
    name = humanize(operation_name)
    config = {"region": REGION_FIELD, "assumeRoleArn": ASSUME_ROLE_ARN_FIELD}
    for field_name, config_field in input_fields(operation_model).items():
        config.setdefault(field_name, config_field)
    return Block(
        key=CatalogEntry(group, service_name, operation_name).key,
        name=name,
        description=summarize(operation_model.documentation),
        service_name=service_name,
        operation_name=operation_name,
        config=config,
        output=output_schema(operation_model, name),
        serialize_response=serialize_response,
    )


class BlockCatalog:
    def __init__(self, entries: List[CatalogEntry]) -> None:
        self.entries: Dict[str, CatalogEntry] = {entry.key: entry for entry in entries}
        self._blocks: Dict[str, Block] = {}

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "BlockCatalog":
        with open(path or DEFAULT_CATALOG_PATH, encoding="utf-8") as catalog_file:
            data = yaml.safe_load(catalog_file)
        catalog = cls(list(cls._parse(data)))
        logger.info(f"Loaded block catalog with {len(catalog.entries)} blocks")
        return catalog

    @staticmethod
    def _parse(data: Any) -> Iterator[CatalogEntry]:
        if not isinstance(data, dict):
            raise InvalidCatalog("expected a mapping of integration groups")
        services = set(available_services())
        for group, definition in data.items():
            if not isinstance(definition, dict):
                raise InvalidCatalog(f"group {group} must be a mapping")
            service_name = definition.get("service")
            if service_name not in services:
                raise InvalidCatalog(f"group {group} has unknown service {service_name}")
            operations = definition.get("operations")
            if not isinstance(operations, list) or not operations:
                raise InvalidCatalog(f"group {group} must list its operations")
            serialize_response = bool(definition.get("serialize_response", False))
            for operation_name in operations:
                yield CatalogEntry(
                    group=group,
                    service_name=service_name,
                    operation_name=str(operation_name),
                    serialize_response=serialize_response,
                )

    def keys(self) -> List[str]:
        return list(self.entries)

    def get(self, key: str) -> Block:
        if key not in self._blocks:
            entry = self.entries.get(key)
            if entry is None:
                raise UnknownBlock(key)
            self._blocks[key] = build_block(
                entry.group,
                entry.service_name,
                entry.operation_name,
                entry.serialize_response,
            )
        return self._blocks[key]

    def blocks(self) -> List[Block]:
        return [self.get(key) for key in self.entries]

    def descriptors(self) -> Dict[str, Dict[str, Any]]:
        return {block.key: block.descriptor() for block in self.blocks()}
