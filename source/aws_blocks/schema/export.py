"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import json
import logging
import os
from pathlib import Path
from typing import Union

from aws_blocks.catalog.catalog import BlockCatalog

logger = logging.getLogger()
logger.setLevel(int(os.environ.get("LOGGING_LEVEL", logging.INFO)))


def export_descriptors(catalog: BlockCatalog, path: Union[str, Path]) -> int:
    """
    Writes the static descriptor of every block in the catalog to a JSON file,
    keyed by block key. The event handlers are not part of the export.
    """
    schemas = {block.key: block.schema() for block in catalog.blocks()}
    with open(path, "w", encoding="utf-8") as export_file:
        json.dump(schemas, export_file, indent=2, sort_keys=True)
    logger.info(f"Exported {len(schemas)} block descriptors to {path}")
    return len(schemas)
