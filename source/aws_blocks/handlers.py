"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
from functools import lru_cache, wraps
from typing import Any, Callable

from aws_blocks.catalog.catalog import BlockCatalog
from aws_blocks.model.host import BlockDispatch
from aws_blocks.util.exceptions import InvalidBlockEvent

logger = logging.getLogger()
logger.setLevel(int(os.environ.get("LOGGING_LEVEL", logging.INFO)))


@lru_cache(maxsize=None)
def default_catalog() -> BlockCatalog:
    return BlockCatalog.load()


def handler(func: Callable[[Any, Any], Any]) -> Any:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """A wrapper function for host entry points"""

        # The event carries host credentials, so only the block key is logged here
        logger.info(f"Invoking {func.__name__} handler for block: {args[0].get('block')}")
        return func(*args, **kwargs)

    return wrapper


@handler
def block_event(event: BlockDispatch, _context: Any) -> None:
    for required_key in ("block", "app", "event"):
        if required_key not in event:
            raise InvalidBlockEvent(f"missing {required_key}")
    if "config" not in event["app"]:
        raise InvalidBlockEvent("missing app.config")
    if "inputConfig" not in event["event"]:
        raise InvalidBlockEvent("missing event.inputConfig")
    block = default_catalog().get(event["block"])
    block.on_event({"app": event["app"], "event": event["event"]})
