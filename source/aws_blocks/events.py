"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
from typing import Any, Callable, Dict

logger = logging.getLogger()
logger.setLevel(int(os.environ.get("LOGGING_LEVEL", logging.INFO)))

EventSink = Callable[[Dict[str, Any]], None]


def _log_sink(payload: Dict[str, Any]) -> None:
    logger.info(f"Emitted event with keys: {sorted(payload)}")


_sink: EventSink = _log_sink


def set_sink(sink: EventSink) -> EventSink:
    """
    Installs the host's event sink and returns the previously installed one,
    so callers can restore it afterwards.
    """
    global _sink
    previous = _sink
    _sink = sink
    return previous


def reset_sink() -> None:
    set_sink(_log_sink)


def emit(payload: Dict[str, Any]) -> None:
    _sink(payload)
