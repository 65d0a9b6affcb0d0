"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import base64
import datetime
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Set

CIRCULAR_REFERENCE = "[Circular]"


def serialize_aws_response(response: Any) -> Any:
    """
    Returns a JSON compatible copy of an SDK response. Streaming bodies are
    read fully, binary data is decoded as UTF-8 (or base64 encoded when it is
    not valid UTF-8), timestamps become ISO 8601 strings, and containers that
    reference one of their ancestors are replaced with a "[Circular]" marker.
    """
    return _serialize(response, set())


def _serialize(value: Any, ancestors: Set[int]) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (bytes, bytearray)):
        return _decode_bytes(bytes(value))
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if hasattr(value, "read"):
        # botocore StreamingBody and other file-like payloads
        return _serialize(value.read(), ancestors)

    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        if id(value) in ancestors:
            return CIRCULAR_REFERENCE
        ancestors.add(id(value))
        try:
            if isinstance(value, Mapping):
                return {
                    str(key): _serialize(item, ancestors) for key, item in value.items()
                }
            return [_serialize(item, ancestors) for item in value]
        finally:
            ancestors.discard(id(value))

    return str(value)


def _decode_bytes(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return base64.b64encode(data).decode("ascii")
