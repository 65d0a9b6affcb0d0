"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import html
import re
from typing import Optional

_WORD_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_BLOCK_TAG = re.compile(
    r"</?(?:p|li|ul|ol|dl|dt|dd|note|important|br|div|h\d)\b[^>]*>", re.IGNORECASE
)
_INLINE_TAG = re.compile(r"<[^>]+>")
_FIRST_SENTENCE = re.compile(r"^(.+?[.!?])(?=\s|$)")


def humanize(name: str) -> str:
    """
    Splits an API member or operation name into words, e.g.
    "StackSetName" -> "Stack Set Name" and "MaxACU" -> "Max ACU".
    """
    return _WORD_BOUNDARY.sub(" ", name)


def lower_camel(name: str) -> str:
    return name[:1].lower() + name[1:]


def summarize(documentation: Optional[str]) -> str:
    """Strips the HTML markup of a service model docstring and keeps its first sentence."""
    if not documentation:
        return ""
    text = _INLINE_TAG.sub("", _BLOCK_TAG.sub(" ", documentation))
    text = " ".join(html.unescape(text).split())
    match = _FIRST_SENTENCE.match(text)
    return match.group(1) if match else text
