"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Any, Dict, TypedDict


class AppConfig(TypedDict, total=False):
    accessKeyId: str
    secretAccessKey: str
    sessionToken: str
    endpoint: str


class App(TypedDict):
    config: AppConfig


class BlockEvent(TypedDict):
    inputConfig: Dict[str, Any]


class BlockInput(TypedDict):
    app: App
    event: BlockEvent


class BlockDispatch(BlockInput):
    block: str
