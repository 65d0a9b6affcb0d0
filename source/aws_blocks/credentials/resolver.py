"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import itertools
import logging
import os
import time
from typing import TYPE_CHECKING, Optional

from aws_blocks.aws_service.client_factory import AWSClientFactory
from aws_blocks.model.credentials import Credentials
from aws_blocks.model.host import AppConfig

if TYPE_CHECKING:
    from mypy_boto3_sts.client import STSClient
else:
    STSClient = object

logger = logging.getLogger()
logger.setLevel(int(os.environ.get("LOGGING_LEVEL", logging.INFO)))

SESSION_NAME_PREFIX = "flows-session-"

_session_sequence = itertools.count()


def role_session_name() -> str:
    # Millisecond timestamp followed by a 4 digit sequence, so the suffix stays an integer
    sequence = next(_session_sequence) % 10000
    return f"{SESSION_NAME_PREFIX}{int(time.time() * 1000)}{sequence:04d}"


def resolve_credentials(
    region: Optional[str], assume_role_arn: Optional[str], app_config: AppConfig
) -> Credentials:
    credentials = Credentials.from_app_config(app_config)
    if not assume_role_arn:
        return credentials

    session_name = role_session_name()
    logger.info(f"Assuming role {assume_role_arn} with session {session_name}")

    sts_client: STSClient = AWSClientFactory.create_instance(
        "sts", region, credentials, app_config.get("endpoint")
    )
    response = sts_client.assume_role(
        RoleArn=assume_role_arn, RoleSessionName=session_name
    )
    return Credentials.from_sts(response["Credentials"])
