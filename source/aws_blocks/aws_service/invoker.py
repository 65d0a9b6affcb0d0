"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
from typing import Any, Dict

from botocore import xform_name

from aws_blocks.aws_service.client_factory import AWSClientFactory
from aws_blocks.credentials.resolver import resolve_credentials
from aws_blocks.model.host import AppConfig
from aws_blocks.serialization.response_serializer import serialize_aws_response

logger = logging.getLogger()
logger.setLevel(int(os.environ.get("LOGGING_LEVEL", logging.INFO)))

REGION_KEY = "region"
ASSUME_ROLE_ARN_KEY = "assumeRoleArn"


def command_input_from(input_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Everything except the region and role ARN control fields is passed to the
    operation as-is. Unset optional fields arrive as None and are left out.
    """
    return {
        key: value
        for key, value in input_config.items()
        if key not in (REGION_KEY, ASSUME_ROLE_ARN_KEY) and value is not None
    }


def invoke_aws_operation(
    service_name: str,
    operation_name: str,
    input_config: Dict[str, Any],
    app_config: AppConfig,
    serialize_response: bool = False,
) -> Dict[str, Any]:
    region = input_config.get(REGION_KEY)
    credentials = resolve_credentials(
        region, input_config.get(ASSUME_ROLE_ARN_KEY), app_config
    )
    client = AWSClientFactory.create_instance(
        service_name, region, credentials, app_config.get("endpoint")
    )

    logger.info(f"Invoking {service_name}:{operation_name} in {region}")
    operation = getattr(client, xform_name(operation_name))
    response = operation(**command_input_from(input_config))

    if serialize_response:
        response = serialize_aws_response(response)
    return response or {}
