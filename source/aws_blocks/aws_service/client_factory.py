"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Any, Optional

import boto3

from aws_blocks import __boto_config__
from aws_blocks.model.credentials import Credentials


class AWSClientFactory:
    """
    This class is used to create a fresh boto3 client for a single block
    invocation, scoped to the resolved credentials and region.

    Usage example:
    - Against the public AWS endpoints
        client = AWSClientFactory.create_instance("s3", "us-east-1", credentials)
        client.list_objects_v2(Bucket="my-bucket")
    - Against a custom endpoint configured by the host
        client = AWSClientFactory.create_instance(
            "s3", "us-east-1", credentials, endpoint="http://localhost:4566"
        )
    """

    @staticmethod
    def create_instance(
        service_name: str,
        region: Optional[str],
        credentials: Credentials,
        endpoint: Optional[str] = None,
    ) -> Any:
        extra: dict[str, Any] = {}
        if endpoint:
            extra["endpoint_url"] = endpoint
        return boto3.client(
            service_name,
            region_name=region,
            config=__boto_config__,
            **credentials.client_kwargs(),
            **extra,
        )
