"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import os
from typing import Any, Callable, Dict, Iterator, List
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws
from mypy_boto3_s3 import S3Client

from aws_blocks import __version__, events
from aws_blocks.model.host import AppConfig, BlockInput


@pytest.fixture(scope="module", autouse=True)
def aws_credentials() -> None:
    """Mocked AWS Credentials for moto"""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    os.environ["LOGGING_LEVEL"] = str(logging.INFO)


@pytest.fixture(scope="module")
def solution_user_agent() -> str:
    return f"AwsBlocks/v{__version__}"


@pytest.fixture
def app_config() -> AppConfig:
    return {
        "accessKeyId": "base-access-key",
        "secretAccessKey": "base-secret-key",
        "sessionToken": "base-session-token",
    }


@pytest.fixture
def block_input(app_config: AppConfig) -> Callable[..., BlockInput]:
    def _block_input(**input_config: Any) -> BlockInput:
        return {"app": {"config": app_config}, "event": {"inputConfig": input_config}}

    return _block_input


@pytest.fixture
def emitted() -> Iterator[List[Dict[str, Any]]]:
    payloads: List[Dict[str, Any]] = []
    previous = events.set_sink(payloads.append)
    yield payloads
    events.set_sink(previous)


@pytest.fixture
def mocked_clients(monkeypatch: pytest.MonkeyPatch) -> Dict[str, Mock]:
    """
    Replaces boto3.client with a factory handing out one Mock per service.
    The constructor mock itself is available under the "boto3.client" key.
    """
    clients: Dict[str, Mock] = {"sts": Mock(), "s3": Mock(), "cloudformation": Mock()}
    clients["sts"].assume_role.return_value = {
        "Credentials": {
            "AccessKeyId": "assumed-access-key",
            "SecretAccessKey": "assumed-secret-key",
            "SessionToken": "assumed-session-token",
            "Expiration": "2026-01-01T00:00:00Z",
        }
    }
    constructor = Mock(side_effect=lambda service_name, **_kwargs: clients[service_name])
    monkeypatch.setattr(
        "aws_blocks.aws_service.client_factory.boto3.client", constructor
    )
    clients["boto3.client"] = constructor
    return clients


@pytest.fixture
def s3_client(aws_credentials: None) -> Iterator[S3Client]:
    with mock_aws():
        connection: S3Client = boto3.client("s3", region_name="us-east-1")
        yield connection
