"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import datetime
from typing import Any, Dict
from unittest.mock import ANY, Mock, call

import pytest
from botocore.exceptions import ClientError

from aws_blocks.aws_service.invoker import command_input_from, invoke_aws_operation
from aws_blocks.model.host import AppConfig

ROLE_ARN = "arn:aws:iam::123456789012:role/automation"


def test_command_input_strips_control_fields() -> None:
    input_config: Dict[str, Any] = {
        "region": "us-east-1",
        "assumeRoleArn": ROLE_ARN,
        "StackName": "my-stack",
        "RetainResources": ["Bucket"],
        "ClientRequestToken": None,
    }

    assert command_input_from(input_config) == {
        "StackName": "my-stack",
        "RetainResources": ["Bucket"],
    }
    assert "region" in input_config


def test_delete_stack_with_base_credentials(
    app_config: AppConfig, mocked_clients: Dict[str, Mock]
) -> None:
    response = {"ResponseMetadata": {"HTTPStatusCode": 200}}
    mocked_clients["cloudformation"].delete_stack.return_value = response

    result = invoke_aws_operation(
        "cloudformation",
        "DeleteStack",
        {"region": "us-east-1", "StackName": "my-stack"},
        app_config,
    )

    assert result == response
    mocked_clients["cloudformation"].delete_stack.assert_called_once_with(
        StackName="my-stack"
    )
    mocked_clients["boto3.client"].assert_called_once_with(
        "cloudformation",
        region_name="us-east-1",
        config=ANY,
        aws_access_key_id="base-access-key",
        aws_secret_access_key="base-secret-key",
        aws_session_token="base-session-token",
    )
    mocked_clients["sts"].assume_role.assert_not_called()


def test_assumed_credentials_reach_service_client(
    app_config: AppConfig, mocked_clients: Dict[str, Mock]
) -> None:
    mocked_clients["s3"].head_bucket.return_value = {"BucketRegion": "us-east-1"}

    invoke_aws_operation(
        "s3",
        "HeadBucket",
        {"region": "us-east-1", "assumeRoleArn": ROLE_ARN, "Bucket": "my-bucket"},
        app_config,
    )

    assert mocked_clients["boto3.client"].call_args_list == [
        call(
            "sts",
            region_name="us-east-1",
            config=ANY,
            aws_access_key_id="base-access-key",
            aws_secret_access_key="base-secret-key",
            aws_session_token="base-session-token",
        ),
        call(
            "s3",
            region_name="us-east-1",
            config=ANY,
            aws_access_key_id="assumed-access-key",
            aws_secret_access_key="assumed-secret-key",
            aws_session_token="assumed-session-token",
        ),
    ]
    mocked_clients["s3"].head_bucket.assert_called_once_with(Bucket="my-bucket")


def test_custom_endpoint_on_both_clients(
    app_config: AppConfig, mocked_clients: Dict[str, Mock]
) -> None:
    app_config["endpoint"] = "http://localhost:4566"

    invoke_aws_operation(
        "s3",
        "HeadBucket",
        {"region": "us-east-1", "assumeRoleArn": ROLE_ARN, "Bucket": "my-bucket"},
        app_config,
    )

    for _, kwargs in mocked_clients["boto3.client"].call_args_list:
        assert kwargs["endpoint_url"] == "http://localhost:4566"


def test_no_endpoint_on_either_client(
    app_config: AppConfig, mocked_clients: Dict[str, Mock]
) -> None:
    invoke_aws_operation(
        "s3",
        "HeadBucket",
        {"region": "us-east-1", "assumeRoleArn": ROLE_ARN, "Bucket": "my-bucket"},
        app_config,
    )

    assert mocked_clients["boto3.client"].call_count == 2
    for _, kwargs in mocked_clients["boto3.client"].call_args_list:
        assert "endpoint_url" not in kwargs


@pytest.mark.parametrize("response", [None, {}])
def test_falsy_response_becomes_empty_dict(
    app_config: AppConfig, mocked_clients: Dict[str, Mock], response: Any
) -> None:
    mocked_clients["cloudformation"].delete_stack.return_value = response

    result = invoke_aws_operation(
        "cloudformation",
        "DeleteStack",
        {"region": "us-east-1", "StackName": "my-stack"},
        app_config,
    )

    assert result == {}


def test_response_is_serialized_on_request(
    app_config: AppConfig, mocked_clients: Dict[str, Mock]
) -> None:
    mocked_clients["s3"].list_objects_v2.return_value = {
        "Contents": [
            {
                "Key": "report.csv",
                "LastModified": datetime.datetime(
                    2024, 5, 1, 12, 0, tzinfo=datetime.timezone.utc
                ),
            }
        ]
    }

    result = invoke_aws_operation(
        "s3",
        "ListObjectsV2",
        {"region": "us-east-1", "Bucket": "my-bucket"},
        app_config,
        serialize_response=True,
    )

    assert result == {
        "Contents": [
            {"Key": "report.csv", "LastModified": "2024-05-01T12:00:00+00:00"}
        ]
    }


def test_raw_response_without_serialization(
    app_config: AppConfig, mocked_clients: Dict[str, Mock]
) -> None:
    last_modified = datetime.datetime(2024, 5, 1, 12, 0)
    response = {"Contents": [{"Key": "report.csv", "LastModified": last_modified}]}
    mocked_clients["s3"].list_objects_v2.return_value = response

    result = invoke_aws_operation(
        "s3",
        "ListObjectsV2",
        {"region": "us-east-1", "Bucket": "my-bucket"},
        app_config,
    )

    assert result is response


def test_sdk_errors_propagate_unmodified(
    app_config: AppConfig, mocked_clients: Dict[str, Mock]
) -> None:
    error = ClientError(
        {"Error": {"Code": "Throttling", "Message": "Rate exceeded"}}, "DeleteStack"
    )
    mocked_clients["cloudformation"].delete_stack.side_effect = error

    with pytest.raises(ClientError) as excinfo:
        invoke_aws_operation(
            "cloudformation",
            "DeleteStack",
            {"region": "us-east-1", "StackName": "my-stack"},
            app_config,
        )

    assert excinfo.value is error
    assert mocked_clients["cloudformation"].delete_stack.call_count == 1
