"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from aws_blocks.model.host import AppConfig

if TYPE_CHECKING:
    from mypy_boto3_sts.type_defs import CredentialsTypeDef
else:
    CredentialsTypeDef = object


@dataclass(frozen=True)
class Credentials:
    access_key_id: Optional[str]
    secret_access_key: Optional[str]
    session_token: Optional[str] = None

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "Credentials":
        return cls(
            access_key_id=app_config.get("accessKeyId"),
            secret_access_key=app_config.get("secretAccessKey"),
            session_token=app_config.get("sessionToken"),
        )

    @classmethod
    def from_sts(cls, sts_credentials: CredentialsTypeDef) -> "Credentials":
        return cls(
            access_key_id=sts_credentials["AccessKeyId"],
            secret_access_key=sts_credentials["SecretAccessKey"],
            session_token=sts_credentials["SessionToken"],
        )

    def client_kwargs(self) -> Dict[str, Any]:
        return {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
            "aws_session_token": self.session_token,
        }
