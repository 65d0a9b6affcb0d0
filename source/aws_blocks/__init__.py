"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from importlib import metadata

from botocore.config import Config

__version__ = metadata.version("aws-blocks")
__boto_config__ = Config(user_agent_extra=f"AwsBlocks/v{__version__}")
