"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from functools import lru_cache
from typing import List

from botocore.loaders import create_loader
from botocore.model import OperationModel, ServiceModel

from aws_blocks.util.exceptions import UnknownOperation

loader = create_loader()


@lru_cache(maxsize=None)
def available_services() -> List[str]:
    return list(loader.list_available_services("service-2"))


@lru_cache(maxsize=None)
def load_service_model(service_name: str) -> ServiceModel:
    """
    For example: load_service_model("cloudformation")
    """
    service_description = loader.load_service_model(service_name, "service-2")
    return ServiceModel(service_description, service_name)


def load_operation_model(service_name: str, operation_name: str) -> OperationModel:
    service_model = load_service_model(service_name)
    if operation_name not in service_model.operation_names:
        raise UnknownOperation(service_name, operation_name)
    return service_model.operation_model(operation_name)
