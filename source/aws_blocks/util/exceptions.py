"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""


class UnknownBlock(Exception):
    def __init__(self, key: str) -> None:
        self.message = f"Block with key: {key} could not be found."
        super().__init__(self.message)


class UnknownOperation(Exception):
    def __init__(self, service_name: str, operation_name: str) -> None:
        self.message = (
            f"Operation {operation_name} is not defined by service {service_name}."
        )
        super().__init__(self.message)


class InvalidCatalog(Exception):
    def __init__(self, message: str) -> None:
        self.message = f"Invalid block catalog: {message}"
        super().__init__(self.message)


class InvalidBlockEvent(Exception):
    def __init__(self, message: str) -> None:
        self.message = f"Invalid block event: {message}"
        super().__init__(self.message)
