# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""Custom resource provider errors"""

from typing import Optional


class CfnResourceProviderError(Exception):
    """Base class for errors raised by the custom resource provider"""


class DecodeError(CfnResourceProviderError, ValueError):
    """The inbound CloudFormation request could not be decoded"""


class EncodeError(CfnResourceProviderError):
    """The CloudFormation response could not be serialized"""


class DeliveryError(CfnResourceProviderError):
    """
    The response could not be delivered to the presigned response URL.

    `status` is the HTTP status code returned by the PUT, or None when the
    request never produced a response.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
