# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""AWS CloudFormation custom resource provider"""
from .errors import CfnResourceProviderError, DecodeError, DeliveryError, EncodeError
from .lambda_handler import create_lambda_handler
from .provider import custom_resource, process
from .request import CfnRequest, CreateRequest, DeleteRequest, UpdateRequest, cfn_request_type, decode
from .response import FAILED, SUCCESS, CfnResponse, FailedResponse, SuccessResponse, encode
from .suffix import (
    Ignored,
    NoProperties,
    PhysicalResourceIdSuffixProvider,
    ResourceProperties,
    derive_physical_resource_id,
    physical_resource_id_suffix,
)
from .delivery import deliver

__all__ = [
    "CfnRequest",
    "CfnResourceProviderError",
    "CfnResponse",
    "CreateRequest",
    "DecodeError",
    "DeleteRequest",
    "DeliveryError",
    "EncodeError",
    "FAILED",
    "FailedResponse",
    "Ignored",
    "NoProperties",
    "PhysicalResourceIdSuffixProvider",
    "ResourceProperties",
    "SUCCESS",
    "SuccessResponse",
    "UpdateRequest",
    "cfn_request_type",
    "create_lambda_handler",
    "custom_resource",
    "decode",
    "deliver",
    "derive_physical_resource_id",
    "encode",
    "physical_resource_id_suffix",
    "process",
]
