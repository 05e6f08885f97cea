"""Shared fixtures: CloudFormation events, a Lambda context and a mocked response PUT.

The PUT to the presigned response URL is never sent: `http_put` patches
urllib3.PoolManager inside the delivery module and answers 200 unless a
test changes `http_put.return_value.status` or sets a side effect.
"""

import json
from dataclasses import dataclass
from typing import Optional
from unittest.mock import MagicMock, patch

import pytest
from pydantic import Field

from cfn_resource_provider import ResourceProperties

STACK_ID = "arn:aws:cloudformation:us-east-2:namespace:stack/stack-name/guid"
LOGICAL_RESOURCE_ID = "name of resource in template"
RESPONSE_URL = "https://cloudformation-custom-resource-response-useast2.s3.amazonaws.com/presigned-url"


class ExampleProperties(ResourceProperties):
    example_property_1: str = Field(alias="ExampleProperty1")
    example_property_2: Optional[bool] = Field(default=None, alias="ExampleProperty2")

    def physical_resource_id_suffix(self) -> str:
        return self.example_property_1


@dataclass
class LambdaContext:
    function_name: str = "cfn-resource-provider-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-2:123456789012:function:cfn-resource-provider-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def pool_manager():
    with patch("cfn_resource_provider.delivery.urllib3.PoolManager") as pool_manager:
        pool_manager.return_value.request.return_value = MagicMock(status=200)
        yield pool_manager


@pytest.fixture
def http_put(pool_manager):
    return pool_manager.return_value.request


def sent_body(http_put) -> dict:
    """The JSON body of the last response PUT"""
    return json.loads(http_put.call_args.kwargs["body"])


@pytest.fixture
def create_event():
    return {
        "RequestType": "Create",
        "ServiceToken": "arn:aws:lambda:us-east-2:123456789012:function:provider",
        "RequestId": "unique id for this create request",
        "ResponseURL": RESPONSE_URL,
        "ResourceType": "Custom::MyCustomResourceType",
        "LogicalResourceId": LOGICAL_RESOURCE_ID,
        "StackId": STACK_ID,
        "ResourceProperties": {
            "ServiceToken": "arn:aws:lambda:us-east-2:123456789012:function:provider",
            "ExampleProperty1": "example property 1",
        },
    }


@pytest.fixture
def update_event():
    return {
        "RequestType": "Update",
        "RequestId": "unique id for this update request",
        "ResponseURL": RESPONSE_URL,
        "ResourceType": "Custom::MyCustomResourceType",
        "LogicalResourceId": LOGICAL_RESOURCE_ID,
        "StackId": STACK_ID,
        "PhysicalResourceId": "custom resource provider-defined physical id",
        "ResourceProperties": {
            "ExampleProperty1": "new example property 1",
            "ExampleProperty2": True,
        },
        "OldResourceProperties": {
            "ExampleProperty1": "example property 1",
        },
    }


@pytest.fixture
def delete_event():
    return {
        "RequestType": "Delete",
        "RequestId": "unique id for this delete request",
        "ResponseURL": RESPONSE_URL,
        "ResourceType": "Custom::MyCustomResourceType",
        "LogicalResourceId": LOGICAL_RESOURCE_ID,
        "StackId": STACK_ID,
        "PhysicalResourceId": "custom resource provider-defined physical id",
        "ResourceProperties": {
            "ExampleProperty1": "example property 1",
        },
    }
