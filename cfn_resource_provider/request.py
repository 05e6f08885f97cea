# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""
CloudFormation custom resource requests.

A request is one of three variants, selected by the `RequestType` key of
the event CloudFormation sends to the provider:

    CreateRequest  - a new resource
    UpdateRequest  - properties changed; carries the previous properties and
                     the physical resource ID of the existing resource
    DeleteRequest  - the resource is removed; carries its physical ID

All variants are generic over the type of their resource properties, see
`cfn_resource_provider.suffix` for the supported flavours.
"""

from typing import (
    Annotated, Any, ClassVar, Generic, Literal, Mapping, Optional, Tuple, TypeVar, Union,
)

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .config import LOG_LEVEL, SERVICE_NAME
from .errors import DecodeError
from .response import CfnResponse, FailedResponse, SuccessResponse
from .suffix import Ignored, derive_physical_resource_id, physical_resource_id_suffix

LOGGER = Logger(service=SERVICE_NAME, level=LOG_LEVEL, location="%(filename)s:%(lineno)d - %(funcName)s()")

P = TypeVar("P")


class _CfnRequest(BaseModel, Generic[P]):
    model_config = ConfigDict(frozen=True)

    # wire keys of every properties payload in the variant
    PROPERTIES_KEYS: ClassVar[Tuple[str, ...]] = ("ResourceProperties",)

    request_id: str = Field(alias="RequestId")
    response_url: str = Field(alias="ResponseURL")
    resource_type: str = Field(alias="ResourceType")
    logical_resource_id: str = Field(alias="LogicalResourceId")
    stack_id: str = Field(alias="StackId")
    resource_properties: P = Field(alias="ResourceProperties")

    @model_validator(mode="before")
    @classmethod
    def _absent_properties_are_null(cls, data: Any) -> Any:
        # absent properties only decode for properties types that accept null
        if isinstance(data, Mapping):
            missing = {key: None for key in cls.PROPERTIES_KEYS if key not in data}
            if missing:
                data = {**data, **missing}
        return data

    @property
    def physical_resource_id(self) -> str:
        return derive_physical_resource_id(
            self.stack_id,
            self.logical_resource_id,
            physical_resource_id_suffix(self.resource_properties),
        )

    def into_response(self, data: Any = None, error: Optional[BaseException] = None) -> CfnResponse:
        """
        Build the response for this request from the outcome of the handler.

        An error produces a FAILED response whose reason is the error's
        text; otherwise the response is SUCCESS and carries `data`, when
        given, as its Data attribute.
        """
        identity = {
            "request_id": self.request_id,
            "logical_resource_id": self.logical_resource_id,
            "stack_id": self.stack_id,
            "physical_resource_id": self.physical_resource_id,
        }
        if error is not None:
            return FailedResponse(reason=str(error), **identity)
        return SuccessResponse(data=_response_data(data), **identity)


class CreateRequest(_CfnRequest[P], Generic[P]):
    request_type: Literal["Create"] = Field(default="Create", alias="RequestType")


class UpdateRequest(_CfnRequest[P], Generic[P]):
    PROPERTIES_KEYS: ClassVar[Tuple[str, ...]] = (
        "ResourceProperties",
        "OldResourceProperties",
    )

    request_type: Literal["Update"] = Field(default="Update", alias="RequestType")
    existing_physical_resource_id: str = Field(alias="PhysicalResourceId")
    old_resource_properties: P = Field(alias="OldResourceProperties")


class DeleteRequest(_CfnRequest[P], Generic[P]):
    request_type: Literal["Delete"] = Field(default="Delete", alias="RequestType")
    existing_physical_resource_id: str = Field(alias="PhysicalResourceId")

    @property
    def physical_resource_id(self) -> str:
        return self.existing_physical_resource_id


CfnRequest = Union[CreateRequest, UpdateRequest, DeleteRequest]


def cfn_request_type(properties_type: Any = Ignored) -> Any:
    """The discriminated union of request variants for a properties type"""
    return Annotated[
        Union[
            CreateRequest[properties_type],
            UpdateRequest[properties_type],
            DeleteRequest[properties_type],
        ],
        Field(discriminator="request_type"),
    ]


def decode(raw: Union[Mapping[str, Any], str, bytes], properties_type: Any = Ignored) -> CfnRequest:
    """
    Decode a CloudFormation custom resource event.

    `raw` is the event as a mapping or as JSON text. Raises DecodeError when
    the request type is missing or unknown, when a common field is missing,
    or when the resource properties don't fit `properties_type`.
    """
    adapter = TypeAdapter(cfn_request_type(properties_type))
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            request = adapter.validate_json(raw)
        else:
            request = adapter.validate_python(raw)
    except ValidationError as exc:
        raise DecodeError(f"Invalid CloudFormation request: {exc}") from exc

    LOGGER.info(
        "Decoded CloudFormation request",
        extra={
            "request_type": request.request_type,
            "logical_resource_id": request.logical_resource_id,
            "resource_type": request.resource_type,
        },
    )
    return request


def _response_data(data: Any) -> Any:
    if data is None:
        return None
    try:
        return to_jsonable_python(data, by_alias=True)
    except PydanticSerializationError as exc:
        LOGGER.warning("Dropping response data that is not JSON serializable", extra={"error": str(exc)})
        return None
