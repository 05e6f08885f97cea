# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""CloudFormation custom resource responses"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic_core import PydanticSerializationError

from .errors import EncodeError

SUCCESS = "SUCCESS"
FAILED = "FAILED"

# keys CloudFormation expects to be left out rather than sent as null
_OMITTED_WHEN_ABSENT = ("NoEcho", "Data")


class _CfnResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    request_id: str = Field(alias="RequestId")
    logical_resource_id: str = Field(alias="LogicalResourceId")
    stack_id: str = Field(alias="StackId")
    physical_resource_id: str = Field(alias="PhysicalResourceId")

    @model_serializer(mode="wrap")
    def _serialize(self, handler):
        body = handler(self)
        for key in _OMITTED_WHEN_ABSENT:
            if key in body and body[key] is None:
                del body[key]
        if "Status" in body:
            body = {"Status": body.pop("Status"), **body}
        return body


class SuccessResponse(_CfnResponse):
    """The resource operation succeeded"""

    status: Literal["SUCCESS"] = Field(default=SUCCESS, alias="Status")
    no_echo: Optional[bool] = Field(default=None, alias="NoEcho")
    data: Optional[Any] = Field(default=None, alias="Data")


class FailedResponse(_CfnResponse):
    """The resource operation failed; `reason` is shown in the stack events"""

    status: Literal["FAILED"] = Field(default=FAILED, alias="Status")
    reason: str = Field(alias="Reason")


CfnResponse = Union[SuccessResponse, FailedResponse]


def encode(response: CfnResponse) -> str:
    """Serialize a response to the JSON body CloudFormation expects"""
    try:
        return response.model_dump_json(by_alias=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodeError(f"Failed to serialize CloudFormation response: {exc}") from exc
