# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""
Physical resource ID suffixes.

CloudFormation requires the physical resource ID to stay stable across
updates that don't replace the underlying resource. The ID derived for
Create and Update requests therefore ends in a suffix chosen by the
resource properties type: it has to change exactly when the provisioning
logic creates a new resource.

Resource properties types come in four flavours:

- a concrete model (usually a `ResourceProperties` subclass) that is
  required and validated strictly,
- `Optional[Model]`, where absent properties decode to None,
- `NoProperties`, which accepts no properties at all,
- `Ignored`, which accepts anything and keeps nothing.
"""

from typing import Annotated, Any, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import core_schema

from .config import PHYSICAL_RESOURCE_ID_PREFIX

# CloudFormation adds the provider's ServiceToken to every ResourceProperties
SERVICE_TOKEN_KEY = "ServiceToken"


@runtime_checkable
class PhysicalResourceIdSuffixProvider(Protocol):
    """Anything that can name the suffix of its physical resource ID"""

    def physical_resource_id_suffix(self) -> str:
        ...


class ResourceProperties(BaseModel):
    """
    Base model for strictly validated resource properties.

    Unknown keys are rejected, except for the ServiceToken CloudFormation
    injects. Override `physical_resource_id_suffix` to return the values
    that force a replacement when they change.
    """

    model_config = ConfigDict(extra="forbid")

    service_token: Optional[str] = Field(default=None, alias=SERVICE_TOKEN_KEY, exclude=True)

    def physical_resource_id_suffix(self) -> str:
        return ""


class Ignored:
    """Resource properties that accept any payload and discard it"""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ignored)

    def __hash__(self) -> int:
        return hash(Ignored)

    def __repr__(self) -> str:
        return "Ignored()"

    def physical_resource_id_suffix(self) -> str:
        return ""

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            lambda _value: cls(),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda _value: None),
        )


def _reject_properties(value: Any) -> None:
    if value is None:
        return None
    if isinstance(value, Mapping) and all(key == SERVICE_TOKEN_KEY for key in value):
        return None
    raise ValueError("this resource does not accept resource properties")


NoProperties = Annotated[None, BeforeValidator(_reject_properties)]


def physical_resource_id_suffix(properties: Any) -> str:
    """Suffix for a resource properties value; empty when it provides none"""
    if isinstance(properties, PhysicalResourceIdSuffixProvider):
        return properties.physical_resource_id_suffix()
    return ""


def derive_physical_resource_id(stack_id: str, logical_resource_id: str, suffix: str = "") -> str:
    """
    Build the physical resource ID for a resource in a stack.

    The stack ID is an ARN ending in the stack GUID; the GUID is the segment
    after the last slash. Stack IDs without a slash are used whole.
    """
    stack_guid = stack_id.rsplit("/", 1)[-1]
    physical_resource_id = f"{PHYSICAL_RESOURCE_ID_PREFIX}{stack_guid}-{logical_resource_id}"
    if suffix:
        physical_resource_id = f"{physical_resource_id}/{suffix}"
    return physical_resource_id
