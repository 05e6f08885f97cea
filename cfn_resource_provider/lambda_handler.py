# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""AWS Lambda entry points for custom resource providers"""

import asyncio
from typing import Any, Callable, Dict, Optional

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .config import LOG_LEVEL, SERVICE_NAME
from .provider import Handler, process
from .request import decode
from .suffix import Ignored

LOGGER = Logger(service=SERVICE_NAME, level=LOG_LEVEL, location="%(filename)s:%(lineno)d - %(funcName)s()")


def create_lambda_handler(
    handler: Handler,
    properties_type: Any = Ignored,
    log_event: bool = False,
) -> Callable[[Dict[str, Any], LambdaContext], Optional[Any]]:
    """
    Build a Lambda handler serving a CloudFormation custom resource.

    The returned function decodes the event into a request with resource
    properties of `properties_type`, runs `handler` through `process` and
    returns the handler's result as JSON compatible data, or None when the
    result has no JSON form. Errors, including the DeliveryError of a
    response CloudFormation never received, are raised to the Lambda
    runtime.
    """

    @LOGGER.inject_lambda_context(log_event=log_event)
    def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Optional[Any]:
        # pylint: disable=unused-argument
        request = decode(event, properties_type)
        result = asyncio.run(process(handler, request))
        try:
            return to_jsonable_python(result, by_alias=True)
        except PydanticSerializationError as exc:
            LOGGER.warning("Dropping handler result that is not JSON serializable", extra={"error": str(exc)})
            return None

    return lambda_handler
