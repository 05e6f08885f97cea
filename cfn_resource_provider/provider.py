# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""
Custom resource request processing.

`process` runs the caller's handler for a decoded request, reports the
outcome to CloudFormation and then hands the outcome back to the caller:

    1. keep the response URL and a copy of the request
    2. run the handler
    3. build the SUCCESS or FAILED response from the copy
    4. serialize it (EncodeError skips delivery)
    5. PUT it to the response URL (DeliveryError on failure)
    6. return the handler's result, or re-raise the handler's error

When delivery fails, the DeliveryError replaces the handler's outcome,
including a handler error. That error has still reached CloudFormation as
the reason of the FAILED response.
"""

import functools
import inspect
from typing import Any, Awaitable, Callable, Optional, Union

from aws_lambda_powertools import Logger

from .config import LOG_LEVEL, SERVICE_NAME
from .delivery import deliver
from .request import CfnRequest
from .response import encode

LOGGER = Logger(service=SERVICE_NAME, level=LOG_LEVEL, location="%(filename)s:%(lineno)d - %(funcName)s()")

Handler = Callable[[CfnRequest], Union[Awaitable[Optional[Any]], Optional[Any]]]


async def process(handler: Handler, request: CfnRequest) -> Optional[Any]:
    """Run `handler` for `request` and report its outcome to CloudFormation"""
    response_url = request.response_url
    retained_request = request.model_copy(deep=True)

    data = None
    error: Optional[Exception] = None
    try:
        data = handler(request)
        if inspect.isawaitable(data):
            data = await data
    except Exception as exc:  # pylint: disable=broad-except
        LOGGER.warning(
            "Custom resource handler failed",
            extra={"error_type": type(exc).__name__, "reason": str(exc)},
        )
        data, error = None, exc

    response = retained_request.into_response(data=data, error=error)
    body = encode(response)
    await deliver(response_url, body)

    if error is not None:
        raise error
    return data


def custom_resource(handler: Handler) -> Callable[[CfnRequest], Awaitable[Optional[Any]]]:
    """
    Decorator turning a handler into a full custom resource provider.

    The decorated function takes a decoded request and resolves like
    `process(handler, request)`.
    """

    @functools.wraps(handler)
    async def provider(request: CfnRequest) -> Optional[Any]:
        return await process(handler, request)

    return provider
