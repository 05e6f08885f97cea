# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""Delivery of custom resource responses to the presigned response URL"""

import asyncio

import urllib3
from aws_lambda_powertools import Logger

from .config import LOG_LEVEL, SERVICE_NAME
from .errors import DeliveryError

LOGGER = Logger(service=SERVICE_NAME, level=LOG_LEVEL, location="%(filename)s:%(lineno)d - %(funcName)s()")


def _put(response_url: str, body: str) -> int:
    encoded_body = body.encode("utf-8")
    # the presigned URL is signed for an empty content type
    headers = {
        "Content-Type": "",
        "Content-Length": str(len(encoded_body)),
    }

    http = urllib3.PoolManager()
    try:
        response = http.request(
            "PUT",
            response_url,
            headers=headers,
            body=encoded_body,
            retries=False,
        )
    except urllib3.exceptions.HTTPError as exc:
        LOGGER.error("Failed to send CloudFormation response", extra={"response_url": response_url, "error": str(exc)})
        raise DeliveryError(f"Failed to send CloudFormation response: {exc}") from exc
    finally:
        http.clear()
    return response.status


async def deliver(response_url: str, body: str) -> None:
    """
    PUT a serialized response to the response URL of its request.

    Raises DeliveryError on transport failures and on any status outside
    the 2xx range. The request is sent once and never retried.
    """
    LOGGER.debug("Sending CloudFormation response", extra={"response_url": response_url, "body": body})
    status = await asyncio.to_thread(_put, response_url, body)
    LOGGER.info("CloudFormation response sent", extra={"status_code": status})
    if not 200 <= status < 300:
        LOGGER.error("CloudFormation response was rejected", extra={"response_url": response_url, "status_code": status})
        raise DeliveryError(f"CloudFormation response was rejected with status {status}", status=status)
