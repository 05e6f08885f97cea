#!/usr/bin/env python3.12
# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""
Custom resource starting the ingestion job of a Bedrock knowledge base data source.

Only one ingestion job can run at a time, so when more than one data source
is created the second job fails to start. Failures are logged and ignored;
the job can be retried manually from the Bedrock console.
"""

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from pydantic import Field

from cfn_resource_provider import DeleteRequest, ResourceProperties, create_lambda_handler

LOGGER = Logger(location="%(filename)s:%(lineno)d - %(funcName)s()")

_client = None


def _get_client():
    """Get (or create) the Bedrock Agent client"""
    global _client
    if _client is None:
        _client = boto3.client("bedrock-agent")
    return _client


class IngestionJobProperties(ResourceProperties):
    knowledge_base_id: str = Field(alias="knowledgeBaseId")
    data_source_id: str = Field(alias="dataSourceId")

    def physical_resource_id_suffix(self) -> str:
        return f"{self.knowledge_base_id}/{self.data_source_id}"


def start_ingestion_job(request):
    if isinstance(request, DeleteRequest):
        LOGGER.info("Delete no op")
        return None

    properties = request.resource_properties
    try:
        response = _get_client().start_ingestion_job(
            knowledgeBaseId=properties.knowledge_base_id,
            dataSourceId=properties.data_source_id,
            description="Autostart by CloudFormation",
        )
        LOGGER.info("start_ingestion_job response", extra={"response": response})
    except ClientError as error:
        LOGGER.warning(
            "start_ingestion_job failed. Retry manually from bedrock console",
            extra={"error": str(error)},
        )

    return {
        "KnowledgeBaseId": properties.knowledge_base_id,
        "DataSourceId": properties.data_source_id,
    }


lambda_handler = create_lambda_handler(start_ingestion_job, IngestionJobProperties)
