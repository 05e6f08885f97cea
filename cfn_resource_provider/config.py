# Copyright (c) 2025 Amazon.com
# This file is licensed under the MIT License.
# See the LICENSE file in the project root for full license information.

"""Environment configuration"""

from os import getenv

SERVICE_NAME = getenv("POWERTOOLS_SERVICE_NAME", "cfn-resource-provider")
LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

PHYSICAL_RESOURCE_ID_PREFIX = "arn:custom:cfn-resource-provider:::"
