"""Utility functions for application configuration management.

The handler is configured entirely through environment variables set on the
Lambda function (or the local SAM/LocalStack environment). The only store
setting is the DynamoDB table identifier, `TABLE_NAME`.

Functions:
    table_name() -> str
        Return the DynamoDB table name (`TABLE_NAME`).

    localstack_endpoint() -> str | None
        Return the LocalStack endpoint URL when running locally.

Example:
    Typical usage when wiring a DAO:

        >>> from urlshortener.utils.config import table_name
        >>> os.environ['TABLE_NAME'] = 'urls'
        >>> table_name()
        'urls'
"""

import os

from urlshortener.constants import ENV
from urlshortener.utils.helpers import require_environment
from urlshortener.utils.runtime import running_locally


@require_environment(ENV.DynamoDB.TABLE_NAME)
def table_name() -> str:
    """Return the DynamoDB table name by reading 'TABLE_NAME'

    Raises:
        MissingEnvironmentVariableError:
            If `TABLE_NAME` is missing or empty.
    """
    return os.environ[ENV.DynamoDB.TABLE_NAME]


def localstack_endpoint() -> str | None:
    """Return the LocalStack endpoint URL, only when running locally."""
    if not running_locally():
        return None
    return os.environ.get(ENV.LocalStack.ENDPOINT) or None
