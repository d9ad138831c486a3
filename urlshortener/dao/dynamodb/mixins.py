"""DynamoDB mixin providing shared table initialization.

Responsibilities:
    - Resolve the table name from `TABLE_NAME` unless given explicitly
    - Initialize a boto3 DynamoDB Table resource (LocalStack when running locally)

Classes:
    - DynamoDBTableMixin: Base mixin to inject DynamoDB table setup.

Example:
    Typical usage with a DAO implementation:

        >>> class UrlRecordDynamoDBDAO(DynamoDBTableMixin, UrlRecordBaseDAO):
        ...     pass
        ...
        >>> dao = UrlRecordDynamoDBDAO(table_name='urlshortener-dev-urls')
        >>> dao.table_name
        'urlshortener-dev-urls'
"""

from typing import Any, Optional

import boto3

from urlshortener.utils.config import table_name as configured_table_name, localstack_endpoint


class DynamoDBTableMixin:
    """Mixin DynamoDB table setup for DynamoDB-backed DAOs.

    Attributes:
        table (boto3 DynamoDB Table resource):
            Table used by subclasses for item operations.

        table_name (str):
            Name of the DynamoDB table.
    """

    def __init__(
        self,
        table_name: Optional[str] = None,
        dynamodb_resource: Optional[Any] = None,
        table: Optional[Any] = None,
    ):
        """Initialize a DynamoDB-based DAO for URL record management

        The option is given to either use an existing Table resource or
        create one from the table name.

        Args:
            table_name (Optional[str]):
                Name of the DynamoDB table. Defaults to the `TABLE_NAME` environment variable.

            dynamodb_resource (Optional[boto3.resources.base.ServiceResource]):
                Pre-initialized DynamoDB service resource. If None, a new one is created
                (pointing to LocalStack when running locally).

            table (Optional[boto3 DynamoDB Table]):
                Pre-initialized Table resource. If given, `dynamodb_resource` is ignored.

        Raises:
            MissingEnvironmentVariableError:
                If no table is given and `TABLE_NAME` is not set.
        """
        if table is None:
            table_name = table_name or configured_table_name()
            if dynamodb_resource is None:
                dynamodb_resource = boto3.resource('dynamodb', endpoint_url=localstack_endpoint())
            table = dynamodb_resource.Table(table_name)

        self.table = table
        self.table_name = table_name or table.name
