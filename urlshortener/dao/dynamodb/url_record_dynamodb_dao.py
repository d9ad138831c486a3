"""Data Access Object (DAO) implementation for managing URL records in DynamoDB

This module provides a DynamoDB-based implementation of UrlRecordBaseDAO for CRUD
operations with UrlRecord instances. The table is keyed by `slug` and stores
records with their wire attribute names (slug, fullUrl, createdAt, updatedAt).

Responsibilities:
    - Conditionally create, update and delete records (existence-gated writes);
    - Read single records and scan the whole table;
    - Report absent slugs, condition failures and AWS errors as StoreError results.

Classes:
    UrlRecordDynamoDBDAO:
        DAO for storing and retrieving UrlRecord in a DynamoDB table.

Example:
    >>> dao = UrlRecordDynamoDBDAO(table_name='urls')
    >>> dao.insert(UrlRecord('ab12', 'https://example.com', now, now))
    UrlRecord(slug='ab12', ...)
    >>> dao.insert(UrlRecord('ab12', 'https://example.org', now, now))
    StoreError(kind=<StoreErrorKind.CONFLICT: 'CONFLICT'>, ...)
"""

from beartype import beartype
from boto3.dynamodb.conditions import Attr

from urlshortener.types import DynamoDBItem
from urlshortener.models import UrlRecord
from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.dao.results import StoreError, StoreErrorKind
from urlshortener.dao.dynamodb.mixins import DynamoDBTableMixin
from urlshortener.dao.dynamodb.helpers import handle_dynamodb_errors


class UrlRecordDynamoDBDAO(DynamoDBTableMixin, UrlRecordBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for managing URL records

    Attributes (see DynamoDBTableMixin):
        table (boto3 DynamoDB Table):
            Table resource used to communicate with DynamoDB.
        table_name (str):
            Name of the DynamoDB table.
    """

    @handle_dynamodb_errors(on_condition_failure=StoreErrorKind.CONFLICT)
    @beartype
    def insert(self, record: UrlRecord, **kwargs) -> UrlRecord | StoreError:
        """Insert a URL record unless its slug already exists

        Example:
            >>> dao.insert(record)
            UrlRecord(slug='ab12', ...)
        """
        self.table.put_item(
            Item=record.to_dict(),
            ConditionExpression=Attr('slug').not_exists(),
        )
        return record

    @handle_dynamodb_errors()
    @beartype
    def get(self, slug: str, **kwargs) -> UrlRecord | StoreError:
        """Retrieve a URL record by slug

        Example:
            >>> dao.get('ab12').full_url
            'https://example.com'
        """
        item = self.table.get_item(Key={'slug': slug}).get('Item')
        if item is None:
            return StoreError.not_found(slug)
        return UrlRecord.from_dict(item)

    @handle_dynamodb_errors()
    @beartype
    def scan(self, **kwargs) -> list[UrlRecord] | StoreError:
        """Retrieve every URL record, following DynamoDB's scan pages until exhausted

        Example:
            >>> len(dao.scan())
            3
        """
        records = []
        scan_kwargs: DynamoDBItem = {}
        while True:
            response = self.table.scan(**scan_kwargs)
            records.extend(UrlRecord.from_dict(item) for item in response.get('Items', []))

            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return records
            scan_kwargs['ExclusiveStartKey'] = last_key

    @handle_dynamodb_errors()
    @beartype
    def update(self, slug: str, full_url: str, updated_at: str, **kwargs) -> UrlRecord | StoreError:
        """Replace the target URL of an existing record and refresh `updatedAt`

        Example:
            >>> dao.update('ab12', 'https://example.org', '2025-10-16T00:00:00.000Z').full_url
            'https://example.org'
        """
        response = self.table.update_item(
            Key={'slug': slug},
            UpdateExpression='SET fullUrl = :fullUrl, updatedAt = :updatedAt',
            ExpressionAttributeValues={
                ':fullUrl': full_url,
                ':updatedAt': updated_at,
            },
            ConditionExpression=Attr('slug').exists(),
            ReturnValues='ALL_NEW',
        )
        return UrlRecord.from_dict(response['Attributes'])

    @handle_dynamodb_errors()
    @beartype
    def delete(self, slug: str, **kwargs) -> UrlRecord | StoreError:
        """Delete an existing record, returning what was removed

        Example:
            >>> dao.delete('ab12').slug
            'ab12'
        """
        response = self.table.delete_item(
            Key={'slug': slug},
            ConditionExpression=Attr('slug').exists(),
            ReturnValues='ALL_OLD',
        )
        return UrlRecord.from_dict(response['Attributes'])
