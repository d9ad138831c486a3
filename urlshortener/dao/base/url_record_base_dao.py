"""Abstract base class for URL record data access objects (DAOs).

This class establishes a consistent contract for all URL record DAO implementations,
regardless of the underlying storage mechanism (e.g., DynamoDB or an in-memory test double).

Responsibilities:
    - Provide an interface for creating, reading, listing, updating and deleting UrlRecord objects.
    - Standardize error reporting across data store implementations via StoreError results.
    - Enforce a consistent API for use by the Lambda handler.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.models import UrlRecord
        >>> from urlshortener.dao.dynamodb import UrlRecordDynamoDBDAO

        >>> dao = UrlRecordDynamoDBDAO(table_name='urls')

        >>> record = UrlRecord(
        ...     slug='ab12',
        ...     full_url='https://example.com',
        ...     created_at='2025-10-15T00:00:00.000Z',
        ...     updated_at='2025-10-15T00:00:00.000Z',
        ... )
        >>> dao.insert(record)
        UrlRecord(slug='ab12', full_url='https://example.com', ...)

        >>> dao.get('ab12').full_url
        'https://example.com'

        >>> dao.get('missing')
        StoreError(kind=<StoreErrorKind.NOT_FOUND: 'NOT_FOUND'>, ...)
"""

from abc import ABC, abstractmethod

from urlshortener.models import UrlRecord
from urlshortener.dao.results import StoreError


class UrlRecordBaseDAO(ABC):
    """Interface for URL record data access objects (DAOs).

    Methods:
        insert(record: UrlRecord, **kwargs) -> UrlRecord | StoreError:
            Conditionally create a record (only if its slug doesn't exist yet).

        get(slug: str, **kwargs) -> UrlRecord | StoreError:
            Retrieve a record by slug.

        scan(**kwargs) -> list[UrlRecord] | StoreError:
            Retrieve every record in the data store.

        update(slug: str, full_url: str, updated_at: str, **kwargs) -> UrlRecord | StoreError:
            Conditionally replace the target URL of an existing record.

        delete(slug: str, **kwargs) -> UrlRecord | StoreError:
            Conditionally remove an existing record.

    Subclassing:
        Datastore-specific implementations (e.g., UrlRecordDynamoDBDAO) must
        extend this class and implement all abstract methods. Implementations
        never raise for expected outcomes (absent or duplicate slugs, backend
        failures); they return a StoreError.
    """

    @abstractmethod
    def insert(self, record: UrlRecord, **kwargs) -> UrlRecord | StoreError:
        """Insert a new UrlRecord into the data store.

        The write is conditional: it only succeeds if no record with the
        same slug exists at write time.

        Args:
            record (UrlRecord):
                The UrlRecord instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecord: the stored record.
            StoreError (CONFLICT): a record with the same slug already exists.
            StoreError (STORE_ERROR): the data store failed.
        """
        pass

    @abstractmethod
    def get(self, slug: str, **kwargs) -> UrlRecord | StoreError:
        """Retrieve a UrlRecord from the data store by its slug.

        Args:
            slug (str):
                The slug of the UrlRecord to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecord: the stored record.
            StoreError (NOT_FOUND): no record with the given slug exists.
            StoreError (STORE_ERROR): the data store failed.
        """
        pass

    @abstractmethod
    def scan(self, **kwargs) -> list[UrlRecord] | StoreError:
        """Retrieve all UrlRecords from the data store (unordered, unpaginated).

        Returns:
            list[UrlRecord]: every stored record, possibly empty.
            StoreError (STORE_ERROR): the data store failed.
        """
        pass

    @abstractmethod
    def update(self, slug: str, full_url: str, updated_at: str, **kwargs) -> UrlRecord | StoreError:
        """Replace the target URL of an existing record.

        Args:
            slug (str):
                The slug of the record to update.

            full_url (str):
                New target URL.

            updated_at (str):
                ISO-8601 timestamp of this modification.

        Returns:
            UrlRecord: the full record after the update.
            StoreError (CONDITION_FAILED): no record with the given slug exists.
            StoreError (STORE_ERROR): the data store failed.
        """
        pass

    @abstractmethod
    def delete(self, slug: str, **kwargs) -> UrlRecord | StoreError:
        """Remove an existing record.

        Args:
            slug (str):
                The slug of the record to delete.

        Returns:
            UrlRecord: the removed record.
            StoreError (CONDITION_FAILED): no record with the given slug exists.
            StoreError (STORE_ERROR): the data store failed.
        """
        pass
