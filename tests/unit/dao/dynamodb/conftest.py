from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from urlshortener.models import UrlRecord


@pytest.fixture
def table() -> MagicMock:
    """Mock a boto3 DynamoDB Table resource."""
    _table = MagicMock()
    _table.name = 'testapp-test-urls'
    _table.get_item.return_value = {}
    _table.scan.return_value = {'Items': [], 'Count': 0}
    return _table


@pytest.fixture
def record() -> UrlRecord:
    return UrlRecord(
        slug='ab12',
        full_url='https://example.com',
        created_at='2025-10-15T00:00:00.000Z',
        updated_at='2025-10-15T00:00:00.000Z',
    )


def client_error(code: str, operation: str = 'PutItem') -> ClientError:
    return ClientError({'Error': {'Code': code, 'Message': f'{code} raised'}}, operation)


@pytest.fixture
def conditional_check_failed() -> ClientError:
    return client_error('ConditionalCheckFailedException')


@pytest.fixture
def throttled() -> ClientError:
    return client_error('ProvisionedThroughputExceededException')
