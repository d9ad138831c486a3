import json
from typing import Any, cast
from unittest.mock import MagicMock

import pytest

from urlshortener.types import LambdaEvent
from urlshortener.models import UrlRecord
from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.dao.results import StoreError


class InMemoryUrlRecordDAO(UrlRecordBaseDAO):
    """Dict-backed DAO honoring the same existence conditions as the real stores."""

    def __init__(self):
        self.records: dict[str, UrlRecord] = {}

    def insert(self, record, **kwargs):
        if record.slug in self.records:
            return StoreError.conflict(record.slug)
        self.records[record.slug] = record
        return record

    def get(self, slug, **kwargs):
        if slug not in self.records:
            return StoreError.not_found(slug)
        return self.records[slug]

    def scan(self, **kwargs):
        return list(self.records.values())

    def update(self, slug, full_url, updated_at, **kwargs):
        if slug not in self.records:
            return StoreError.condition_failed(slug)
        self.records[slug] = self.records[slug].with_full_url(full_url, updated_at)
        return self.records[slug]

    def delete(self, slug, **kwargs):
        if slug not in self.records:
            return StoreError.condition_failed(slug)
        return self.records.pop(slug)


def build_event(method: str, resource: str, slug: str | None = None, body: Any = None) -> LambdaEvent:
    """Build an API Gateway proxy event; dict bodies are JSON-encoded."""
    return cast(LambdaEvent, {
        'httpMethod': method,
        'resource': resource,
        'path': resource.replace('{slug}', slug or ''),
        'pathParameters': {'slug': slug} if slug is not None else None,
        'body': json.dumps(body) if isinstance(body, dict) else body,
        'requestContext': {'domainName': 'testhost:1000', 'stage': 'test'},
    })


@pytest.fixture
def memory_dao() -> InMemoryUrlRecordDAO:
    return InMemoryUrlRecordDAO()


@pytest.fixture
def record() -> UrlRecord:
    return UrlRecord(
        slug='ab12',
        full_url='https://example.com',
        created_at='2025-10-15T00:00:00.000Z',
        updated_at='2025-10-15T00:00:00.000Z',
    )


@pytest.fixture
def url_dao(record) -> MagicMock:
    dao = MagicMock(spec=UrlRecordBaseDAO)
    dao.get.return_value = StoreError.not_found('ab12')
    dao.insert.side_effect = lambda new_record: new_record
    dao.scan.return_value = []
    dao.update.return_value = record
    dao.delete.return_value = record
    return dao


@pytest.fixture
def make_event():
    return build_event
