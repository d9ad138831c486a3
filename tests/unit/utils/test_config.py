"""Unit tests for configuration helpers in config.py.

Test coverage includes:

1. table_name() reads TABLE_NAME, raises when missing or empty.
2. localstack_endpoint() only applies when running locally.
"""

import pytest

from urlshortener.constants import ENV
from urlshortener.exceptions import MissingEnvironmentVariableError
from urlshortener.utils import config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for group in (ENV.App, ENV.DynamoDB, ENV.LocalStack):
        for name in group:
            monkeypatch.delenv(name, raising=False)


# -------------------------------
# 1. DynamoDB table
# -------------------------------


def test_table_name(monkeypatch):
    monkeypatch.setenv(ENV.DynamoDB.TABLE_NAME, 'urlshortener-dev-urls')
    assert config.table_name() == 'urlshortener-dev-urls'


def test_table_name_missing():
    with pytest.raises(MissingEnvironmentVariableError, match="'TABLE_NAME'"):
        config.table_name()


def test_table_name_empty(monkeypatch):
    monkeypatch.setenv(ENV.DynamoDB.TABLE_NAME, '')
    with pytest.raises(MissingEnvironmentVariableError):
        config.table_name()


# -------------------------------
# 2. LocalStack endpoint
# -------------------------------


def test_localstack_endpoint_when_running_locally(monkeypatch):
    monkeypatch.setenv(ENV.App.APP_ENV, 'local')
    monkeypatch.setenv(ENV.LocalStack.ENDPOINT, 'http://localstack:4566')
    assert config.localstack_endpoint() == 'http://localstack:4566'


def test_localstack_endpoint_under_sam_local(monkeypatch):
    monkeypatch.setenv(ENV.App.APP_ENV, 'dev')
    monkeypatch.setenv(ENV.App.AWS_SAM_LOCAL, 'true')
    monkeypatch.setenv(ENV.LocalStack.ENDPOINT, 'http://localstack:4566')
    assert config.localstack_endpoint() == 'http://localstack:4566'


def test_localstack_endpoint_ignored_in_aws(monkeypatch):
    monkeypatch.setenv(ENV.App.APP_ENV, 'prod')
    monkeypatch.setenv(ENV.LocalStack.ENDPOINT, 'http://localstack:4566')
    assert config.localstack_endpoint() is None


def test_localstack_endpoint_unset_when_running_locally(monkeypatch):
    monkeypatch.setenv(ENV.App.APP_ENV, 'local')
    assert config.localstack_endpoint() is None
