from enum import StrEnum


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class DynamoDB(StrEnum):
        TABLE_NAME = 'TABLE_NAME'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# CORS headers attached to every API response
CORS_ALLOW_ORIGIN = '*'
CORS_ALLOW_METHODS = 'GET, POST, PUT, DELETE, OPTIONS'
CORS_ALLOW_HEADERS = 'Content-Type'
