"""API Gateway (Lambda proxy) response builders.

Every response carries permissive CORS headers. JSON responses also carry
`Content-Type: application/json`; redirects carry only `Location` and the
CORS origin, with an empty body.

Functions:
    build_response(status_code: int, body: Any) -> LambdaResponse
        JSON-encode `body` into a Lambda proxy response.
    error_response(status_code: int, message: str) -> LambdaResponse
        Shortcut for `build_response(status_code, {'error': message})`.
    build_redirect_response(location: str, status_code: int = 302) -> LambdaResponse
        Redirect the client to `location`.

Example:
    >>> build_response(201, {'slug': 'ab12'})['headers']['Access-Control-Allow-Origin']
    '*'
    >>> build_redirect_response('https://example.com')['body']
    ''
"""

import json
from typing import Any

from urlshortener.types import LambdaResponse
from urlshortener.constants import CORS_ALLOW_ORIGIN, CORS_ALLOW_METHODS, CORS_ALLOW_HEADERS


def json_headers() -> dict[str, str]:
    return {
        'Content-Type': 'application/json',
        'Access-Control-Allow-Origin': CORS_ALLOW_ORIGIN,
        'Access-Control-Allow-Methods': CORS_ALLOW_METHODS,
        'Access-Control-Allow-Headers': CORS_ALLOW_HEADERS,
    }


def build_response(status_code: int, body: Any) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': json_headers(),
        'body': json.dumps(body),
    }


def error_response(status_code: int, message: str) -> LambdaResponse:
    return build_response(status_code, {'error': message})


def build_redirect_response(location: str, status_code: int = 302) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {
            'Location': location,
            'Access-Control-Allow-Origin': CORS_ALLOW_ORIGIN,
        },
        'body': '',  # no body needed for redirects
    }
