"""Helper utilities for AWS lambda functions.

Functions:
    utc_now_iso() -> str
        Current UTC time as an ISO-8601 string with millisecond precision
    is_absolute_url(value: Any) -> bool
        Check that a value is a syntactically valid absolute URL
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Convert any uncaught exception into a generic 500 response

Example:
    Typical usage inside a Lambda handler:

        >>> from urlshortener.utils.helpers import is_absolute_url
        >>> is_absolute_url('https://example.com/some/page')
        True
        >>> is_absolute_url('not-a-url')
        False
"""

import os
import re
import logging
import functools
import urllib.parse
from datetime import datetime, UTC
from typing import Any
from collections.abc import Callable

from urlshortener.exceptions import MissingEnvironmentVariableError
from urlshortener.utils.responses import error_response


logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = 'Internal server error'
UNHANDLED_ERROR = 'UNHANDLED_ERROR'

_SCHEME_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*')
# Schemes whose URLs are meaningless without a host
_HOST_REQUIRED_SCHEMES = frozenset({'http', 'https', 'ftp', 'ws', 'wss'})
# Characters a URL host can never contain
_FORBIDDEN_HOST_CHARACTERS = frozenset('<>^|"{}\\')


def utc_now_iso() -> str:
    """Return the current UTC time as ISO-8601 string

    Returns:
        str: e.g. '2025-10-15T12:30:00.123Z'
    """
    # fmt: off
    return datetime.now(UTC) \
                   .isoformat(timespec='milliseconds') \
                   .replace('+00:00', 'Z')
    # fmt: on


def is_absolute_url(value: Any) -> bool:
    """Check that a value is a syntactically valid absolute URL

    A valid URL has a scheme followed by a non-empty remainder. Web schemes
    (http, https, ftp, ws, wss) additionally need a host and, if present,
    a port in range. Control characters anywhere, and whitespace or
    delimiter characters such as `<`, `>` or `|` in the host, make a URL invalid.

    Args:
        value (Any): candidate URL, usually taken straight from a JSON body

    Returns:
        bool: True if the value can be stored as a redirect target

    Example:
        >>> is_absolute_url('https://example.com')
        True
        >>> is_absolute_url('mailto:someone@example.com')
        True
        >>> is_absolute_url('https://')
        False
        >>> is_absolute_url('example.com')
        False
    """
    if not isinstance(value, str):
        return False
    if any(not char.isprintable() for char in value):
        return False

    try:
        components = urllib.parse.urlsplit(value.strip())
        components.port  # raises ValueError on out-of-range ports
    except ValueError:
        return False

    scheme = components.scheme
    if not scheme or not _SCHEME_PATTERN.fullmatch(scheme):
        return False
    if not _is_valid_host(components.netloc):
        return False
    if scheme.lower() in _HOST_REQUIRED_SCHEMES:
        return bool(components.hostname)
    return bool(components.netloc or components.path)


def _is_valid_host(netloc: str) -> bool:
    host = netloc.rpartition('@')[2]
    return not any(char.isspace() or char in _FORBIDDEN_HOST_CHARACTERS for char in host)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('TABLE_NAME')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: "Missing required environment variables: 'TABLE_NAME'"
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator ensuring a request handler always returns a response.

    Any exception escaping `handler` is logged with its traceback and turned
    into a 500 response with a generic error message. The exception detail is
    never sent to the client.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except Exception:
            logger.exception(
                'Unhandled error while processing request. Responding with 500.',
                extra={'event': UNHANDLED_ERROR},
            )
            return error_response(500, INTERNAL_SERVER_ERROR)

    return wrapper
