"""Route table of the URL shortener API.

Routes are keyed by the (HTTP method, API Gateway resource pattern) pair of
the incoming event. OPTIONS matches every resource (CORS preflight).

Example:
    >>> resolve('GET', '/urls/{slug}')
    <function get_url ...>
    >>> resolve('PATCH', '/urls/{slug}') is None
    True
"""

from enum import StrEnum
from collections.abc import Callable

from urlshortener.types import LambdaResponse
from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.lambdas.urls_api.request import ApiRequest
from urlshortener.lambdas.urls_api.operations import (
    create_url,
    list_urls,
    get_url,
    update_url,
    delete_url,
    preflight,
)


type Operation = Callable[[ApiRequest, UrlRecordBaseDAO], LambdaResponse]


class HttpMethod(StrEnum):
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'
    OPTIONS = 'OPTIONS'


class RoutePattern(StrEnum):
    URLS = '/urls'
    URL = '/urls/{slug}'


ROUTES: dict[tuple[HttpMethod, RoutePattern], Operation] = {
    (HttpMethod.POST, RoutePattern.URLS): create_url,
    (HttpMethod.GET, RoutePattern.URLS): list_urls,
    (HttpMethod.GET, RoutePattern.URL): get_url,
    (HttpMethod.PUT, RoutePattern.URL): update_url,
    (HttpMethod.DELETE, RoutePattern.URL): delete_url,
}


def resolve(method: str, resource: str) -> Operation | None:
    """Return the operation serving (method, resource), or None if no route matches."""
    if method == HttpMethod.OPTIONS:
        return preflight

    try:
        key = (HttpMethod(method), RoutePattern(resource))
    except ValueError:
        return None
    return ROUTES.get(key)
