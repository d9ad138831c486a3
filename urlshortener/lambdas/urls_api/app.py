import logging

from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.dao.factory import url_record_dao
from urlshortener.utils.helpers import guarantee_500_response
from urlshortener.utils.responses import error_response
from urlshortener.lambdas.urls_api.request import ApiRequest
from urlshortener.lambdas.urls_api.routes import resolve
from urlshortener.lambdas.urls_api.constants import ROUTE_NOT_FOUND, ROUTE_NOT_FOUND_MESSAGE


logger = logging.getLogger(__name__)


@guarantee_500_response
def dispatch(event: LambdaEvent, dao: UrlRecordBaseDAO) -> LambdaResponse:
    """Route an API Gateway event to its URL operation

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        dao (UrlRecordBaseDAO):
            Store used by the operation.

    Returns:
        LambdaResponse:
            The operation's response, 404 if no route matches, or a generic
            500 if anything (malformed JSON body included) raises.
    """
    request = ApiRequest.from_event(event)
    logger.debug(
        'Received request.',
        extra={'httpMethod': request.method, 'resource': request.resource, 'slug': request.slug},
    )

    operation = resolve(request.method, request.resource)
    if operation is None:
        logger.info(
            'No route matches request. Responding with 404.',
            extra={'httpMethod': request.method, 'resource': request.resource, 'event': ROUTE_NOT_FOUND},
        )
        return error_response(404, ROUTE_NOT_FOUND_MESSAGE)

    return operation(request, dao)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests for the URL shortener CRUD API

    Routes:
        POST   /urls          Create a slug -> fullUrl mapping
        GET    /urls          List all mappings
        GET    /urls/{slug}   Redirect (302) to the slug's fullUrl
        PUT    /urls/{slug}   Replace the slug's fullUrl
        DELETE /urls/{slug}   Delete the mapping
        OPTIONS *             CORS preflight

    HTTP responses:
        200: Successful list, update, delete or preflight
        201: Mapping created
            body: the created record (slug, fullUrl, createdAt, updatedAt)
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            error: missing required fields or invalid URL format
        404: Unknown route or slug
            error: 'Route not found' / 'URL not found'
        409: Slug already exists
        500: Internal server error
            error: operation-specific failure or 'Internal server error'

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'httpMethod': 'GET', 'resource': '/urls/{slug}', 'pathParameters': {'slug': 'ab12'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com'
    """
    return dispatch(event, url_record_dao())
