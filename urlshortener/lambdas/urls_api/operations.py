"""URL record operations behind the `/urls` API routes.

Every operation has the same contract:

    operation(request: ApiRequest, dao: UrlRecordBaseDAO) -> LambdaResponse

Validation failures are answered before the store is contacted. Store results
are inspected by `StoreError.kind`; store failures are logged with their cause
and answered with an operation-specific 500 message.

HTTP responses:
    POST   /urls          201 record | 400 | 409 | 500
    GET    /urls          200 {items, count} | 500
    GET    /urls/{slug}   302 Location: fullUrl | 404 | 500
    PUT    /urls/{slug}   200 record | 400 | 404 | 500
    DELETE /urls/{slug}   200 {message} | 404 | 500
    OPTIONS *             200 {}
"""

import logging

from urlshortener.models import UrlRecord
from urlshortener.types import LambdaResponse
from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.dao.results import StoreError, StoreErrorKind, is_error
from urlshortener.utils.helpers import utc_now_iso, is_absolute_url
from urlshortener.utils.responses import build_response, build_redirect_response, error_response
from urlshortener.lambdas.urls_api.request import ApiRequest
from urlshortener.lambdas.urls_api.constants import (
    MISSING_SLUG_OR_FULL_URL_MESSAGE,
    MISSING_FULL_URL_MESSAGE,
    INVALID_URL_FORMAT_MESSAGE,
    SLUG_ALREADY_EXISTS_MESSAGE,
    URL_NOT_FOUND_MESSAGE,
    URL_DELETED_MESSAGE,
    FAILED_TO_CREATE_MESSAGE,
    FAILED_TO_LIST_MESSAGE,
    FAILED_TO_GET_MESSAGE,
    FAILED_TO_UPDATE_MESSAGE,
    FAILED_TO_DELETE_MESSAGE,
    MISSING_REQUIRED_FIELDS,
    INVALID_URL_FORMAT,
    SLUG_ALREADY_EXISTS,
    SLUG_CHECK_FAILED,
    URL_CREATED,
    URLS_LISTED,
    URL_NOT_FOUND,
    REDIRECT_SUCCESS,
    URL_UPDATED,
    URL_DELETED,
    STORE_FAILURE,
)


logger = logging.getLogger(__name__)


def _store_failure(message: str, error: StoreError, status_message: str, **extra) -> LambdaResponse:
    logger.error(
        message,
        extra={**extra, 'event': STORE_FAILURE, 'reason': error.message},
        exc_info=error.cause,
    )
    return error_response(500, status_message)


def _url_not_found(slug: str | None) -> LambdaResponse:
    logger.info(
        'URL record not found. Responding with 404.',
        extra={'slug': slug, 'event': URL_NOT_FOUND},
    )
    return error_response(404, URL_NOT_FOUND_MESSAGE)


def _invalid_url(full_url: object) -> LambdaResponse:
    logger.info(
        'Invalid URL format in request body. Responding with 400.',
        extra={'fullUrl': full_url, 'event': INVALID_URL_FORMAT},
    )
    return error_response(400, INVALID_URL_FORMAT_MESSAGE)


def create_url(request: ApiRequest, dao: UrlRecordBaseDAO) -> LambdaResponse:
    """POST /urls: store a new slug -> fullUrl mapping

    The slug lookup is a best-effort pre-check (a failing lookup is logged and
    ignored); uniqueness is enforced by the DAO's conditional insert.
    """
    body = request.json()
    slug = body.get('slug')
    full_url = body.get('fullUrl')

    if not slug or not isinstance(slug, str) or not full_url:
        logger.info(
            'Missing "slug" or "fullUrl" in request body. Responding with 400.',
            extra={'event': MISSING_REQUIRED_FIELDS},
        )
        return error_response(400, MISSING_SLUG_OR_FULL_URL_MESSAGE)

    if not is_absolute_url(full_url):
        return _invalid_url(full_url)

    existing = dao.get(slug)
    if isinstance(existing, UrlRecord):
        logger.info('Slug already exists. Responding with 409.', extra={'slug': slug, 'event': SLUG_ALREADY_EXISTS})
        return error_response(409, SLUG_ALREADY_EXISTS_MESSAGE)
    if is_error(existing, StoreErrorKind.STORE_ERROR):
        logger.warning(
            'Failed to check for an existing slug. Attempting creation anyway.',
            extra={'slug': slug, 'event': SLUG_CHECK_FAILED, 'reason': existing.message},
            exc_info=existing.cause,
        )

    timestamp = utc_now_iso()
    record = UrlRecord(slug=slug, full_url=full_url, created_at=timestamp, updated_at=timestamp)

    result = dao.insert(record)
    if is_error(result, StoreErrorKind.CONFLICT):
        logger.info(
            'Slug was created concurrently. Responding with 409.',
            extra={'slug': slug, 'event': SLUG_ALREADY_EXISTS},
        )
        return error_response(409, SLUG_ALREADY_EXISTS_MESSAGE)
    if isinstance(result, StoreError):
        return _store_failure('Error creating URL record. Responding with 500.', result, FAILED_TO_CREATE_MESSAGE, slug=slug)

    logger.info('URL record created. Responding with 201.', extra={'slug': slug, 'event': URL_CREATED})
    return build_response(201, result.to_dict())


def list_urls(request: ApiRequest, dao: UrlRecordBaseDAO) -> LambdaResponse:
    """GET /urls: list every stored record (no pagination, no ordering)"""
    result = dao.scan()
    if isinstance(result, StoreError):
        return _store_failure('Error listing URL records. Responding with 500.', result, FAILED_TO_LIST_MESSAGE)

    items = [record.to_dict() for record in result]
    logger.debug('Listed URL records.', extra={'count': len(items), 'event': URLS_LISTED})
    return build_response(200, {'items': items, 'count': len(items)})


def get_url(request: ApiRequest, dao: UrlRecordBaseDAO) -> LambdaResponse:
    """GET /urls/{slug}: redirect the client to the slug's target URL"""
    if not request.slug:
        return _url_not_found(request.slug)

    result = dao.get(request.slug)
    if is_error(result, StoreErrorKind.NOT_FOUND):
        return _url_not_found(request.slug)
    if isinstance(result, StoreError):
        return _store_failure('Error getting URL record. Responding with 500.', result, FAILED_TO_GET_MESSAGE, slug=request.slug)

    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'slug': request.slug, 'event': REDIRECT_SUCCESS},
    )
    return build_redirect_response(result.full_url)


def update_url(request: ApiRequest, dao: UrlRecordBaseDAO) -> LambdaResponse:
    """PUT /urls/{slug}: point an existing slug at a new target URL"""
    body = request.json()
    full_url = body.get('fullUrl')

    if not full_url:
        logger.info('Missing "fullUrl" in request body. Responding with 400.', extra={'event': MISSING_REQUIRED_FIELDS})
        return error_response(400, MISSING_FULL_URL_MESSAGE)

    if not is_absolute_url(full_url):
        return _invalid_url(full_url)

    if not request.slug:
        return _url_not_found(request.slug)

    result = dao.update(request.slug, full_url, utc_now_iso())
    if is_error(result, StoreErrorKind.CONDITION_FAILED):
        return _url_not_found(request.slug)
    if isinstance(result, StoreError):
        return _store_failure('Error updating URL record. Responding with 500.', result, FAILED_TO_UPDATE_MESSAGE, slug=request.slug)

    logger.info('URL record updated. Responding with 200.', extra={'slug': request.slug, 'event': URL_UPDATED})
    return build_response(200, result.to_dict())


def delete_url(request: ApiRequest, dao: UrlRecordBaseDAO) -> LambdaResponse:
    """DELETE /urls/{slug}: remove an existing slug"""
    if not request.slug:
        return _url_not_found(request.slug)

    result = dao.delete(request.slug)
    if is_error(result, StoreErrorKind.CONDITION_FAILED):
        return _url_not_found(request.slug)
    if isinstance(result, StoreError):
        return _store_failure('Error deleting URL record. Responding with 500.', result, FAILED_TO_DELETE_MESSAGE, slug=request.slug)

    logger.info('URL record deleted. Responding with 200.', extra={'slug': request.slug, 'event': URL_DELETED})
    return build_response(200, {'message': URL_DELETED_MESSAGE})


def preflight(request: ApiRequest, dao: UrlRecordBaseDAO) -> LambdaResponse:
    """OPTIONS on any path: answer the CORS preflight"""
    return build_response(200, {})
