from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.dao.results import StoreError, StoreErrorKind, is_error


__all__ = [
    'UrlRecordBaseDAO',
    'StoreError',
    'StoreErrorKind',
    'is_error',
]
