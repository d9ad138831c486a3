from urlshortener.utils.config import table_name, localstack_endpoint
from urlshortener.utils.helpers import utc_now_iso, is_absolute_url, require_environment, guarantee_500_response
from urlshortener.utils.responses import build_response, build_redirect_response, error_response
from urlshortener.utils.logging import initialize_logging


__all__ = [
    'table_name',
    'localstack_endpoint',
    'utc_now_iso',
    'is_absolute_url',
    'require_environment',
    'guarantee_500_response',
    'build_response',
    'build_redirect_response',
    'error_response',
    'initialize_logging',
]
