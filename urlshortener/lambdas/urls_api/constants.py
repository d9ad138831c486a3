# Client-facing messages
MISSING_SLUG_OR_FULL_URL_MESSAGE = 'Missing required fields: slug and fullUrl'
MISSING_FULL_URL_MESSAGE = 'Missing required field: fullUrl'
INVALID_URL_FORMAT_MESSAGE = 'Invalid URL format'
SLUG_ALREADY_EXISTS_MESSAGE = 'Slug already exists'
URL_NOT_FOUND_MESSAGE = 'URL not found'
ROUTE_NOT_FOUND_MESSAGE = 'Route not found'
URL_DELETED_MESSAGE = 'URL deleted successfully'
FAILED_TO_CREATE_MESSAGE = 'Failed to create URL'
FAILED_TO_LIST_MESSAGE = 'Failed to list URLs'
FAILED_TO_GET_MESSAGE = 'Failed to get URL'
FAILED_TO_UPDATE_MESSAGE = 'Failed to update URL'
FAILED_TO_DELETE_MESSAGE = 'Failed to delete URL'

# Log event codes
MISSING_REQUIRED_FIELDS = 'MISSING_REQUIRED_FIELDS'
INVALID_URL_FORMAT = 'INVALID_URL_FORMAT'
SLUG_ALREADY_EXISTS = 'SLUG_ALREADY_EXISTS'
SLUG_CHECK_FAILED = 'SLUG_CHECK_FAILED'
URL_CREATED = 'URL_CREATED'
URLS_LISTED = 'URLS_LISTED'
URL_NOT_FOUND = 'URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
URL_UPDATED = 'URL_UPDATED'
URL_DELETED = 'URL_DELETED'
ROUTE_NOT_FOUND = 'ROUTE_NOT_FOUND'
STORE_FAILURE = 'STORE_FAILURE'
