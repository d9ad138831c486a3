"""Process-lifetime construction of the URL record DAO.

The Lambda runtime reuses a process across invocations, so the DAO (and its
boto3 resource) is built once, on first use, and shared by every later
invocation in the same process.

Functions:
    build_url_record_dao() -> UrlRecordBaseDAO
        Build a new DAO for the table named by `TABLE_NAME`.
    url_record_dao() -> UrlRecordBaseDAO
        Return the process-wide DAO, building it on first call.
"""

import functools
import logging

from urlshortener.dao.base import UrlRecordBaseDAO
from urlshortener.dao.dynamodb import UrlRecordDynamoDBDAO


logger = logging.getLogger(__name__)


def build_url_record_dao() -> UrlRecordBaseDAO:
    """Build a DynamoDB DAO for the table named by `TABLE_NAME`

    Raises:
        MissingEnvironmentVariableError:
            If `TABLE_NAME` is not set.
    """
    dao = UrlRecordDynamoDBDAO()
    logger.debug('Built URL record DAO.', extra={'table': dao.table_name})
    return dao


@functools.cache
def url_record_dao() -> UrlRecordBaseDAO:
    return build_url_record_dao()
