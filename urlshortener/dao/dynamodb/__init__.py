from urlshortener.dao.dynamodb.mixins import DynamoDBTableMixin
from urlshortener.dao.dynamodb.url_record_dynamodb_dao import UrlRecordDynamoDBDAO


__all__ = [
    'DynamoDBTableMixin',
    'UrlRecordDynamoDBDAO',
]
