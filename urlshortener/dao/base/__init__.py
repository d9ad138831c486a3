from urlshortener.dao.base.url_record_base_dao import UrlRecordBaseDAO


__all__ = [
    'UrlRecordBaseDAO',
]
