from urlshortener.dao.base import LinkBaseDAO
from urlshortener.dao.mongo import LinkMongoDAO
from urlshortener.dao.redis import LinkRedisDAO
from urlshortener.dao.factory import create_link_dao


__all__ = [
    'LinkBaseDAO',
    'LinkMongoDAO',
    'LinkRedisDAO',
    'create_link_dao',
]
