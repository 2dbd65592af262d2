from urlshortener.dao.redis.redis_key_schema import RedisKeySchema
from urlshortener.dao.redis.mixins import RedisClientMixin
from urlshortener.dao.redis.link_redis_dao import LinkRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'LinkRedisDAO',
]
