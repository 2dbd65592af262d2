"""Data Access Object (DAO) implementation for managing short links in Redis

Each LinkRecord is stored as a plain string key without expiry:

    SET [<prefix>:]links:<short key>:url <original url>

Inserting a short key that already exists overwrites the previous URL.

Classes:
    LinkRedisDAO:
        DAO for storing and retrieving LinkRecord in a Redis datastore.

Example:
    >>> from urlshortener.models import LinkRecord
    >>> from urlshortener.dao.redis import LinkRedisDAO

    >>> dao = LinkRedisDAO(prefix='urlshortener:dev')
    >>> dao.insert(LinkRecord(short_key='aZ3kT9', original_url='https://example.com'))
    <LinkRedisDAO>
    >>> dao.get('aZ3kT9').original_url
    'https://example.com'
"""

from beartype import beartype

from urlshortener.models import LinkRecord
from urlshortener.dao.base import LinkBaseDAO
from urlshortener.dao.redis.mixins import RedisClientMixin
from urlshortener.dao.redis.helpers import handle_redis_error
from urlshortener.dao.exceptions import LinkNotFoundError


class LinkRedisDAO(RedisClientMixin, LinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short link mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(record: LinkRecord, **kwargs) -> LinkRedisDAO:
            Store the original URL under the short key.
            Raises DataStoreError on Redis failures.

        get(short_key: str, **kwargs) -> LinkRecord:
            Retrieve the original URL stored under the short key.
            Raises LinkNotFoundError when the short key doesn't exist.
            Raises DataStoreError on Redis failures.
    """

    @handle_redis_error
    @beartype
    def insert(self, record: LinkRecord, **kwargs) -> 'LinkRedisDAO':
        self.redis.set(self.keys.link_url_key(record.short_key), record.original_url)
        return self

    @handle_redis_error
    @beartype
    def get(self, short_key: str, **kwargs) -> LinkRecord:
        original_url = self.redis.get(self.keys.link_url_key(short_key))
        if original_url is None:
            raise LinkNotFoundError(f"Link with short key '{short_key}' not found.")
        if isinstance(original_url, bytes):
            original_url = original_url.decode('utf-8')
        return LinkRecord(short_key=short_key, original_url=original_url)
