"""Redis mixin providing shared client initialization and connectivity checks.

The client is configured the same way as its MongoDB counterpart: a
location, a timeout in milliseconds, and an optional pre-built client. The
timeout bounds both connecting and every socket read so that an unreachable
Redis fails the startup ping instead of hanging.

Classes:
    - RedisClientMixin: Redis client setup, key schema & healthcheck (see StoreHealthcheckMixin).

Example:
    >>> class LinkRedisDAO(RedisClientMixin, LinkBaseDAO):
    ...     pass
    ...
    >>> dao = LinkRedisDAO(redis_host='cache', redis_timeout_ms=500, prefix='urlshortener:local')
    >>> dao.keys.link_url_key('aZ3kT9')
    'urlshortener:local:links:aZ3kT9:url'
"""

from typing import Optional

import redis

from urlshortener.constants import Defaults
from urlshortener.dao.mixins import StoreHealthcheckMixin
from urlshortener.dao.redis.helpers import _redis_address
from urlshortener.dao.redis.redis_key_schema import RedisKeySchema


class RedisClientMixin(StoreHealthcheckMixin):
    """Redis client setup for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis):
            Client with its own connection pool, shared between request threads.
            Responses are decoded to str.

        keys (RedisKeySchema):
            Namespaced key names for the DAO's records.
    """

    driver_error = redis.exceptions.RedisError

    def __init__(
        self,
        redis_host: Optional[str] = Defaults.REDIS_HOST,
        redis_port: Optional[int] = Defaults.REDIS_PORT,
        redis_db: Optional[int] = Defaults.REDIS_DB,
        redis_timeout_ms: Optional[int] = Defaults.REDIS_TIMEOUT_MS,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        """Connect to Redis, or adopt `redis_client`, then PING it

        Args:
            redis_host, redis_port, redis_db:
                Server location. Ignored when `redis_client` is given.

            redis_timeout_ms (Optional[int]):
                Connect and socket timeout in milliseconds. Defaults to 5000.

            redis_username, redis_password:
                ACL credentials, if the server requires them.

            redis_client (Optional[redis.Redis]):
                Pre-initialized client.

            prefix (Optional[str]):
                Key namespace, e.g. 'urlshortener:prod'.

        Raises:
            DataStoreError: If the PING fails.
        """
        if redis_client is None:
            timeout = int(redis_timeout_ms) / 1000
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                username=redis_username,
                password=redis_password,
                socket_timeout=timeout,
                socket_connect_timeout=timeout,
                decode_responses=True,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _ping(self) -> None:
        self.redis.ping()

    def _store_description(self) -> str:
        return f'Redis at {_redis_address(self.redis)}'
