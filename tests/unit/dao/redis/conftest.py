from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def redis_client():
    """Mock a Redis client pointing at redis:6379/0."""
    _redis_client = MagicMock(
        spec=redis.Redis, connection_pool=MagicMock(spec=redis.ConnectionPool, connection_kwargs={'host': 'redis', 'port': 6379, 'db': 0})
    )
    _redis_client.ping.return_value = True
    _redis_client.get.return_value = None
    return _redis_client
