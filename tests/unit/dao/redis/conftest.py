from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix():
    """Provide a consistent Redis key prefix for testing."""
    return 'testapp:test'


@pytest.fixture
def redis_client():
    """Mock a Redis pipeline-compatible client."""
    _redis_client = MagicMock(spec=redis.client.Pipeline)
    _redis_client.exists.return_value = True
    _redis_client.pipeline.return_value = _redis_client
    _redis_client.__enter__.return_value = _redis_client
    _redis_client.__exit__.return_value = None
    _redis_client.connection_pool = MagicMock()
    _redis_client.connection_pool.connection_kwargs = {'host': '203.0.113.1', 'port': 18000, 'db': 5}
    return _redis_client


@pytest.fixture
def insert_script(redis_client):
    """Mock the registered Lua insert script (defaults to a successful insert)."""
    script = MagicMock(return_value=[0, 'abc123XY'])
    redis_client.register_script.return_value = script
    return script
