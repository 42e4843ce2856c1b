from typing import cast

import pytest

from shortlinks.types import LambdaContext, LambdaConfiguration


@pytest.fixture(autouse=True)
def _deployed_env(monkeypatch):
    """Run handlers as deployed so unexpected errors turn into 500 responses."""
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    monkeypatch.delenv('APP_NAME', raising=False)


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'shortlinks'})


@pytest.fixture
def config() -> LambdaConfiguration:
    return cast(LambdaConfiguration, {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}})
