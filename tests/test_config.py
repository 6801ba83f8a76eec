import pytest

from redis_status.config import ProbeConfig


def test_defaults():
    config = ProbeConfig(name="cache1", host="localhost", port=6379)
    assert config.password is None
    assert config.memory_threshold is None
    assert config.timeout is None
    assert not config.checks_memory


def test_zero_threshold_is_absent():
    assert not ProbeConfig(name="c", host="h", port=1, memory_threshold=0).checks_memory
    assert ProbeConfig(name="c", host="h", port=1, memory_threshold=10).checks_memory


def test_config_is_frozen():
    config = ProbeConfig(name="cache1", host="localhost", port=6379)
    with pytest.raises(AttributeError):
        config.port = 6380


def test_from_env_defaults():
    config = ProbeConfig.from_env(environ={})
    assert config == ProbeConfig(name="redis", host="localhost", port=6379)


def test_from_env_reads_prefixed_values():
    environ = {
        "REDIS_STATUS_NAME": "pubsub1",
        "REDIS_STATUS_HOST": "redis.internal",
        "REDIS_STATUS_PORT": "6380",
        "REDIS_STATUS_PASSWORD": "s3cret",
        "REDIS_STATUS_MEMORY_THRESHOLD": "10000000",
        "REDIS_STATUS_TIMEOUT": "2.5",
    }
    config = ProbeConfig.from_env(environ=environ)
    assert config.name == "pubsub1"
    assert config.host == "redis.internal"
    assert config.port == 6380
    assert config.password == "s3cret"
    assert config.memory_threshold == 10_000_000
    assert config.timeout == 2.5


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("CACHE_HOST", "cache")
    monkeypatch.setenv("CACHE_PASSWORD", "")
    config = ProbeConfig.from_env(prefix="CACHE_")
    assert config.host == "cache"
    assert config.password is None


def test_from_env_rejects_bad_numbers():
    with pytest.raises(ValueError, match="REDIS_STATUS_PORT"):
        ProbeConfig.from_env(environ={"REDIS_STATUS_PORT": "sixty"})
