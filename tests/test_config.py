from __future__ import annotations

import pytest

from jsonkv import JSONKVError
from jsonkv.config import StoreConfig


def test_defaults_without_environment() -> None:
    cfg = StoreConfig.from_env({})
    assert cfg == StoreConfig()
    assert (cfg.host, cfg.port, cfg.db) == ("localhost", 6379, 0)
    assert cfg.password is None


def test_environment_overrides() -> None:
    cfg = StoreConfig.from_env(
        {
            "JSONKV_HOST": "cache.internal",
            "JSONKV_PORT": "6380",
            "JSONKV_DB": "2",
            "JSONKV_PASSWORD": "secret",
            "JSONKV_SOCKET_TIMEOUT": "0.5",
        }
    )
    assert cfg == StoreConfig("cache.internal", 6380, 2, "secret", 0.5)


def test_invalid_port_is_reported() -> None:
    with pytest.raises(JSONKVError):
        StoreConfig.from_env({"JSONKV_PORT": "not-a-port"})
