"""Application configuration objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from jsonkv.config import StoreConfig


@dataclass(frozen=True)
class AppConfig:
    """Immutable container for application configuration."""

    store: StoreConfig = field(default_factory=StoreConfig.from_env)
    title: str = "JSON document gateway"


config = AppConfig()

# Simple name used by the rest of the application.
STORE_CONFIG: StoreConfig = config.store
