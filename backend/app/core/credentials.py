"""Persistence for the user's text-generation API key."""
from __future__ import annotations

from typing import Protocol

import redis


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def ping(self) -> bool: ...


class InMemoryKeyValueStore:
    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def ping(self) -> bool:
        return True


class RedisKeyValueStore:
    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisKeyValueStore":
        return cls(
            redis.Redis.from_url(
                url,
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2,
            )
        )

    def get(self, key: str) -> str | None:
        return self._client.get(key)

    def set(self, key: str, value: str) -> None:
        self._client.set(key, value)

    def ping(self) -> bool:
        return self._client.ping() is True


class CredentialStore:
    """A stored key wins over the configured default; empty keys are never written."""

    def __init__(self, store: KeyValueStore, key: str, default: str | None = None) -> None:
        self.store = store
        self.key = key
        self.default = default

    def get(self) -> str | None:
        return self.store.get(self.key) or self.default or None

    def set(self, value: str) -> None:
        if value:
            self.store.set(self.key, value)

    def is_configured(self) -> bool:
        return bool(self.get())


def build_key_value_store(backend: str, redis_url: str | None = None) -> KeyValueStore:
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "redis":
        if not redis_url:
            raise RuntimeError("REDIS_URL required for the redis credential backend")
        return RedisKeyValueStore.from_url(redis_url)
    raise RuntimeError(f"unsupported credential backend: {backend}")
