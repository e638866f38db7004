import unittest
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[2]
sys.path.append(str(ROOT_DIR))

from backend.app.core.credentials import (  # noqa: E402
    CredentialStore,
    InMemoryKeyValueStore,
    RedisKeyValueStore,
    build_key_value_store,
)


class FakeRedis:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def ping(self) -> bool:
        return True


class CredentialStoreTest(unittest.TestCase):
    def test_default_is_used_until_a_key_is_stored(self) -> None:
        credentials = CredentialStore(InMemoryKeyValueStore(), key="xai_api_key", default="from-env")
        self.assertEqual(credentials.get(), "from-env")

        credentials.set("from-user")
        self.assertEqual(credentials.get(), "from-user")

    def test_empty_value_is_not_persisted(self) -> None:
        store = InMemoryKeyValueStore()
        credentials = CredentialStore(store, key="xai_api_key")
        credentials.set("")
        self.assertIsNone(store.get("xai_api_key"))
        self.assertFalse(credentials.is_configured())

    def test_no_default_and_nothing_stored(self) -> None:
        credentials = CredentialStore(InMemoryKeyValueStore(), key="xai_api_key", default="")
        self.assertIsNone(credentials.get())

    def test_redis_backend_uses_fixed_key(self) -> None:
        client = FakeRedis()
        credentials = CredentialStore(RedisKeyValueStore(client), key="xai_api_key")
        credentials.set("abc")
        self.assertEqual(client.values, {"xai_api_key": "abc"})
        self.assertTrue(credentials.is_configured())
        self.assertTrue(credentials.store.ping())


class BuildKeyValueStoreTest(unittest.TestCase):
    def test_memory_backend(self) -> None:
        self.assertIsInstance(build_key_value_store("memory"), InMemoryKeyValueStore)

    def test_redis_backend_requires_url(self) -> None:
        with self.assertRaises(RuntimeError):
            build_key_value_store("redis")

    def test_redis_backend_from_url(self) -> None:
        self.assertIsInstance(build_key_value_store("redis", "redis://localhost:6379/0"), RedisKeyValueStore)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(RuntimeError):
            build_key_value_store("sqlite")


if __name__ == "__main__":
    unittest.main()
