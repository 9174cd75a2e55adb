import os
import tempfile
import unittest

from leaderboard_client.adapters import RemoteStoreAdapter
from leaderboard_client.config import ClientSettings
from leaderboard_client.factory import build_controller, build_store
from leaderboard_client.kv import JsonFileKeyValueStore, RedisKeyValueStore


class FactoryTests(unittest.TestCase):
    def test_defaults_to_json_file_store(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "store.json")
            settings = ClientSettings(LEADERBOARD_LOCAL_STORE_PATH=path)
            store = build_store(settings)
            self.assertIsInstance(store, JsonFileKeyValueStore)
            self.assertEqual(store.path, path)

    def test_redis_url_selects_redis_store(self):
        settings = ClientSettings(LEADERBOARD_REDIS_URL="redis://localhost:6379/0")
        self.assertIsInstance(build_store(settings), RedisKeyValueStore)

    def test_controller_uses_configured_remote(self):
        settings = ClientSettings(
            LEADERBOARD_API_URL="http://example.test/api/",
            LEADERBOARD_REQUEST_TIMEOUT=2.5,
            LEADERBOARD_LOCAL_STORE_PATH=os.path.join(tempfile.gettempdir(), "unused.json"),
        )
        controller = build_controller(settings)
        self.assertIsInstance(controller.remote, RemoteStoreAdapter)
        self.assertEqual(controller.remote.base_url, "http://example.test/api")
        self.assertEqual(controller.remote.timeout, 2.5)


if __name__ == "__main__":
    unittest.main()
