import asyncio
import copy
import os
import sys
import unittest
from unittest.mock import MagicMock

plugin_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../"))
if plugin_root not in sys.path:
    sys.path.insert(0, plugin_root)

# 模拟 AstrBot 宿主环境
sys.modules.setdefault("astrbot", MagicMock())
sys.modules.setdefault("astrbot.api", MagicMock())

from src.application.services.group_config_store import GroupConfigStore  # noqa: E402
from src.domain.value_objects.system_config import SystemConfig  # noqa: E402
from src.infrastructure.persistence.kv_group_config_repository import (  # noqa: E402
    KVGroupConfigRepository,
)


class FakeKVStar:
    """模拟 Star 实例的 KV 存储"""

    def __init__(self):
        self.data = {}

    async def get_kv_data(self, key, default):
        await asyncio.sleep(0)
        return copy.deepcopy(self.data.get(key, default))

    async def put_kv_data(self, key, value):
        await asyncio.sleep(0)
        self.data[key] = copy.deepcopy(value)


class TestGroupConfigStore(unittest.IsolatedAsyncioTestCase):
    def _store(self, **system):
        self.star = FakeKVStar()
        return GroupConfigStore(KVGroupConfigRepository(self.star), SystemConfig(**system))

    async def test_first_access_materializes_defaults(self):
        store = self._store(enabled_by_default=False, use_global_tags_by_default=True)
        config = await store.get("g1")

        self.assertEqual(config.group_id, "g1")
        self.assertFalse(config.enabled)
        self.assertTrue(config.use_global_tags)
        self.assertEqual(config.custom_tags, [])
        self.assertIn("phimg_config_g1", self.star.data)

    async def test_repeated_get_is_idempotent(self):
        store = self._store()
        first = await store.get("g1")
        second = await store.get("g1")
        self.assertEqual(first, second)
        self.assertEqual(self.star.data["phimg_config_seq"], 1)

    async def test_concurrent_first_access_keeps_one_record(self):
        store = self._store()
        results = await asyncio.gather(*(store.get("g1") for _ in range(5)))

        group_keys = [k for k in self.star.data if k.startswith("phimg_config_g")]
        self.assertEqual(group_keys, ["phimg_config_g1"])
        self.assertTrue(all(r.group_id == "g1" for r in results))

    async def test_update_persists(self):
        store = self._store()
        await store.get("g1")
        await store.update("g1", custom_tags=["art"], use_global_tags=False)

        config = await store.get("g1")
        self.assertEqual(config.custom_tags, ["art"])
        self.assertFalse(config.use_global_tags)

    async def test_update_rejects_unknown_fields(self):
        store = self._store()
        await store.get("g1")
        with self.assertRaises(ValueError):
            await store.update("g1", color="red")


if __name__ == "__main__":
    unittest.main()
