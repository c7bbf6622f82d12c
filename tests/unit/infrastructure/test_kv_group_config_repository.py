import copy
import os
import sys
import unittest
from unittest.mock import AsyncMock, MagicMock

plugin_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../"))
if plugin_root not in sys.path:
    sys.path.insert(0, plugin_root)

# 模拟 AstrBot 宿主环境
sys.modules.setdefault("astrbot", MagicMock())
sys.modules.setdefault("astrbot.api", MagicMock())

from src.domain.entities.group_config import GroupConfig  # noqa: E402
from src.domain.exceptions import (  # noqa: E402
    DataNotFoundException,
    DataPersistenceException,
)
from src.infrastructure.persistence.kv_group_config_repository import (  # noqa: E402
    KVGroupConfigRepository,
)


class FakeKVStar:
    """模拟 Star 实例的 KV 存储"""

    def __init__(self):
        self.data = {}

    async def get_kv_data(self, key, default):
        return copy.deepcopy(self.data.get(key, default))

    async def put_kv_data(self, key, value):
        self.data[key] = copy.deepcopy(value)


class TestKVGroupConfigRepository(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.star = FakeKVStar()
        self.repo = KVGroupConfigRepository(self.star)

    async def test_get_missing_returns_none(self):
        self.assertIsNone(await self.repo.get("g1"))

    async def test_create_assigns_sequential_ids(self):
        first = await self.repo.create(GroupConfig(group_id="g1"))
        second = await self.repo.create(GroupConfig(group_id="g2"))
        self.assertEqual(first.id, 1)
        self.assertEqual(second.id, 2)
        self.assertEqual(self.star.data["phimg_config_seq"], 2)
        self.assertEqual(self.star.data["phimg_config_g1"]["group_id"], "g1")

    async def test_create_existing_returns_stored_record(self):
        await self.repo.create(GroupConfig(group_id="g1", enabled=False))
        again = await self.repo.create(GroupConfig(group_id="g1", enabled=True))
        self.assertFalse(again.enabled)
        self.assertEqual(again.id, 1)
        self.assertEqual(self.star.data["phimg_config_seq"], 1)

    async def test_update_merges_fields(self):
        await self.repo.create(GroupConfig(group_id="g1", custom_tags=["art"]))
        updated = await self.repo.update("g1", {"enabled": False})
        self.assertFalse(updated.enabled)
        self.assertEqual(updated.custom_tags, ["art"])
        stored = await self.repo.get("g1")
        self.assertFalse(stored.enabled)
        self.assertEqual(stored.id, 1)

    async def test_update_missing_record_raises(self):
        with self.assertRaises(DataNotFoundException):
            await self.repo.update("nope", {"enabled": True})

    async def test_update_unknown_field_raises(self):
        await self.repo.create(GroupConfig(group_id="g1"))
        with self.assertRaises(ValueError):
            await self.repo.update("g1", {"group_id": "g2"})

    async def test_write_failure_propagates(self):
        await self.repo.create(GroupConfig(group_id="g1"))
        self.star.put_kv_data = AsyncMock(side_effect=RuntimeError("disk full"))
        with self.assertRaises(DataPersistenceException):
            await self.repo.update("g1", {"enabled": False})

    async def test_malformed_record_treated_as_missing(self):
        self.star.data["phimg_config_g1"] = ["garbage"]
        self.assertIsNone(await self.repo.get("g1"))


if __name__ == "__main__":
    unittest.main()
