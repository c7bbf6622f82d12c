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

from src.application.services.image_search_service import ImageSearchService  # noqa: E402
from src.domain.entities.group_config import GroupConfig  # noqa: E402
from src.domain.exceptions import BoardRequestException, NoResultsException  # noqa: E402
from src.domain.value_objects.image_result import ImageCandidate  # noqa: E402
from src.domain.value_objects.system_config import SystemConfig  # noqa: E402
from src.shared.constants import SearchErrorKind  # noqa: E402


class TestImageSearchService(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.board = MagicMock()
        self.board.search = AsyncMock()
        self.service = ImageSearchService(SystemConfig(default_tags=("safe",)), self.board)
        self.group = GroupConfig(group_id="g1", custom_tags=["art"])

    async def test_success_returns_selected_image(self):
        self.board.search.return_value = [
            ImageCandidate(
                id=9,
                score=42,
                representations={"full": "f.png", "large": "l.png", "medium": "m.png"},
            )
        ]

        outcome = await self.service.search(self.group, "cute, art")

        self.board.search.assert_awaited_once_with(["safe", "art", "cute"])
        self.assertTrue(outcome.success)
        self.assertEqual(outcome.result.url, "l.png")
        self.assertEqual(outcome.result.tags, ("safe", "art", "cute"))
        self.assertIsNone(outcome.error)

    async def test_no_results_is_typed_outcome(self):
        self.board.search.side_effect = NoResultsException()
        outcome = await self.service.search(self.group, "cute")

        self.assertFalse(outcome.success)
        self.assertEqual(outcome.error, SearchErrorKind.NO_RESULTS)
        self.assertEqual(outcome.message, "未找到匹配的图片")

    async def test_transport_failure_keeps_message(self):
        self.board.search.side_effect = BoardRequestException("Search query is invalid", 400)
        outcome = await self.service.search(self.group, "cute")

        self.assertEqual(outcome.error, SearchErrorKind.TRANSPORT)
        self.assertEqual(outcome.message, "Search query is invalid")
        self.assertIsNone(outcome.result)

    async def test_unexpected_errors_propagate(self):
        self.board.search.side_effect = RuntimeError("boom")
        with self.assertRaises(RuntimeError):
            await self.service.search(self.group, "cute")


if __name__ == "__main__":
    unittest.main()
