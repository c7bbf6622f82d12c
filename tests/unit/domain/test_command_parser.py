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

from src.domain.services.command_parser import (  # noqa: E402
    parse_command_text,
    strip_command_word,
)


class TestCommandParser(unittest.TestCase):
    def test_free_text_tags(self):
        self.assertEqual(parse_command_text("搜图 anime,safe"), ("anime,safe", {}))

    def test_command_word_with_slash_and_alias(self):
        self.assertEqual(strip_command_word("/phimg cute"), "cute")
        self.assertEqual(strip_command_word("搜图"), "")

    def test_bare_command(self):
        self.assertEqual(parse_command_text("搜图"), ("", {}))

    def test_flag_options(self):
        tags, options = parse_command_text("搜图 --on --status")
        self.assertEqual(tags, "")
        self.assertEqual(options, {"on": True, "status": True})

    def test_value_option_reads_until_next_option(self):
        tags, options = parse_command_text("搜图 --add cute, twilight sparkle --tags")
        self.assertEqual(options, {"add": "cute, twilight sparkle", "tags": True})
        self.assertEqual(tags, "")

    def test_value_option_with_equals(self):
        _, options = parse_command_text("搜图 --rm=cute,pony")
        self.assertEqual(options, {"rm": "cute,pony"})

    def test_value_option_without_value(self):
        _, options = parse_command_text("搜图 --add")
        self.assertEqual(options, {"add": ""})

    def test_unknown_option_is_free_text(self):
        tags, options = parse_command_text("搜图 --foo cute")
        self.assertEqual(tags, "--foo cute")
        self.assertEqual(options, {})

    def test_tags_before_flag(self):
        tags, options = parse_command_text("搜图 cute, solo --offglobal")
        self.assertEqual(tags, "cute, solo")
        self.assertEqual(options, {"offglobal": True})


if __name__ == "__main__":
    unittest.main()
