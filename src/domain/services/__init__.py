"""
领域服务 - 搜图业务逻辑

- tag_composer: 标签解析与有效标签组合
- image_selector: 候选图片随机选取与尺寸决策
- command_parser: 命令文本解析
"""

from .command_parser import parse_command_text
from .image_selector import ImageSelector, is_video_url
from .tag_composer import (
    compose_effective_tags,
    merge_tags,
    parse_tag_list,
    remove_tags,
)

__all__ = [
    "ImageSelector",
    "is_video_url",
    "compose_effective_tags",
    "merge_tags",
    "parse_tag_list",
    "remove_tags",
    "parse_command_text",
]
