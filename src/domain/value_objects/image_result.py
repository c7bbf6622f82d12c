"""
图片值对象 - 图站返回的候选图片与最终选中的结果
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ImageCandidate:
    """
    值对象：图站单条搜索结果

    Attributes:
        id (int): 图片 ID
        score (int): 图站评分
        tags (tuple[str, ...]): 图片自身的标签
        representations (dict[str, str]): 尺寸名 -> 链接，如 full / large / medium
    """

    id: int
    score: int = 0
    tags: tuple[str, ...] = ()
    representations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ImageCandidate":
        return cls(
            id=data.get("id"),
            score=data.get("score", 0),
            tags=tuple(data.get("tags") or ()),
            representations=dict(data.get("representations") or {}),
        )


@dataclass(frozen=True)
class ImageResult:
    """
    值对象：一次搜图最终选中的图片

    tags 为本次查询使用的有效标签集合，而非图片自身的标签。
    """

    id: int
    score: int
    url: str
    tags: tuple[str, ...] = ()
