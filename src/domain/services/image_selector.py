"""
图片选择领域服务 - 领域层
从评分排序的候选列表中等概率随机选取一张，并决定返回哪种尺寸的链接。
"""

import random
from collections.abc import Sequence

from ...shared.constants import MEDIUM_FULL_EXTENSION, VIDEO_EXTENSIONS
from ..value_objects.image_result import ImageCandidate, ImageResult


def is_video_url(url: str | None) -> bool:
    """根据文件扩展名判断链接是否指向视频。"""
    if not url:
        return False
    path = url.split("?", 1)[0].lower()
    return path.endswith(VIDEO_EXTENSIONS)


class ImageSelector:
    """
    图片选择服务

    排序只用于获得相关的候选池，最终选取与评分无关：
    在 [0, len) 范围内等概率取一个下标。
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.SystemRandom()

    def resolve_url(self, candidate: ImageCandidate) -> str:
        """
        按原图的媒体类型选择尺寸：
        原图是 webm 时返回 medium，避免推送过大的视频；否则返回 large。
        """
        reps = candidate.representations
        full = reps.get("full", "")
        name = "medium" if full.endswith(MEDIUM_FULL_EXTENSION) else "large"
        return reps.get(name) or full

    def select(
        self, candidates: Sequence[ImageCandidate], tags: Sequence[str]
    ) -> ImageResult:
        """
        随机选取一张候选图片。

        Args:
            candidates: 非空的候选列表
            tags: 本次查询使用的有效标签

        Returns:
            ImageResult: 选中的图片，tags 为有效标签集合
        """
        if not candidates:
            raise ValueError("候选列表为空")

        index = self._rng.randrange(0, len(candidates))
        selected = candidates[index]
        return ImageResult(
            id=selected.id,
            score=selected.score,
            url=self.resolve_url(selected),
            tags=tuple(tags),
        )
