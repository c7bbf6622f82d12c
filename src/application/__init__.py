# 应用层 - 编排和用例
from .commands import ImageCommandHandler
from .services import GroupConfigStore, ImageSearchService

__all__ = [
    "GroupConfigStore",
    "ImageCommandHandler",
    "ImageSearchService",
]
