"""
图站接口 - 领域层
定义按标签检索图片的抽象契约
"""

from abc import ABC, abstractmethod

from ..value_objects.image_result import ImageCandidate


class IImageBoard(ABC):
    """
    图站查询接口
    """

    @abstractmethod
    async def search(self, tags: list[str]) -> list[ImageCandidate]:
        """
        按标签检索图片，按评分降序返回候选列表。

        Raises:
            NoResultsException: 没有匹配结果
            BoardRequestException: 超时、网络错误或其他错误响应
        """
        pass
