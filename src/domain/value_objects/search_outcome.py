"""
搜图结果值对象 - 搜图服务返回给命令编排层的类型化结果
"""

from dataclasses import dataclass

from ...shared.constants import SearchErrorKind
from .image_result import ImageResult


@dataclass(frozen=True)
class SearchOutcome:
    """
    值对象：一次搜图的结果或失败类型

    success 时 result 非空；失败时 error 给出类型，message 为原始错误信息。
    """

    result: ImageResult | None = None
    error: SearchErrorKind | None = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.result is not None

    @classmethod
    def found(cls, result: ImageResult) -> "SearchOutcome":
        return cls(result=result)

    @classmethod
    def failed(cls, error: SearchErrorKind, message: str) -> "SearchOutcome":
        return cls(error=error, message=message)
