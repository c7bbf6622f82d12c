"""
群配置仓储接口 - 领域层
定义群配置记录存取的抽象契约
"""

from abc import ABC, abstractmethod
from typing import Any

from ..entities.group_config import GroupConfig


class IGroupConfigRepository(ABC):
    """
    群配置仓储接口

    仓储只负责按 group_id 存取记录，不负责默认值策略。
    """

    @abstractmethod
    async def get(self, group_id: str) -> GroupConfig | None:
        """按群组 ID 获取记录，不存在时返回 None"""
        pass

    @abstractmethod
    async def create(self, config: GroupConfig) -> GroupConfig:
        """创建记录并分配编号；记录已存在时返回已存在的记录"""
        pass

    @abstractmethod
    async def update(self, group_id: str, fields: dict[str, Any]) -> GroupConfig:
        """将给定字段合并进已存在的记录，失败时抛出异常"""
        pass
