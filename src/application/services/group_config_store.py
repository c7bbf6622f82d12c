"""
群配置存储 - 应用层
在仓储之上实现"读取或按默认值创建"的群配置访问策略。
"""

from typing import Any

from ...domain.entities.group_config import GroupConfig
from ...domain.repositories.group_config_repository import IGroupConfigRepository
from ...domain.value_objects.system_config import SystemConfig
from ...utils.logger import logger


class GroupConfigStore:
    """
    群配置存储

    未配置过的群在首次读取时以系统默认值生成并持久化；
    修改只能通过 update 合并字段，不提供删除。
    """

    def __init__(self, repository: IGroupConfigRepository, system_config: SystemConfig):
        self.repository = repository
        self.system_config = system_config

    def default_config(self, group_id: str) -> GroupConfig:
        """按系统默认值生成一份新的群配置（未持久化）。"""
        return GroupConfig(
            group_id=group_id,
            enabled=self.system_config.enabled_by_default,
            use_global_tags=self.system_config.use_global_tags_by_default,
            custom_tags=[],
        )

    async def get(self, group_id: str) -> GroupConfig:
        """
        获取群配置，不存在时创建默认配置。

        Args:
            group_id: 群组 ID

        Returns:
            GroupConfig: 已存储或新建的群配置
        """
        existing = await self.repository.get(group_id)
        if existing is not None:
            return existing
        return await self.repository.create(self.default_config(group_id))

    async def update(self, group_id: str, **fields: Any) -> GroupConfig:
        """
        合并给定字段到群配置。

        Raises:
            ValueError: 包含不可修改的字段
            DataNotFoundException: 群配置不存在
            DataPersistenceException: 写入失败
        """
        updated = await self.repository.update(group_id, fields)
        logger.info(f"群 {group_id} 的搜图配置已更新: {fields}")
        return updated
