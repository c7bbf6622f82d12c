"""
群配置 KV 仓储 - 基础设施持久化层

基于 AstrBot 的 put_kv_data/get_kv_data 实现群配置记录的存取。

KV 键设计：
- 群配置: phimg_config_{group_id}
  值: GroupConfig.to_dict()
- 编号序列: phimg_config_seq
  值: int (最后分配的编号)
"""

from typing import Any

from ...domain.entities.group_config import GroupConfig
from ...domain.exceptions import DataNotFoundException, DataPersistenceException
from ...domain.repositories.group_config_repository import IGroupConfigRepository
from ...shared.constants import GROUP_CONFIG_KEY_PREFIX, GROUP_CONFIG_SEQ_KEY
from ...utils.logger import logger


class KVGroupConfigRepository(IGroupConfigRepository):
    """
    群配置持久化仓储

    每个群一条记录，以 group_id 作为 KV 键的一部分，天然保证唯一；
    并发首次创建时后写入者覆盖先写入者，不会出现重复记录。
    """

    def __init__(self, star_instance: Any):
        """
        初始化群配置仓储。

        Args:
            star_instance: Star 插件实例，用于访问底层 KV 存储引擎
        """
        self.plugin = star_instance

    def _config_key(self, group_id: str) -> str:
        return f"{GROUP_CONFIG_KEY_PREFIX}_{group_id}"

    async def _next_id(self) -> int:
        current = await self.plugin.get_kv_data(GROUP_CONFIG_SEQ_KEY, 0)
        next_id = (current if isinstance(current, int) else 0) + 1
        await self.plugin.put_kv_data(GROUP_CONFIG_SEQ_KEY, next_id)
        return next_id

    async def _put(self, config: GroupConfig) -> None:
        key = self._config_key(config.group_id)
        try:
            await self.plugin.put_kv_data(key, config.to_dict())
        except Exception as e:
            logger.error(f"保存群配置失败 (Key: {key}): {e}", exc_info=True)
            raise DataPersistenceException(f"保存群 {config.group_id} 的配置失败: {e}") from e

    async def get(self, group_id: str) -> GroupConfig | None:
        key = self._config_key(group_id)
        data = await self.plugin.get_kv_data(key, None)
        if data is None:
            return None
        if not isinstance(data, dict) or "group_id" not in data:
            logger.warning(f"群配置数据格式异常，将按未配置处理 (Key: {key}): {type(data)}")
            return None
        return GroupConfig.from_dict(data)

    async def create(self, config: GroupConfig) -> GroupConfig:
        existing = await self.get(config.group_id)
        if existing is not None:
            return existing

        try:
            record_id = await self._next_id()
        except Exception as e:
            raise DataPersistenceException(f"分配群配置编号失败: {e}") from e

        created = GroupConfig(
            group_id=config.group_id,
            enabled=config.enabled,
            use_global_tags=config.use_global_tags,
            custom_tags=list(config.custom_tags),
            id=record_id,
        )
        await self._put(created)
        logger.info(f"已为群 {config.group_id} 创建默认搜图配置 (id={record_id})")
        return created

    async def update(self, group_id: str, fields: dict[str, Any]) -> GroupConfig:
        current = await self.get(group_id)
        if current is None:
            raise DataNotFoundException(entity_type="群配置", entity_id=group_id)

        updated = current.with_changes(**fields)
        await self._put(updated)
        logger.debug(f"已更新群 {group_id} 的配置字段: {', '.join(fields)}")
        return updated
