"""
配置管理器 - 集中化配置管理

该模块提供访问插件配置（AstrBotConfig）的统一接口，
并负责把原始配置校验为只读的 SystemConfig。
"""

from typing import Any

from ...domain.value_objects.system_config import SystemConfig
from ...shared.constants import DEFAULT_API_URL, DEFAULT_TAGS
from ...utils.logger import logger


class ConfigManager:
    """
    插件的集中配置管理器。

    提供带有默认值和验证的配置值类型化访问。
    """

    def __init__(self, config: dict[str, Any] | None):
        """
        初始化配置管理器。

        Args:
            config: 原始配置字典
        """
        self._config = config or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值。

        Args:
            key: 配置键（支持点号表示法）
            default: 如果键未找到则返回默认值

        Returns:
            配置值或默认值
        """
        value = self._config
        for k in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
            if value is None:
                return default
        return value

    # ========================================================================
    # 图站配置
    # ========================================================================

    def get_api_key(self) -> str:
        """获取 Philomena API 密钥，未配置时为空串。"""
        return str(self.get("api_key", "") or "").strip()

    def get_api_url(self) -> str:
        """获取图站搜索接口地址，去掉末尾的 ? 与 &。"""
        url = str(self.get("api_url", "") or "").strip()
        if not url:
            return DEFAULT_API_URL.rstrip("?&")
        if not url.startswith(("http://", "https://")):
            logger.warning(f"api_url 不是 http(s) 地址，可能无法访问: {url}")
        return url.rstrip("?&")

    def get_default_tags(self) -> list[str]:
        """获取全局标签列表，丢弃非字符串与空白项。"""
        tags = self.get("default_tags", None)
        if tags is None:
            return list(DEFAULT_TAGS)
        if not isinstance(tags, list):
            logger.warning(f"default_tags 应为列表，已忽略: {tags!r}")
            return []

        cleaned = []
        for tag in tags:
            if not isinstance(tag, str):
                logger.warning(f"忽略非字符串的全局标签: {tag!r}")
                continue
            if tag.strip() and tag.strip() not in cleaned:
                cleaned.append(tag.strip())
        return cleaned

    # ========================================================================
    # 群组默认值
    # ========================================================================

    def get_enabled_by_default(self) -> bool:
        """新群默认是否开启搜图。"""
        return bool(self.get("enabled_by_default", True))

    def get_use_global_tags_by_default(self) -> bool:
        """新群默认是否合并全局标签。"""
        return bool(self.get("use_global_tags_by_default", True))

    # ========================================================================
    # 工具方法
    # ========================================================================

    def to_system_config(self) -> SystemConfig:
        """构建只读的系统配置快照。"""
        return SystemConfig(
            api_key=self.get_api_key(),
            api_url=self.get_api_url(),
            default_tags=tuple(self.get_default_tags()),
            enabled_by_default=self.get_enabled_by_default(),
            use_global_tags_by_default=self.get_use_global_tags_by_default(),
        )
