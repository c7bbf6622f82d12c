# 基础设施层
from .config import ConfigManager
from .image_board import PhilomenaClient
from .persistence import KVGroupConfigRepository
from .platform import get_authority_from_event

__all__ = [
    # 配置
    "ConfigManager",
    # 图站
    "PhilomenaClient",
    # 持久化
    "KVGroupConfigRepository",
    # 平台
    "get_authority_from_event",
]
