"""
持久化模块 - 数据存储实现

包含基于 AstrBot KV 存储的群配置仓储。
"""

from .kv_group_config_repository import KVGroupConfigRepository

__all__ = ["KVGroupConfigRepository"]
