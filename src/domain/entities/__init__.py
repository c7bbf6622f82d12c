"""
领域实体

- GroupConfig: 群聊搜图配置
"""

from .group_config import GroupConfig

__all__ = ["GroupConfig"]
