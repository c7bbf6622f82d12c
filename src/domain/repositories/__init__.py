# 仓储接口
from .group_config_repository import IGroupConfigRepository
from .image_board_repository import IImageBoard

__all__ = [
    "IGroupConfigRepository",
    "IImageBoard",
]
