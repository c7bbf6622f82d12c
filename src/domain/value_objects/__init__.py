# 值对象
from .command import CommandReply, CommandRequest
from .image_result import ImageCandidate, ImageResult
from .search_outcome import SearchOutcome
from .system_config import SystemConfig

__all__ = [
    "CommandRequest",
    "CommandReply",
    "ImageCandidate",
    "ImageResult",
    "SearchOutcome",
    "SystemConfig",
]
