"""
共享模块 - 通用常量
"""

from .constants import ReplyKind, SearchErrorKind

__all__ = [
    "ReplyKind",
    "SearchErrorKind",
]
