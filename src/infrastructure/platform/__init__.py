# 平台相关
from .authority import authority_from_role, get_authority_from_event

__all__ = ["authority_from_role", "get_authority_from_event"]
