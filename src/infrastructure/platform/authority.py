"""
权限解析 - 基础设施平台层

AstrBot 没有整数权限等级，这里把 AstrBot 管理员身份与群内角色映射为权限等级：
AstrBot 管理员 4，群主 3，群管理员 2，普通成员 1，未知 0。
"""

from typing import Any

from ...shared.constants import (
    AUTHORITY_BY_ROLE,
    AUTHORITY_SUPERUSER,
    DEFAULT_AUTHORITY,
)


def authority_from_role(role: str | None, is_superuser: bool = False) -> int:
    """按群角色计算权限等级。"""
    if is_superuser:
        return AUTHORITY_SUPERUSER
    if not role:
        return DEFAULT_AUTHORITY
    return AUTHORITY_BY_ROLE.get(str(role).lower(), DEFAULT_AUTHORITY)


def get_sender_role(event: Any) -> str | None:
    """
    从消息事件中读取发送者的群角色。

    OneBot 协议的原始事件携带 sender.role（owner/admin/member），
    其他平台没有该字段时返回 None。
    """
    message_obj = getattr(event, "message_obj", None)
    raw = getattr(message_obj, "raw_message", None)
    if not isinstance(raw, dict):
        return None
    sender = raw.get("sender")
    if isinstance(sender, dict):
        return sender.get("role")
    return None


def get_authority_from_event(event: Any) -> int:
    """从消息事件中解析调用者的权限等级。"""
    try:
        is_superuser = bool(event.is_admin())
    except Exception:
        is_superuser = False
    return authority_from_role(get_sender_role(event), is_superuser)
