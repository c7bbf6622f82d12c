"""
标签组合领域服务 - 领域层
负责解析用户输入的标签并组合出本次查询的有效标签集合，不涉及任何 I/O。
"""

from collections.abc import Iterable

from ..entities.group_config import GroupConfig
from ..value_objects.system_config import SystemConfig


def parse_tag_list(raw: str | None) -> list[str]:
    """按逗号切分标签文本，去除首尾空白并丢弃空串。"""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def unique_tags(*sources: Iterable[str]) -> list[str]:
    """按首次出现的顺序合并多个标签序列，区分大小写精确去重。"""
    seen = set()
    merged = []
    for source in sources:
        for tag in source:
            if tag not in seen:
                seen.add(tag)
                merged.append(tag)
    return merged


def compose_effective_tags(
    group_config: GroupConfig, system_config: SystemConfig, raw_user_tags: str | None
) -> list[str]:
    """
    组合有效标签集合。

    顺序为：全局标签（仅当本群启用全局标签）、本群标签、用户标签。

    Args:
        group_config: 群配置
        system_config: 系统配置
        raw_user_tags: 用户输入的原始标签文本，可为空

    Returns:
        list[str]: 去重后的有效标签
    """
    global_tags = system_config.default_tags if group_config.use_global_tags else ()
    return unique_tags(
        global_tags, group_config.custom_tags, parse_tag_list(raw_user_tags)
    )


def merge_tags(current: Iterable[str], added: Iterable[str]) -> list[str]:
    return unique_tags(current, added)


def remove_tags(current: Iterable[str], removed: Iterable[str]) -> list[str]:
    removed = set(removed)
    return [tag for tag in current if tag not in removed]
