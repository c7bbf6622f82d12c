"""
群配置实体 - 每个群聊一条搜图设置
"""

from dataclasses import dataclass, field, replace
from typing import Any

MUTABLE_FIELDS = ("enabled", "use_global_tags", "custom_tags")


@dataclass
class GroupConfig:
    """
    实体：群聊搜图配置

    以 group_id 作为唯一标识，首次访问时由系统默认值生成，
    之后只能通过管理员操作修改，不会被删除。

    Attributes:
        group_id (str): 群组唯一 ID
        enabled (bool): 是否允许在本群搜图
        use_global_tags (bool): 是否合并全局标签
        custom_tags (list[str]): 管理员维护的本群标签，保持添加顺序
        id (int, optional): 存储层自动分配的数字编号
    """

    group_id: str
    enabled: bool = True
    use_global_tags: bool = True
    custom_tags: list[str] = field(default_factory=list)
    id: int | None = None

    def with_changes(self, **changes: Any) -> "GroupConfig":
        """返回合并了给定字段的新实例，未知字段抛出 ValueError。"""
        unknown = set(changes) - set(MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"不可修改的群配置字段: {', '.join(sorted(unknown))}")
        if "custom_tags" in changes:
            changes["custom_tags"] = list(changes["custom_tags"])
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "group_id": self.group_id,
            "enabled": self.enabled,
            "use_global_tags": self.use_global_tags,
            "custom_tags": list(self.custom_tags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GroupConfig":
        tags = data.get("custom_tags") or []
        return cls(
            group_id=str(data["group_id"]),
            enabled=bool(data.get("enabled", True)),
            use_global_tags=bool(data.get("use_global_tags", True)),
            custom_tags=[str(t) for t in tags],
            id=data.get("id"),
        )
