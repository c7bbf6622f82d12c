"""
命令值对象 - 与宿主框架无关的命令请求与回复
"""

from dataclasses import dataclass, field

from ...shared.constants import DEFAULT_AUTHORITY, ReplyKind


@dataclass(frozen=True)
class CommandRequest:
    """
    值对象：一次搜图命令调用

    Attributes:
        group_id (str, optional): 群组 ID，私聊时为 None
        authority (int): 调用者权限等级
        tags (str): 自由文本标签参数
        options (dict[str, str | bool]): 已识别的选项
    """

    group_id: str | None = None
    authority: int = DEFAULT_AUTHORITY
    tags: str = ""
    options: dict[str, str | bool] = field(default_factory=dict)

    def option(self, name: str) -> str | bool:
        """读取选项值，未提供时返回 False。"""
        return self.options.get(name) or False


@dataclass(frozen=True)
class CommandReply:
    """值对象：命令回复，由插件入口渲染为 AstrBot 消息链"""

    kind: ReplyKind = ReplyKind.TEXT
    text: str = ""
    media_url: str | None = None

    @classmethod
    def plain(cls, text: str) -> "CommandReply":
        return cls(kind=ReplyKind.TEXT, text=text)

    @classmethod
    def image(cls, url: str, text: str = "") -> "CommandReply":
        return cls(kind=ReplyKind.IMAGE, text=text, media_url=url)

    @classmethod
    def video(cls, url: str) -> "CommandReply":
        return cls(kind=ReplyKind.VIDEO, media_url=url)
