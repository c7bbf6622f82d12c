"""
面向用户的回复文本
"""

from ...shared.constants import EMPTY_TAGS_TEXT

HELP_MESSAGE = """用法: 搜图 [--add <tags>] [--rm <tags>] [--tags] [--on] [--off] [--status] [--onglobal] [--offglobal] [<tags>]
选项:
  --add <tags>      添加标签，多个标签用逗号分隔
  --rm <tags>       删除标签，多个标签用逗号分隔
  --tags            查看当前标签列表
  --on              开启搜图功能
  --off             关闭搜图功能
  --onglobal        启用全局标签
  --offglobal       禁用全局标签
  --status          查看当前设置
—————
Powered by
Phimg for AstrBot"""

GROUP_ONLY = "搜图功能仅限群聊使用"
DENIED_TOGGLE = "只有管理员可以修改搜图设置"
DENIED_GLOBAL = "只有管理员可以修改全局标签设置"
DENIED_TAGS = "只有管理员可以管理标签"
NO_RESULTS = "未找到匹配的图片"


def format_tags(tags) -> str:
    return ", ".join(tags) or EMPTY_TAGS_TEXT


def status_message(enabled: bool, custom_tags, use_global_tags: bool) -> str:
    return (
        "当前群聊搜图功能状态：\n"
        f"启用: {'是' if enabled else '否'}\n"
        f"自定义标签: {format_tags(custom_tags)}\n"
        f"全局标签: {'启用' if use_global_tags else '禁用'}"
    )


def toggle_message(enabled: bool) -> str:
    return f"搜图功能已在本群{'开启' if enabled else '关闭'}"


def global_toggle_message(use_global_tags: bool) -> str:
    return f"全局标签已{'启用' if use_global_tags else '禁用'}"


def tags_added_message(tags) -> str:
    return f"添加成功，本群标签现为: {format_tags(tags)}"


def tags_removed_message(tags) -> str:
    return f"删除成功，本群标签现为: {format_tags(tags)}"


def tag_list_message(tags) -> str:
    return f"当前群聊内置标签: {format_tags(tags)}"


def image_info_message(image_id, score, tags) -> str:
    return f"id: {image_id}\nscore: {score}\ntags: {', '.join(tags)}"
