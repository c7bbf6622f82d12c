"""
命令解析领域服务 - 领域层
把原始消息文本拆分为选项与自由文本标签。
"""

from ...shared.constants import COMMAND_ALIASES, COMMAND_NAME, FLAG_OPTIONS, VALUE_OPTIONS

KNOWN_OPTIONS = VALUE_OPTIONS + FLAG_OPTIONS


def _option_name(token: str) -> str | None:
    if not token.startswith("--"):
        return None
    name = token[2:].split("=", 1)[0]
    return name if name in KNOWN_OPTIONS else None


def strip_command_word(text: str, names: set[str] | None = None) -> str:
    """去掉开头的命令词（允许 / 前缀），返回剩余的参数文本。"""
    names = names or ({COMMAND_NAME} | COMMAND_ALIASES)
    stripped = text.strip()
    head, _, rest = stripped.partition(" ")
    if head.lstrip("/") in names:
        return rest.strip()
    return stripped


def parse_command_text(text: str) -> tuple[str, dict[str, str | bool]]:
    """
    解析命令参数。

    --add / --rm 读取其后直到下一个已知选项的全部内容（也支持 --add=值），
    开关选项记为 True，其余内容按原样拼接为自由文本标签。
    未知的 --xxx 视为自由文本。

    Args:
        text: 原始消息文本，可包含命令词

    Returns:
        tuple[str, dict[str, str | bool]]: (自由文本标签, 选项)
    """
    tokens = strip_command_word(text).split()
    options: dict[str, str | bool] = {}
    free_text: list[str] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        name = _option_name(token)
        i += 1

        if name is None:
            free_text.append(token)
            continue

        if name in FLAG_OPTIONS:
            options[name] = True
            continue

        value_parts = []
        if "=" in token:
            value_parts.append(token.split("=", 1)[1])
        while i < len(tokens) and _option_name(tokens[i]) is None:
            value_parts.append(tokens[i])
            i += 1
        options[name] = " ".join(part for part in value_parts if part)

    return " ".join(free_text), options
