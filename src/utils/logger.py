import logging
from typing import Any

from astrbot.api import logger as astrbot_logger


class PluginLoggerAdapter(logging.LoggerAdapter):
    """
    日志适配器：为本插件的所有日志添加 `[Phimg]` 前缀，
    便于在 AstrBot 的混合日志流中区分搜图插件的输出。
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        return f"[Phimg] {msg}", kwargs


logger = PluginLoggerAdapter(astrbot_logger, {})
