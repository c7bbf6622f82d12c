"""
常量 - 插件中使用的共享常量
"""

from enum import Enum


class ReplyKind(str, Enum):
    """命令回复类型"""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"


class SearchErrorKind(str, Enum):
    """搜图失败类型"""

    NO_RESULTS = "no_results"
    TRANSPORT = "transport"


# 命令
COMMAND_NAME = "搜图"
COMMAND_ALIASES = {"phimg"}

# 值选项（携带标签文本）与开关选项
VALUE_OPTIONS = ("add", "rm")
FLAG_OPTIONS = ("tags", "on", "off", "onglobal", "offglobal", "status")

# 权限：所有管理操作要求的最低权限等级
ADMIN_AUTHORITY = 2
DEFAULT_AUTHORITY = 0

AUTHORITY_SUPERUSER = 4
AUTHORITY_BY_ROLE = {
    "owner": 3,
    "admin": 2,
    "member": 1,
}

# 图站查询
DEFAULT_API_URL = "https://derpibooru.org/api/v1/json/search/images?"
DEFAULT_TAGS = ["safe"]
SORT_FIELD = "score"
SORT_DIRECTION = "desc"
PER_PAGE = 50
REQUEST_TIMEOUT_SECONDS = 30
USER_AGENT = "Phimg for AstrBot"

# 媒体
VIDEO_EXTENSIONS = (".webm", ".mp4")
# 原图为该格式时改用 medium 尺寸
MEDIUM_FULL_EXTENSION = ".webm"

# KV 存储键
GROUP_CONFIG_KEY_PREFIX = "phimg_config"
GROUP_CONFIG_SEQ_KEY = "phimg_config_seq"

EMPTY_TAGS_TEXT = "无"
