"""
系统配置值对象 - 进程级只读设置
"""

from dataclasses import dataclass, field

from ...shared.constants import DEFAULT_API_URL


@dataclass(frozen=True)
class SystemConfig:
    """
    值对象：插件全局配置

    启动时从插件配置加载一次，显式注入 GroupConfigStore 与搜图服务。

    Attributes:
        api_key (str): Philomena API 密钥，为空时不附带
        api_url (str): 图站搜索接口地址
        default_tags (tuple[str, ...]): 全局标签
        enabled_by_default (bool): 新群默认是否开启搜图
        use_global_tags_by_default (bool): 新群默认是否合并全局标签
    """

    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    default_tags: tuple[str, ...] = field(default=("safe",))
    enabled_by_default: bool = True
    use_global_tags_by_default: bool = True
