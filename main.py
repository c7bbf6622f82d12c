"""
Phimg 搜图插件
从 Philomena 系图站（derpibooru 等）按标签随机搜图，
支持按群开关、群自定义标签以及全局标签合并。
"""

from astrbot.api import AstrBotConfig, logger
from astrbot.api.event import AstrMessageEvent, filter
from astrbot.api.message_components import Image, Plain, Video
from astrbot.api.star import Context, Star

from .src.application.commands.image_command import ImageCommandHandler
from .src.application.services.group_config_store import GroupConfigStore
from .src.application.services.image_search_service import ImageSearchService
from .src.domain.services.command_parser import parse_command_text
from .src.domain.value_objects.command import CommandReply, CommandRequest
from .src.infrastructure.config.config_manager import ConfigManager
from .src.infrastructure.image_board.philomena_client import PhilomenaClient
from .src.infrastructure.persistence.kv_group_config_repository import (
    KVGroupConfigRepository,
)
from .src.infrastructure.platform.authority import get_authority_from_event
from .src.shared.constants import COMMAND_ALIASES, COMMAND_NAME, ReplyKind


class PhimgPlugin(Star):
    """Phimg 搜图插件主类"""

    def __init__(self, context: Context, config: AstrBotConfig):
        super().__init__(context)
        self.config = config

        # 1. 基础设施层
        self.config_manager = ConfigManager(config)
        self.system_config = self.config_manager.to_system_config()
        self.group_config_repository = KVGroupConfigRepository(self)
        self.image_board = PhilomenaClient(self.system_config)

        # 2. 应用层
        self.group_config_store = GroupConfigStore(
            self.group_config_repository, self.system_config
        )
        self.search_service = ImageSearchService(self.system_config, self.image_board)
        self.command_handler = ImageCommandHandler(
            self.group_config_store, self.search_service
        )

        logger.info(
            f"Phimg 已加载，图站: {self.system_config.api_url}，"
            f"全局标签: {', '.join(self.system_config.default_tags) or '无'}"
        )

    async def terminate(self):
        """插件被卸载/停用时调用"""
        logger.info("Phimg 搜图插件已停用")

    @filter.command(COMMAND_NAME, alias=COMMAND_ALIASES)
    async def search_image(self, event: AstrMessageEvent):
        """
        从图站搜索图片
        用法: /搜图 [--add <tags>] [--rm <tags>] [--tags] [--on] [--off] [--status] [--onglobal] [--offglobal] [<tags>]
        """
        tags, options = parse_command_text(event.message_str or "")
        request = CommandRequest(
            group_id=self._get_group_id_from_event(event),
            authority=get_authority_from_event(event),
            tags=tags,
            options=options,
        )

        try:
            reply = await self.command_handler.handle(request)
        except Exception as e:
            logger.error(f"搜图命令执行失败: {e}", exc_info=True)
            yield event.plain_result(f"❌ 搜图失败: {str(e)}")
            return

        yield self._render_reply(event, reply)

    def _render_reply(self, event: AstrMessageEvent, reply: CommandReply):
        """把命令回复转换为 AstrBot 消息结果"""
        if reply.kind == ReplyKind.VIDEO:
            return event.chain_result([Video.fromURL(reply.media_url)])
        if reply.kind == ReplyKind.IMAGE:
            chain = [Image.fromURL(reply.media_url)]
            if reply.text:
                chain.append(Plain("\n" + reply.text))
            return event.chain_result(chain)
        return event.plain_result(reply.text)

    def _get_group_id_from_event(self, event: AstrMessageEvent) -> str | None:
        """从消息事件中安全获取群组 ID"""
        try:
            group_id = event.get_group_id()
            return str(group_id) if group_id else None
        except Exception:
            return None
