"""
搜图命令编排 - 应用层

一次命令调用按固定优先级依次检查路由（守卫 -> 动作），第一个命中的路由给出回复。
本层是唯一把领域异常与搜图结果转换为用户可见文本的地方。
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ...domain.entities.group_config import GroupConfig
from ...domain.exceptions import (
    CommandException,
    GroupNotEnabledException,
    InvalidContextException,
    PermissionDeniedException,
)
from ...domain.services.image_selector import is_video_url
from ...domain.services.tag_composer import merge_tags, parse_tag_list, remove_tags
from ...domain.value_objects.command import CommandReply, CommandRequest
from ...shared.constants import ADMIN_AUTHORITY, SearchErrorKind
from ...utils.logger import logger
from ..services.group_config_store import GroupConfigStore
from ..services.image_search_service import ImageSearchService
from . import messages

Guard = Callable[[CommandRequest, GroupConfig | None], bool]
Action = Callable[[CommandRequest, GroupConfig | None], Awaitable[CommandReply]]


@dataclass(frozen=True)
class CommandRoute:
    """路由：守卫为真时执行动作"""

    name: str
    guard: Guard
    action: Action


def require_authority(request: CommandRequest, message: str) -> None:
    if request.authority < ADMIN_AUTHORITY:
        raise PermissionDeniedException(message, ADMIN_AUTHORITY)


class ImageCommandHandler:
    """
    搜图命令处理器

    路由顺序（先命中者生效）：
    group_only -> help -> status -> toggle -> not_enabled -> global_toggle
    -> manage_tags -> list_tags -> help_no_tags -> search
    """

    def __init__(self, config_store: GroupConfigStore, search_service: ImageSearchService):
        self.config_store = config_store
        self.search_service = search_service
        self.routes: list[CommandRoute] = [
            CommandRoute("group_only", lambda req, cfg: not req.group_id, self._reject_context),
            CommandRoute(
                "help", lambda req, cfg: not req.tags and not req.options, self._help
            ),
            CommandRoute("status", lambda req, cfg: bool(req.option("status")), self._status),
            CommandRoute(
                "toggle",
                lambda req, cfg: bool(req.option("on") or req.option("off")),
                self._toggle,
            ),
            CommandRoute("not_enabled", lambda req, cfg: not cfg.enabled, self._reject_disabled),
            CommandRoute(
                "global_toggle",
                lambda req, cfg: bool(req.option("onglobal") or req.option("offglobal")),
                self._toggle_global,
            ),
            CommandRoute(
                "manage_tags",
                lambda req, cfg: bool(req.option("add") or req.option("rm")),
                self._manage_tags,
            ),
            CommandRoute("list_tags", lambda req, cfg: bool(req.option("tags")), self._list_tags),
            CommandRoute("help_no_tags", lambda req, cfg: not req.tags, self._help),
            CommandRoute("search", lambda req, cfg: True, self._search),
        ]

    def match(self, request: CommandRequest, config: GroupConfig | None) -> CommandRoute:
        """返回第一个守卫为真的路由。"""
        for route in self.routes:
            if route.guard(request, config):
                return route
        raise LookupError("没有匹配的命令路由")

    async def handle(self, request: CommandRequest) -> CommandReply:
        """
        处理一次搜图命令调用。

        权限不足、群未开启等预期情况返回文本回复；
        持久化失败等环境错误继续向上抛出。
        """
        config = None
        if request.group_id:
            config = await self.config_store.get(request.group_id)

        route = self.match(request, config)
        logger.debug(f"群 {request.group_id} 命中路由: {route.name}")
        try:
            return await route.action(request, config)
        except CommandException as e:
            return CommandReply.plain(e.message)

    # ========================================================================
    # 路由动作
    # ========================================================================

    async def _reject_context(self, request, config) -> CommandReply:
        raise InvalidContextException(messages.GROUP_ONLY)

    async def _help(self, request, config) -> CommandReply:
        return CommandReply.plain(messages.HELP_MESSAGE)

    async def _status(self, request, config: GroupConfig) -> CommandReply:
        return CommandReply.plain(
            messages.status_message(
                config.enabled, config.custom_tags, config.use_global_tags
            )
        )

    async def _toggle(self, request: CommandRequest, config: GroupConfig) -> CommandReply:
        require_authority(request, messages.DENIED_TOGGLE)
        enabled = bool(request.option("on"))
        await self.config_store.update(config.group_id, enabled=enabled)
        return CommandReply.plain(messages.toggle_message(enabled))

    async def _reject_disabled(self, request, config: GroupConfig) -> CommandReply:
        raise GroupNotEnabledException(config.group_id)

    async def _toggle_global(self, request: CommandRequest, config: GroupConfig) -> CommandReply:
        require_authority(request, messages.DENIED_GLOBAL)
        use_global_tags = bool(request.option("onglobal"))
        await self.config_store.update(config.group_id, use_global_tags=use_global_tags)
        return CommandReply.plain(messages.global_toggle_message(use_global_tags))

    async def _manage_tags(self, request: CommandRequest, config: GroupConfig) -> CommandReply:
        require_authority(request, messages.DENIED_TAGS)

        adding = bool(request.option("add"))
        raw = request.option("add") if adding else request.option("rm")
        tags_to_modify = parse_tag_list(str(raw))

        if adding:
            new_tags = merge_tags(config.custom_tags, tags_to_modify)
            await self.config_store.update(config.group_id, custom_tags=new_tags)
            return CommandReply.plain(messages.tags_added_message(new_tags))

        new_tags = remove_tags(config.custom_tags, tags_to_modify)
        await self.config_store.update(config.group_id, custom_tags=new_tags)
        return CommandReply.plain(messages.tags_removed_message(new_tags))

    async def _list_tags(self, request, config: GroupConfig) -> CommandReply:
        return CommandReply.plain(messages.tag_list_message(config.custom_tags))

    async def _search(self, request: CommandRequest, config: GroupConfig) -> CommandReply:
        outcome = await self.search_service.search(config, request.tags)
        if outcome.error == SearchErrorKind.NO_RESULTS:
            return CommandReply.plain(messages.NO_RESULTS)
        if outcome.error == SearchErrorKind.TRANSPORT:
            return CommandReply.plain(outcome.message)

        result = outcome.result
        if is_video_url(result.url):
            return CommandReply.video(result.url)
        return CommandReply.image(
            result.url, messages.image_info_message(result.id, result.score, result.tags)
        )
