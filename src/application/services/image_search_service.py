"""
搜图应用服务 - 应用层
实现"组合标签 -> 查询图站 -> 随机选取"用例，并把失败转换为类型化结果。
"""

from ...domain.entities.group_config import GroupConfig
from ...domain.exceptions import BoardRequestException, NoResultsException
from ...domain.repositories.image_board_repository import IImageBoard
from ...domain.services.image_selector import ImageSelector
from ...domain.services.tag_composer import compose_effective_tags
from ...domain.value_objects.search_outcome import SearchOutcome
from ...domain.value_objects.system_config import SystemConfig
from ...shared.constants import SearchErrorKind
from ...utils.logger import logger


class ImageSearchService:
    """搜图应用服务 - 协调标签组合、图站查询与结果选取"""

    def __init__(
        self,
        system_config: SystemConfig,
        image_board: IImageBoard,
        selector: ImageSelector | None = None,
    ):
        self.system_config = system_config
        self.image_board = image_board
        self.selector = selector or ImageSelector()

    def compose_tags(self, group_config: GroupConfig, raw_tags: str | None) -> list[str]:
        return compose_effective_tags(group_config, self.system_config, raw_tags)

    async def search(self, group_config: GroupConfig, raw_tags: str | None) -> SearchOutcome:
        """
        执行一次搜图。

        无结果与请求失败不会抛出，而是以 SearchOutcome.error 返回。

        Args:
            group_config: 当前群配置
            raw_tags: 用户输入的标签文本

        Returns:
            SearchOutcome: 选中的图片或失败类型
        """
        tags = self.compose_tags(group_config, raw_tags)
        logger.info(f"群 {group_config.group_id} 搜图，标签: {', '.join(tags)}")

        try:
            candidates = await self.image_board.search(tags)
        except NoResultsException as e:
            return SearchOutcome.failed(SearchErrorKind.NO_RESULTS, e.message)
        except BoardRequestException as e:
            logger.warning(f"群 {group_config.group_id} 搜图请求失败: {e.message}")
            return SearchOutcome.failed(SearchErrorKind.TRANSPORT, e.message)

        result = self.selector.select(candidates, tags)
        logger.debug(f"从 {len(candidates)} 个候选中选中图片 {result.id}")
        return SearchOutcome.found(result)
