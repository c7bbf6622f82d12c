"""
Philomena 图站客户端 - 基础设施层

通过 Philomena 系图站（derpibooru 等）的 /api/v1/json/search/images 接口按标签检索图片。
单次请求有固定的总超时，不做自动重试。
"""

import asyncio
import json
from typing import Any

import aiohttp

from ...domain.exceptions import BoardRequestException, NoResultsException
from ...domain.repositories.image_board_repository import IImageBoard
from ...domain.value_objects.image_result import ImageCandidate
from ...domain.value_objects.system_config import SystemConfig
from ...shared.constants import (
    PER_PAGE,
    REQUEST_TIMEOUT_SECONDS,
    SORT_DIRECTION,
    SORT_FIELD,
    USER_AGENT,
)
from ...utils.logger import logger


class PhilomenaClient(IImageBoard):
    """
    基础设施：Philomena 搜索接口客户端

    Attributes:
        api_url (str): 搜索接口地址
        api_key (str): API 密钥，为空时不附带
        timeout (float): 请求总超时（秒）
    """

    def __init__(
        self,
        system_config: SystemConfig,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self.api_url = system_config.api_url.rstrip("?&")
        self.api_key = system_config.api_key
        self.timeout = timeout

    def build_params(self, tags: list[str]) -> dict[str, str]:
        """构建查询参数：标签以逗号连接，按评分降序，每页 50 条。"""
        params = {"q": ",".join(tags)}
        if self.api_key:
            params["key"] = self.api_key
        params["sf"] = SORT_FIELD
        params["sd"] = SORT_DIRECTION
        params["per_page"] = str(PER_PAGE)
        return params

    async def search(self, tags: list[str]) -> list[ImageCandidate]:
        params = self.build_params(tags)
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        logger.debug(f"请求图站: {self.api_url} q={params['q']}")
        try:
            async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
                async with session.get(self.api_url, params=params) as resp:
                    status = resp.status
                    reason = resp.reason or ""
                    body = await resp.text()
        except asyncio.TimeoutError as e:
            raise BoardRequestException(f"请求图站超时 ({self.timeout:g}s)") from e
        except aiohttp.ClientError as e:
            raise BoardRequestException(f"请求图站失败: {e}") from e

        return self.parse_response(status, reason, body)

    def parse_response(
        self, status: int, reason: str, body: str
    ) -> list[ImageCandidate]:
        """
        解析图站响应。

        Raises:
            NoResultsException: 404 或 total 为 0
            BoardRequestException: 其他非 2xx 响应或响应体无法解析
        """
        if status == 404:
            raise NoResultsException()
        if not 200 <= status < 300:
            raise BoardRequestException(
                self._error_message(status, reason, body), status=status
            )

        try:
            data = json.loads(body)
        except ValueError as e:
            raise BoardRequestException("图站返回了无法解析的数据", status=status) from e
        if not isinstance(data, dict):
            raise BoardRequestException("图站返回了无法解析的数据", status=status)

        images = data.get("images") or []
        if not isinstance(images, list) or not all(isinstance(image, dict) for image in images):
            raise BoardRequestException("图站返回了无法解析的数据", status=status)
        total = data.get("total", len(images))
        if total == 0 or not images:
            raise NoResultsException()

        return [ImageCandidate.from_api(image) for image in images]

    @staticmethod
    def _error_message(status: int, reason: str, body: str) -> str:
        try:
            data: Any = json.loads(body)
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"HTTP {status}: {reason}".rstrip(": ")
