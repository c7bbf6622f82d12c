"""
领域异常 - 领域层自定义异常

搜图插件中使用的全部领域异常。命令编排层负责把这些异常转换为
面向用户的文本，它们不会作为未处理错误抛给 AstrBot。
"""


class DomainException(Exception):
    """所有领域错误的基础异常。"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================================================
# 命令异常
# ============================================================================


class CommandException(DomainException):
    """命令调用相关错误的基础异常。"""

    def __init__(self, message: str, code: str = "COMMAND_ERROR"):
        super().__init__(message, code)


class InvalidContextException(CommandException):
    """当命令在群聊之外被调用时抛出。"""

    def __init__(self, message: str = "搜图功能仅限群聊使用"):
        super().__init__(message, "INVALID_CONTEXT")


class PermissionDeniedException(CommandException):
    """当调用者权限不足以执行管理操作时抛出。"""

    def __init__(self, message: str = "只有管理员可以修改搜图设置", required: int = 2):
        self.required = required
        super().__init__(message, "PERMISSION_DENIED")


class GroupNotEnabledException(CommandException):
    """当群聊未开启搜图功能时抛出。"""

    def __init__(self, group_id: str = ""):
        self.group_id = group_id
        super().__init__(
            "搜图未在本群开启，管理员请用 “搜图 --on” 启动", "GROUP_NOT_ENABLED"
        )


# ============================================================================
# 图站异常
# ============================================================================


class ImageBoardException(DomainException):
    """图站查询相关错误的基础异常。"""

    def __init__(self, message: str, code: str = "IMAGE_BOARD_ERROR"):
        super().__init__(message, code)


class NoResultsException(ImageBoardException):
    """当图站报告没有匹配结果（total 为 0 或 404）时抛出。"""

    def __init__(self, message: str = "未找到匹配的图片"):
        super().__init__(message, "NO_RESULTS")


class BoardRequestException(ImageBoardException):
    """当请求超时、网络失败或图站返回其他错误状态时抛出。"""

    def __init__(self, message: str = "图站请求失败", status: int | None = None):
        self.status = status
        super().__init__(message, "BOARD_REQUEST_ERROR")


# ============================================================================
# 仓储异常
# ============================================================================


class RepositoryException(DomainException):
    """仓储相关错误的基础异常。"""

    def __init__(self, message: str, code: str = "REPOSITORY_ERROR"):
        super().__init__(message, code)


class DataNotFoundException(RepositoryException):
    """当请求的数据未找到时抛出。"""

    def __init__(
        self, message: str = "数据未找到", entity_type: str = "", entity_id: str = ""
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} 未找到: {entity_id}" if entity_type else message,
            "DATA_NOT_FOUND",
        )


class DataPersistenceException(RepositoryException):
    """当数据持久化失败时抛出。"""

    def __init__(self, message: str = "数据持久化失败"):
        super().__init__(message, "DATA_PERSISTENCE_ERROR")
