from .group_config_store import GroupConfigStore
from .image_search_service import ImageSearchService

__all__ = ["GroupConfigStore", "ImageSearchService"]
