from .philomena_client import PhilomenaClient

__all__ = ["PhilomenaClient"]
