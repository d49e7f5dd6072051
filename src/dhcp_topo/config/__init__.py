"""应用设置与默认常量"""

from .settings import AppSettings

__all__ = ["AppSettings"]
