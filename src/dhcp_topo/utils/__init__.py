"""
工具模块初始化
导出日志工具
"""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
