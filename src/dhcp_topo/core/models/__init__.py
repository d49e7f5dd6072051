"""
Models 包 - DHCP服务数据模型

此包包含原始配置模型与接口描述符。
"""

# 基础
from .base import BaseConfig

# 原始配置
from .config import Config, InterfaceConfig, IPv4Config, IPv6Config, DHCPOption

# 接口描述符
from .interface import IPv4InterfaceInfo, IPv6InterfaceInfo, new_iface4, new_iface6

__all__ = [
    # 基础
    "BaseConfig",
    # 原始配置
    "Config",
    "InterfaceConfig",
    "IPv4Config",
    "IPv6Config",
    "DHCPOption",
    # 接口描述符
    "IPv4InterfaceInfo",
    "IPv6InterfaceInfo",
    "new_iface4",
    "new_iface6",
]
