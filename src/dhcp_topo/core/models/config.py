"""原始DHCP配置模块

这些模型只做类型转换（字符串到地址、秒数到时长），语义校验由
``dhcp_topo.validation.validate_config`` 负责。
"""
from __future__ import annotations

from datetime import timedelta
from typing import Dict, List, Optional

from pydantic import ConfigDict, Field, computed_field

from .base import BaseConfig
from ..types import AnyAddress, InterfaceName, OptionCode
from ...config.defaults import DEFAULT_ICMP_TIMEOUT, DEFAULT_LEASE_DURATION


class DHCPOption(BaseConfig):
    """DHCP选项记录（选项码 + 原始值，不做协议解码）"""

    model_config = ConfigDict(ser_json_bytes="base64")

    code: OptionCode = Field(description="选项码")
    value: bytes = Field(default=b"", description="原始选项值")


class IPv4Config(BaseConfig):
    """接口的DHCPv4配置"""

    gateway_ip: AnyAddress = None
    subnet_mask: AnyAddress = None
    range_start: AnyAddress = None
    range_end: AnyAddress = None
    options: List[DHCPOption] = Field(default_factory=list, description="发送给客户端的DHCP选项")
    lease_duration: timedelta = Field(default=DEFAULT_LEASE_DURATION, description="租约时长")
    enabled: bool = Field(default=False, description="是否在该接口启用DHCPv4")


class IPv6Config(BaseConfig):
    """接口的DHCPv6配置"""

    range_start: AnyAddress = None
    options: List[DHCPOption] = Field(default_factory=list, description="发送给客户端的DHCP选项")
    lease_duration: timedelta = Field(default=DEFAULT_LEASE_DURATION, description="租约时长")
    ra_slaac_only: bool = Field(default=False, description="客户端仅使用SLAAC分配地址")
    ra_allow_slaac: bool = Field(default=False, description="客户端可以使用SLAAC分配地址")
    enabled: bool = Field(default=False, description="是否在该接口启用DHCPv6")


class InterfaceConfig(BaseConfig):
    """单个接口的配置"""

    ipv4: Optional[IPv4Config] = Field(default=None, description="DHCPv4配置")
    ipv6: Optional[IPv6Config] = Field(default=None, description="DHCPv6配置")


class Config(BaseConfig):
    """DHCP服务配置"""

    interfaces: Dict[InterfaceName, Optional[InterfaceConfig]] = Field(
        default_factory=dict, description="接口名到接口配置的映射"
    )
    local_domain_name: str = Field(default="", description="解析客户端主机名使用的顶级域名")
    icmp_timeout: timedelta = Field(default=DEFAULT_ICMP_TIMEOUT, description="探测其他DHCP服务器的超时")
    enabled: bool = Field(default=False, description="是否启用DHCP服务")

    @computed_field
    @property
    def interface_names(self) -> List[str]:
        """按字典序排列的接口名"""
        return sorted(self.interfaces)
