"""接口描述符模块

描述符是校验通过后的不可变接口信息，由外部的租约分配与报文处理组件读取。
"""
from __future__ import annotations

import ipaddress
from datetime import timedelta
from typing import Any, Optional, Tuple

from pydantic import Field, computed_field

from .base import BaseConfig
from .config import DHCPOption, IPv4Config, IPv6Config
from .validators import require_ipv4, subnet_mask_prefix_length
from ..errors import GatewayInRangeError, RangeBoundaryNotInSubnetError
from ..iprange import AddressRange
from ..types import AnyAddress, InterfaceName
from ...utils.logging import get_logger

logger = get_logger(__name__)


class IPv4InterfaceInfo(BaseConfig):
    """IPv4接口描述符"""

    name: InterfaceName = Field(description="接口名称")
    gateway: ipaddress.IPv4Address = Field(description="网关地址")
    subnet: ipaddress.IPv4Interface = Field(description="网关地址加掩码推导的前缀长度")
    address_space: AddressRange = Field(description="可分配地址范围")
    lease_ttl: timedelta = Field(description="动态租约时长")
    options: Tuple[DHCPOption, ...] = Field(default=(), description="DHCP选项")

    @computed_field
    @property
    def network(self) -> ipaddress.IPv4Network:
        """子网网络地址"""
        return self.subnet.network

    @computed_field
    @property
    def prefix_length(self) -> int:
        """前缀长度"""
        return self.subnet.network.prefixlen

    @computed_field
    @property
    def address_count(self) -> int:
        """可分配地址数量"""
        return len(self.address_space)

    def contains(self, address: Any) -> bool:
        """地址是否可分配"""
        return self.address_space.contains(address)

    def offset(self, address: Any) -> Tuple[int, bool]:
        """地址在可分配范围内的偏移"""
        return self.address_space.offset(address)


class IPv6InterfaceInfo(BaseConfig):
    """IPv6接口描述符"""

    name: InterfaceName = Field(description="接口名称")
    range_start: AnyAddress = None
    lease_ttl: timedelta = Field(description="动态租约时长")
    ra_slaac_only: bool = Field(default=False, description="RA不带MO标志，仅SLAAC")
    ra_allow_slaac: bool = Field(default=False, description="RA带MO标志，允许SLAAC")
    options: Tuple[DHCPOption, ...] = Field(default=(), description="DHCP选项")


def new_iface4(name: str, conf: IPv4Config) -> Optional[IPv4InterfaceInfo]:
    """根据配置创建IPv4接口描述符

    配置未启用时返回 None。配置无法使用时抛出 DHCPConfigError 的子类，
    地址范围构造错误原样抛出。
    """
    if not conf.enabled:
        logger.debug("interface_disabled", interface=name, protocol="ipv4")
        return None

    gateway = require_ipv4(conf.gateway_ip, "gateway ip")
    prefix_length = subnet_mask_prefix_length(conf.subnet_mask)
    range_start = require_ipv4(conf.range_start, "range start")
    range_end = require_ipv4(conf.range_end, "range end")

    subnet = ipaddress.IPv4Interface((gateway, prefix_length))
    if range_start not in subnet.network:
        raise RangeBoundaryNotInSubnetError("start", range_start, subnet)
    if range_end not in subnet.network:
        raise RangeBoundaryNotInSubnetError("end", range_end, subnet)

    address_space = AddressRange(range_start, range_end)
    if address_space.contains(gateway):
        raise GatewayInRangeError(gateway, address_space)

    iface = IPv4InterfaceInfo(
        name=name,
        gateway=gateway,
        subnet=subnet,
        address_space=address_space,
        lease_ttl=conf.lease_duration,
        options=tuple(conf.options),
    )
    logger.debug(
        "iface4_built",
        interface=name,
        subnet=str(subnet),
        address_space=str(address_space),
        address_count=iface.address_count,
    )
    return iface


def new_iface6(name: str, conf: IPv6Config) -> Optional[IPv6InterfaceInfo]:
    """根据配置创建IPv6接口描述符，字段原样携带

    配置未启用时返回 None。
    """
    if not conf.enabled:
        logger.debug("interface_disabled", interface=name, protocol="ipv6")
        return None

    range_start = conf.range_start
    iface = IPv6InterfaceInfo(
        name=name,
        range_start=range_start,
        lease_ttl=conf.lease_duration,
        ra_slaac_only=conf.ra_slaac_only,
        ra_allow_slaac=conf.ra_allow_slaac,
        options=tuple(conf.options),
    )
    logger.debug("iface6_built", interface=name, range_start=str(range_start))
    return iface
