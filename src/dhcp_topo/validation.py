"""
DHCP配置校验
自上而下检查，结构错误立即返回；IPv4 与 IPv6 两轮校验都会执行并合并错误
"""

from __future__ import annotations

from datetime import timedelta
from typing import List, Optional

from .core.errors import (
    DHCPConfigError, NilConfigError, NilInterfaceConfigError, NilProtocolConfigError,
    InvalidICMPTimeoutError, NoInterfacesError, interface_context, join_errors
)
from .core.iprange import AddressRange
from .core.models import Config
from .core.models.validators import require_ipv4, subnet_mask_prefix_length, validate_domain_name
from .core.types import ProtocolFamily
from .utils.logging import get_logger

logger = get_logger(__name__)


def validate_config(conf: Optional[Config]) -> None:
    """校验DHCP服务配置

    未启用的配置视为有效，不检查其他字段。

    Raises:
        DHCPConfigError: 第一个结构错误，或 v4/v6 两轮校验的合并错误
    """
    if conf is None:
        raise NilConfigError()
    if not conf.enabled:
        return
    if conf.icmp_timeout < timedelta(0):
        raise InvalidICMPTimeoutError(conf.icmp_timeout)

    # 错误信息已足够明确，不再包装
    validate_domain_name(conf.local_domain_name)

    if not conf.interfaces:
        raise NoInterfacesError()

    ifaces = sorted(conf.interfaces)
    _validate_structure(conf, ifaces)

    err = join_errors([
        _annotated(_validate_v4(conf, ifaces), "validating v4"),
        _annotated(_validate_v6(conf, ifaces), "validating v6"),
    ])
    if err is not None:
        raise err

    logger.debug("config_validated", interfaces=ifaces)


def _annotated(err: Optional[DHCPConfigError], context: str) -> Optional[DHCPConfigError]:
    return err.annotate(context) if err is not None else None


def _validate_structure(conf: Config, ifaces: List[str]) -> None:
    """按接口名顺序检查接口及协议配置非空"""
    for iface in ifaces:
        iface_conf = conf.interfaces[iface]
        if iface_conf is None:
            raise NilInterfaceConfigError(iface)
        if iface_conf.ipv4 is None:
            raise NilProtocolConfigError(iface, ProtocolFamily.IPV4.value)
        if iface_conf.ipv6 is None:
            raise NilProtocolConfigError(iface, ProtocolFamily.IPV6.value)


def _validate_v4(conf: Config, ifaces: List[str]) -> Optional[DHCPConfigError]:
    """IPv4 校验，在第一个出错的接口处停止"""
    for iface in ifaces:
        v4_conf = conf.interfaces[iface].ipv4
        if not v4_conf.enabled:
            continue

        try:
            require_ipv4(v4_conf.gateway_ip, "gateway ip")
            subnet_mask_prefix_length(v4_conf.subnet_mask)
            require_ipv4(v4_conf.range_start, "range start")
            require_ipv4(v4_conf.range_end, "range end")
            AddressRange(v4_conf.range_start, v4_conf.range_end)
        except DHCPConfigError as err:
            return err.annotate(interface_context(iface), ProtocolFamily.IPV4.value)

    return None


def _validate_v6(conf: Config, ifaces: List[str]) -> Optional[DHCPConfigError]:
    """IPv6 校验，目前只有结构检查"""
    # TODO: 确认意图后为 IPv6 增加地址族与 SLAAC 标志一致性校验
    return None
