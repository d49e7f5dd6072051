"""公共验证器函数"""
import ipaddress
import re
from typing import Any

from ...config.defaults import MAX_DOMAIN_LABEL_LEN, MAX_DOMAIN_NAME_LEN
from ..errors import InvalidAddressFamilyError, InvalidDomainNameError, InvalidSubnetMaskError, quote

_LABEL_PATTERN = re.compile(r'^[a-zA-Z0-9_-]+$')
_IPV4_ALL_ONES = 0xFFFFFFFF


def _label_error(label: str, reason: str) -> str:
    return f"bad domain name label {quote(label)}: {reason}"


def validate_domain_name(name: str) -> str:
    """验证域名语法

    Args:
        name: 域名，各标签以点分隔

    Returns:
        验证通过的域名

    Raises:
        InvalidDomainNameError: 域名为空、过长或含有非法标签
    """
    if not name:
        raise InvalidDomainNameError(name, "domain name is empty")
    if len(name) > MAX_DOMAIN_NAME_LEN:
        raise InvalidDomainNameError(
            name, f"domain name is too long, max: {MAX_DOMAIN_NAME_LEN}"
        )

    for label in name.split("."):
        if not label:
            raise InvalidDomainNameError(name, _label_error(label, "label is empty"))
        if len(label) > MAX_DOMAIN_LABEL_LEN:
            raise InvalidDomainNameError(
                name, _label_error(label, f"label is too long, max: {MAX_DOMAIN_LABEL_LEN}")
            )
        if not _LABEL_PATTERN.fullmatch(label):
            index, char = next(
                (i, c) for i, c in enumerate(label) if not (c.isascii() and (c.isalnum() or c in "_-"))
            )
            raise InvalidDomainNameError(
                name, _label_error(label, f"bad char {char!r} at index {index}")
            )
        if label.startswith("-") or label.endswith("-"):
            raise InvalidDomainNameError(
                name, _label_error(label, "label must not start or end with a hyphen")
            )

    return name


def require_ipv4(value: Any, field_name: str) -> ipaddress.IPv4Address:
    """验证字段为 IPv4 地址（IPv4 映射的 IPv6 地址不算）"""
    if not isinstance(value, ipaddress.IPv4Address):
        raise InvalidAddressFamilyError(field_name, "ipv4")
    return value


def subnet_mask_prefix_length(mask: Any) -> int:
    """由子网掩码推导前缀长度

    掩码必须是 IPv4 地址，且为连续的 1 后接连续的 0。
    """
    if not isinstance(mask, ipaddress.IPv4Address):
        raise InvalidAddressFamilyError("subnet mask", "ipv4 cidr")

    host_bits = ~int(mask) & _IPV4_ALL_ONES
    if host_bits & (host_bits + 1):
        raise InvalidSubnetMaskError(mask)

    return 32 - host_bits.bit_length()
