"""
配置错误类型
所有错误都在启动阶段产生，消息文本是对外契约，调用方按字面匹配
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, List, Optional, Sequence, Tuple


def quote(value: Any) -> str:
    """以双引号包裹并转义，用于消息中的名称"""
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def interface_context(name: str) -> str:
    """接口名上下文前缀"""
    return f"interface {quote(name)}"


_MICROS_PER_MS = 1000
_MICROS_PER_SECOND = 1000 * _MICROS_PER_MS
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE


def _decimal(value: int, unit: int) -> str:
    """value / unit 的十进制表示，去掉小数末尾的 0"""
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{frac:0{width}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """按带单位的时长格式输出，例如 -1ms、1.5s、1m30s、1h0m0s"""
    micros = (value.days * 86400 + value.seconds) * _MICROS_PER_SECOND + value.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < _MICROS_PER_MS:
        return f"{sign}{micros}µs"
    if micros < _MICROS_PER_SECOND:
        return f"{sign}{_decimal(micros, _MICROS_PER_MS)}ms"

    hours, rest = divmod(micros, _MICROS_PER_HOUR)
    minutes, rest = divmod(rest, _MICROS_PER_MINUTE)
    text = f"{_decimal(rest, _MICROS_PER_SECOND)}s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


class DHCPConfigError(ValueError):
    """配置错误基类

    ``message`` 为不含上下文的原始消息，``context`` 为由外向内的上下文前缀，
    ``str(err)`` 为二者以 ": " 连接的结果。
    """

    default_message = "invalid dhcp configuration"

    def __init__(self, message: Optional[str] = None, context: Sequence[str] = ()) -> None:
        self.message = message if message is not None else self.default_message
        self.context: Tuple[str, ...] = tuple(context)
        super().__init__(self._render())

    def _render(self) -> str:
        return ": ".join((*self.context, self.message))

    def __str__(self) -> str:
        return self._render()

    def annotate(self, *parts: str) -> DHCPConfigError:
        """返回附加了外层上下文的副本，类型保持不变"""
        annotated = self.__class__.__new__(self.__class__)
        annotated.__dict__.update(self.__dict__)
        annotated.context = tuple(parts) + self.context
        annotated.args = (annotated._render(),)
        return annotated


class NilConfigError(DHCPConfigError):
    default_message = "config is nil"


class NilInterfaceConfigError(NilConfigError):
    """接口配置缺失"""

    def __init__(self, interface: str) -> None:
        self.interface = interface
        super().__init__(context=(interface_context(interface),))


class NilProtocolConfigError(NilConfigError):
    """接口下某协议族的配置缺失"""

    def __init__(self, interface: str, protocol: str) -> None:
        self.interface = interface
        self.protocol = protocol
        super().__init__(context=(interface_context(interface), protocol))


class InvalidICMPTimeoutError(DHCPConfigError):
    def __init__(self, timeout: timedelta) -> None:
        self.timeout = timeout
        super().__init__(f"icmp timeout {format_duration(timeout)} must be non-negative")


class InvalidDomainNameError(DHCPConfigError):
    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"bad domain name {quote(name)}: {reason}")


class NoInterfacesError(DHCPConfigError):
    default_message = "no interfaces specified"


class InvalidAddressFamilyError(DHCPConfigError):
    """字段不属于其配置声明的地址族"""

    def __init__(self, field: str, expected: str = "ipv4") -> None:
        self.field = field
        self.expected = expected
        super().__init__(f"{field} should be a valid {expected}")


class InvalidSubnetMaskError(DHCPConfigError):
    """子网掩码不是连续的 1 后接连续的 0"""

    def __init__(self, mask: Any) -> None:
        self.mask = mask
        super().__init__(f"subnet mask {mask} should be a valid ipv4 cidr")


class RangeBoundaryNotInSubnetError(DHCPConfigError):
    def __init__(self, boundary: str, address: Any, subnet: Any) -> None:
        self.boundary = boundary
        self.address = address
        self.subnet = subnet
        super().__init__(f"range {boundary} {address} is not within {subnet}")


class GatewayInRangeError(DHCPConfigError):
    def __init__(self, gateway: Any, address_range: Any) -> None:
        self.gateway = gateway
        self.address_range = address_range
        super().__init__(f"gateway ip {gateway} in the ip range {address_range}")


class InvalidRangeError(DHCPConfigError):
    """地址范围构造失败"""

    default_message = "invalid range"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message, context=("invalid ip range",))


class StartNotBeforeEndError(InvalidRangeError):
    default_message = "start is greater than or equal to end"


class FamilyMismatchError(InvalidRangeError):
    default_message = "start and end should be within the same address family"


class RangeTooLargeError(InvalidRangeError):
    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"range is too large: length should be less or equal to {limit}")


class JoinedConfigError(DHCPConfigError):
    """多个错误的合并，消息按行连接"""

    def __init__(self, errors: Sequence[DHCPConfigError]) -> None:
        self.errors: List[DHCPConfigError] = list(errors)
        super().__init__("\n".join(str(err) for err in self.errors))


class ConfigLoadError(DHCPConfigError):
    """配置文件读取或解析失败"""

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"loading config {quote(path)}: {reason}")


def join_errors(errors: Sequence[Optional[DHCPConfigError]]) -> Optional[DHCPConfigError]:
    """合并错误：无错误返回 None，单个错误原样返回"""
    present = [err for err in errors if err is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return JoinedConfigError(present)


__all__ = [
    "DHCPConfigError",
    "NilConfigError",
    "NilInterfaceConfigError",
    "NilProtocolConfigError",
    "InvalidICMPTimeoutError",
    "InvalidDomainNameError",
    "NoInterfacesError",
    "InvalidAddressFamilyError",
    "InvalidSubnetMaskError",
    "RangeBoundaryNotInSubnetError",
    "GatewayInRangeError",
    "InvalidRangeError",
    "StartNotBeforeEndError",
    "FamilyMismatchError",
    "RangeTooLargeError",
    "JoinedConfigError",
    "ConfigLoadError",
    "join_errors",
    "interface_context",
    "quote",
]
