"""
地址范围
同一地址族内的闭区间，IPv4 与 IPv6 统一按大端字节序的整数处理
"""

from __future__ import annotations

import ipaddress
from typing import Any, Callable, Iterator, Optional, Tuple, Union

from pydantic import Field

from ..config.defaults import MAX_RANGE_LEN
from .errors import FamilyMismatchError, RangeTooLargeError, StartNotBeforeEndError
from .types import BaseTypeModel

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
AddressPredicate = Callable[[Address], bool]


def as_address(value: Any) -> Address:
    """将字符串或整数转换为地址对象，地址对象原样返回"""
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return value
    return ipaddress.ip_address(value)


def address_to_int(address: Address) -> int:
    """地址的大端整数值"""
    return int.from_bytes(address.packed, "big")


def _check_bounds(start: Address, end: Address) -> None:
    if start.version != end.version:
        raise FamilyMismatchError()
    if start >= end:
        raise StartNotBeforeEndError()

    length = address_to_int(end) - address_to_int(start) + 1
    if length > MAX_RANGE_LEN:
        raise RangeTooLargeError(length, MAX_RANGE_LEN)


class AddressRange(BaseTypeModel):
    """不可变的地址闭区间 [start, end]

    构造时保证 start < end、两端同族且地址数不超过 MAX_RANGE_LEN，
    因此 offset 的结果总能放入 32 位无符号整数。
    支持位置参数 ``AddressRange(start, end)`` 和关键字参数。
    """

    start: Address = Field(description="起始地址（含）")
    end: Address = Field(description="结束地址（含）")

    def __init__(self, start: Any, end: Any) -> None:
        """先做范围检查，错误以 DHCPConfigError 子类原样抛出"""
        start, end = as_address(start), as_address(end)
        _check_bounds(start, end)
        super().__init__(start=start, end=end)

    @property
    def version(self) -> int:
        """地址族版本 (4 或 6)"""
        return self.start.version

    def contains(self, address: Any) -> bool:
        """地址族不同或不是地址时直接返回 False"""
        if not isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return False
        if address.version != self.version:
            return False
        return self.start <= address <= self.end

    def offset(self, address: Any) -> Tuple[int, bool]:
        """地址相对 start 的零基偏移，不在范围内时返回 (0, False)"""
        if not self.contains(address):
            return 0, False
        return address_to_int(address) - address_to_int(self.start), True

    def find(self, predicate: AddressPredicate) -> Optional[Address]:
        """按升序返回第一个满足谓词的地址，没有则返回 None"""
        for address in self:
            if predicate(address):
                return address
        return None

    def __iter__(self) -> Iterator[Address]:  # type: ignore[override]
        factory = type(self.start)
        current, last = address_to_int(self.start), address_to_int(self.end)
        while current <= last:
            yield factory(current)
            current += 1

    def __len__(self) -> int:
        return address_to_int(self.end) - address_to_int(self.start) + 1

    def __contains__(self, address: Any) -> bool:
        return self.contains(address)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


__all__ = ["Address", "AddressPredicate", "AddressRange", "address_to_int", "as_address"]
