"""
类型定义模块
地址族枚举与配置中使用的约束类型
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress

from ..config.defaults import MAX_OPTION_CODE


# 值类型的基础配置
class BaseTypeModel(BaseModel):
    """不可变值类型基类"""
    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
    )


# 原始配置中的地址字段允许任意地址族，由校验器报告地址族错误
AnyAddress = Annotated[Optional[IPvAnyAddress], Field(description="IP地址")]
InterfaceName = Annotated[str, Field(description="网络接口名称")]
OptionCode = Annotated[int, Field(ge=0, le=MAX_OPTION_CODE, description="DHCP选项码")]


class ProtocolFamily(str, Enum):
    """协议族枚举，取值同时用作错误上下文"""
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def description(self) -> str:
        """获取协议族描述"""
        descriptions = {
            ProtocolFamily.IPV4: "DHCPv4 - IPv4地址分配",
            ProtocolFamily.IPV6: "DHCPv6 - IPv6地址分配与SLAAC",
        }
        return descriptions[self]


__all__ = ["BaseTypeModel", "AnyAddress", "InterfaceName", "OptionCode", "ProtocolFamily"]
