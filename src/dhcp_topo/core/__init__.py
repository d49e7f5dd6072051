"""
核心模块初始化
导出地址范围、错误类型和模型
"""

from .types import ProtocolFamily, InterfaceName, AnyAddress

from .iprange import Address, AddressRange

from .errors import (
    DHCPConfigError, NilConfigError, NilInterfaceConfigError, NilProtocolConfigError,
    InvalidICMPTimeoutError, InvalidDomainNameError, NoInterfacesError,
    InvalidAddressFamilyError, InvalidSubnetMaskError, RangeBoundaryNotInSubnetError,
    GatewayInRangeError, InvalidRangeError, StartNotBeforeEndError,
    FamilyMismatchError, RangeTooLargeError, JoinedConfigError, ConfigLoadError
)

from .models import (
    Config, InterfaceConfig, IPv4Config, IPv6Config, DHCPOption,
    IPv4InterfaceInfo, IPv6InterfaceInfo, new_iface4, new_iface6
)

__all__ = [
    # 类型
    'ProtocolFamily', 'InterfaceName', 'AnyAddress', 'Address', 'AddressRange',

    # 错误
    'DHCPConfigError', 'NilConfigError', 'NilInterfaceConfigError', 'NilProtocolConfigError',
    'InvalidICMPTimeoutError', 'InvalidDomainNameError', 'NoInterfacesError',
    'InvalidAddressFamilyError', 'InvalidSubnetMaskError', 'RangeBoundaryNotInSubnetError',
    'GatewayInRangeError', 'InvalidRangeError', 'StartNotBeforeEndError',
    'FamilyMismatchError', 'RangeTooLargeError', 'JoinedConfigError', 'ConfigLoadError',

    # 模型
    'Config', 'InterfaceConfig', 'IPv4Config', 'IPv6Config', 'DHCPOption',
    'IPv4InterfaceInfo', 'IPv6InterfaceInfo', 'new_iface4', 'new_iface6',
]
