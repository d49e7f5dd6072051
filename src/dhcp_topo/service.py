"""
DHCP服务装配
校验配置后按接口名顺序构建描述符，得到不可变的服务状态
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import Field, computed_field

from .core.errors import DHCPConfigError, interface_context
from .core.models import (
    Config, IPv4InterfaceInfo, IPv6InterfaceInfo, new_iface4, new_iface6
)
from .core.models.base import BaseConfig
from .core.types import ProtocolFamily
from .utils.logging import get_logger
from .validation import validate_config

logger = get_logger(__name__)


class ServiceState(BaseConfig):
    """DHCP服务状态

    启用标志在构造时设置且不再改变；描述符按接口名排序。
    """

    enabled: bool = Field(description="服务是否启用")
    interfaces4: Tuple[IPv4InterfaceInfo, ...] = Field(default=(), description="IPv4接口，按名称排序")
    interfaces6: Tuple[IPv6InterfaceInfo, ...] = Field(default=(), description="IPv6接口，按名称排序")

    @computed_field
    @property
    def interface_names(self) -> List[str]:
        """提供服务的所有接口名（去重、排序）"""
        names = {iface.name for iface in self.interfaces4}
        names.update(iface.name for iface in self.interfaces6)
        return sorted(names)

    def is_enabled(self) -> bool:
        return self.enabled

    def get_iface4(self, name: str) -> Optional[IPv4InterfaceInfo]:
        """按名称查找IPv4接口"""
        return next((iface for iface in self.interfaces4 if iface.name == name), None)

    def get_iface6(self, name: str) -> Optional[IPv6InterfaceInfo]:
        """按名称查找IPv6接口"""
        return next((iface for iface in self.interfaces6 if iface.name == name), None)


class ServiceAssembler:
    """服务装配器"""

    def assemble(self, config: Optional[Config]) -> Optional[ServiceState]:
        """校验并装配服务

        配置未启用时返回 None；配置无效时抛出 DHCPConfigError，不产生部分结果。
        """
        try:
            validate_config(config)
        except DHCPConfigError as err:
            logger.warning("config_validation_failed", error=str(err))
            raise

        if not config.enabled:
            logger.info("config_disabled")
            return None

        interfaces4: List[IPv4InterfaceInfo] = []
        interfaces6: List[IPv6InterfaceInfo] = []

        for name in sorted(config.interfaces):
            iface_conf = config.interfaces[name]

            try:
                iface4 = new_iface4(name, iface_conf.ipv4)
            except DHCPConfigError as err:
                annotated = err.annotate(interface_context(name), ProtocolFamily.IPV4.value)
                logger.warning("interface_build_failed", interface=name, error=str(annotated))
                raise annotated from err
            if iface4 is not None:
                interfaces4.append(iface4)

            iface6 = new_iface6(name, iface_conf.ipv6)
            if iface6 is not None:
                interfaces6.append(iface6)

        state = ServiceState(
            enabled=config.enabled,
            interfaces4=tuple(interfaces4),
            interfaces6=tuple(interfaces6),
        )
        logger.info(
            "service_assembled",
            interfaces4=[iface.name for iface in state.interfaces4],
            interfaces6=[iface.name for iface in state.interfaces6],
        )
        return state

    def summarize(self, state: ServiceState) -> Dict[str, int]:
        """服务统计信息"""
        return {
            "interfaces": len(state.interface_names),
            "interfaces4": len(state.interfaces4),
            "interfaces6": len(state.interfaces6),
            "allocatable4": sum(iface.address_count for iface in state.interfaces4),
        }


# 便利函数
def create_service(config: Optional[Config]) -> Optional[ServiceState]:
    """创建DHCP服务状态的便利函数"""
    return ServiceAssembler().assemble(config)
