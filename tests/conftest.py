from datetime import timedelta

import pytest

from dhcp_topo.core.models import Config, InterfaceConfig, IPv4Config, IPv6Config

VALID_LOCAL_TLD = "local"


@pytest.fixture()
def valid_ipv4_conf():
    return IPv4Config(
        enabled=True,
        gateway_ip="192.168.0.1",
        subnet_mask="255.255.255.0",
        range_start="192.168.0.2",
        range_end="192.168.0.254",
        lease_duration=timedelta(hours=1),
    )


@pytest.fixture()
def gw_in_range_conf():
    return IPv4Config(
        enabled=True,
        gateway_ip="192.168.0.100",
        subnet_mask="255.255.255.0",
        range_start="192.168.0.1",
        range_end="192.168.0.254",
        lease_duration=timedelta(hours=1),
    )


@pytest.fixture()
def bad_start_conf():
    return IPv4Config(
        enabled=True,
        gateway_ip="192.168.0.1",
        subnet_mask="255.255.255.0",
        range_start="127.0.0.1",
        range_end="192.168.0.254",
        lease_duration=timedelta(hours=1),
    )


@pytest.fixture()
def valid_ipv6_conf():
    return IPv6Config(
        enabled=True,
        range_start="2001:db8::1",
        lease_duration=timedelta(hours=1),
        ra_allow_slaac=True,
        ra_slaac_only=True,
    )


@pytest.fixture()
def make_config():
    """按接口名构造启用的服务配置"""

    def _make(**interfaces):
        return Config(
            enabled=True,
            local_domain_name=VALID_LOCAL_TLD,
            interfaces=interfaces,
        )

    return _make


@pytest.fixture()
def disabled_iface():
    return InterfaceConfig(ipv4=IPv4Config(enabled=False), ipv6=IPv6Config(enabled=False))
