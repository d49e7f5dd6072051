import copy
import json
from datetime import timedelta

import pytest
from pydantic import ValidationError

from dhcp_topo.core.errors import (
    DHCPConfigError, GatewayInRangeError, NilConfigError, NoInterfacesError,
    RangeBoundaryNotInSubnetError
)
from dhcp_topo.core.models import Config, DHCPOption, InterfaceConfig, IPv4Config, IPv6Config
from dhcp_topo.service import ServiceAssembler, create_service


def _iface(ipv4, ipv6):
    return InterfaceConfig(ipv4=ipv4, ipv6=ipv6)


def test_create_valid_service(make_config, valid_ipv4_conf, valid_ipv6_conf):
    state = create_service(make_config(eth0=_iface(valid_ipv4_conf, valid_ipv6_conf)))

    assert state.is_enabled()
    assert len(state.interfaces4) == 1
    assert len(state.interfaces6) == 1
    assert state.interface_names == ["eth0"]
    assert state.get_iface4("eth0").address_count == 253
    assert state.get_iface6("eth0").ra_slaac_only is True
    assert state.get_iface4("eth1") is None


def test_disabled_config_returns_none():
    assert create_service(Config(enabled=False)) is None


def test_nil_config():
    with pytest.raises(NilConfigError) as exc:
        create_service(None)
    assert str(exc.value) == "config is nil"


def test_no_interfaces(make_config):
    with pytest.raises(NoInterfacesError):
        create_service(make_config())


def test_gateway_within_range(make_config, gw_in_range_conf, valid_ipv6_conf):
    with pytest.raises(GatewayInRangeError) as exc:
        create_service(make_config(eth0=_iface(gw_in_range_conf, valid_ipv6_conf)))
    assert str(exc.value) == (
        'interface "eth0": ipv4: gateway ip 192.168.0.100 in the ip range 192.168.0.1-192.168.0.254'
    )


def test_bad_start(make_config, bad_start_conf, valid_ipv6_conf):
    with pytest.raises(RangeBoundaryNotInSubnetError) as exc:
        create_service(make_config(eth0=_iface(bad_start_conf, valid_ipv6_conf)))
    assert str(exc.value) == 'interface "eth0": ipv4: range start 127.0.0.1 is not within 192.168.0.1/24'


def test_descriptors_sorted_by_name(make_config, valid_ipv4_conf, valid_ipv6_conf):
    iface = _iface(valid_ipv4_conf, valid_ipv6_conf)
    state = create_service(make_config(eth2=iface, eth0=iface, eth1=iface))

    assert [i.name for i in state.interfaces4] == ["eth0", "eth1", "eth2"]
    assert [i.name for i in state.interfaces6] == ["eth0", "eth1", "eth2"]


def test_disabled_protocols_are_skipped(make_config, valid_ipv4_conf, valid_ipv6_conf, disabled_iface):
    conf = make_config(
        eth0=_iface(valid_ipv4_conf, IPv6Config(enabled=False)),
        eth1=_iface(IPv4Config(enabled=False), valid_ipv6_conf),
        eth2=disabled_iface,
    )
    state = create_service(conf)

    assert [i.name for i in state.interfaces4] == ["eth0"]
    assert [i.name for i in state.interfaces6] == ["eth1"]
    assert state.interface_names == ["eth0", "eth1"]


def test_all_interfaces_disabled(make_config, disabled_iface):
    state = create_service(make_config(eth0=disabled_iface))
    assert state.is_enabled()
    assert state.interfaces4 == ()
    assert state.interfaces6 == ()


def test_failed_build_yields_no_state(make_config, valid_ipv4_conf, gw_in_range_conf, valid_ipv6_conf):
    conf = make_config(
        eth0=_iface(valid_ipv4_conf, valid_ipv6_conf),
        eth1=_iface(gw_in_range_conf, valid_ipv6_conf),
    )
    with pytest.raises(DHCPConfigError) as exc:
        create_service(conf)
    assert str(exc.value).startswith('interface "eth1": ipv4: gateway ip')


def test_state_is_immutable(make_config, valid_ipv4_conf, valid_ipv6_conf):
    state = create_service(make_config(eth0=_iface(valid_ipv4_conf, valid_ipv6_conf)))
    with pytest.raises(ValidationError):
        state.enabled = False


def test_summarize(make_config, valid_ipv4_conf, valid_ipv6_conf):
    assembler = ServiceAssembler()
    state = assembler.assemble(make_config(
        eth0=_iface(valid_ipv4_conf, valid_ipv6_conf),
        eth1=_iface(valid_ipv4_conf, IPv6Config(enabled=False)),
    ))

    assert assembler.summarize(state) == {
        "interfaces": 2,
        "interfaces4": 2,
        "interfaces6": 1,
        "allocatable4": 506,
    }


def test_lease_ttl_carried(make_config, valid_ipv4_conf, valid_ipv6_conf):
    v4 = valid_ipv4_conf.model_copy(update={"lease_duration": timedelta(minutes=30)})
    state = create_service(make_config(eth0=_iface(v4, valid_ipv6_conf)))
    assert state.get_iface4("eth0").lease_ttl == timedelta(minutes=30)


def test_state_json_dump(make_config, valid_ipv4_conf, valid_ipv6_conf):
    v4 = valid_ipv4_conf.model_copy(update={"options": [DHCPOption(code=6, value=b"\x08\x08\x08\x08")]})
    state = create_service(make_config(eth0=_iface(v4, valid_ipv6_conf)))

    data = json.loads(state.model_dump_json())

    iface4 = data["interfaces4"][0]
    assert iface4["name"] == "eth0"
    assert iface4["gateway"] == "192.168.0.1"
    assert iface4["subnet"] == "192.168.0.1/24"
    assert iface4["network"] == "192.168.0.0/24"
    assert iface4["address_space"] == {"start": "192.168.0.2", "end": "192.168.0.254"}
    assert iface4["address_count"] == 253
    assert iface4["options"] == [{"code": 6, "value": "CAgICA=="}]
    assert data["interfaces6"][0]["range_start"] == "2001:db8::1"
    assert data["interface_names"] == ["eth0"]


def test_state_deep_copy(make_config, valid_ipv4_conf, valid_ipv6_conf):
    state = create_service(make_config(eth0=_iface(valid_ipv4_conf, valid_ipv6_conf)))
    assert copy.deepcopy(state) == state
