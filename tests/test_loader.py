from datetime import timedelta
from ipaddress import ip_address

import pytest

from dhcp_topo.core.errors import ConfigLoadError
from dhcp_topo.loader import load_config, parse_config

VALID_YAML = """
enabled: true
local_domain_name: lan
icmp_timeout: 2
interfaces:
  eth0:
    ipv4:
      enabled: true
      gateway_ip: 192.168.0.1
      subnet_mask: 255.255.255.0
      range_start: 192.168.0.2
      range_end: 192.168.0.254
      lease_duration: 3600
      options:
        - code: 15
          value: lan
    ipv6:
      enabled: true
      range_start: "2001:db8::1"
      ra_allow_slaac: true
  eth1: null
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "dhcp.yaml"
    path.write_text(VALID_YAML, encoding="utf-8")

    conf = load_config(path)

    assert conf.enabled is True
    assert conf.local_domain_name == "lan"
    assert conf.icmp_timeout == timedelta(seconds=2)
    assert conf.interface_names == ["eth0", "eth1"]
    assert conf.interfaces["eth1"] is None

    v4 = conf.interfaces["eth0"].ipv4
    assert v4.gateway_ip == ip_address("192.168.0.1")
    assert v4.lease_duration == timedelta(hours=1)
    assert v4.options[0].code == 15
    assert v4.options[0].value == b"lan"
    assert conf.interfaces["eth0"].ipv6.range_start == ip_address("2001:db8::1")


def test_load_json(tmp_path):
    path = tmp_path / "dhcp.json"
    path.write_text('{"enabled": false, "interfaces": {}}', encoding="utf-8")
    conf = load_config(path)
    assert conf.enabled is False
    assert conf.interfaces == {}


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    conf = load_config(path)
    assert conf.enabled is False
    assert conf.icmp_timeout == timedelta(seconds=1)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigLoadError) as exc:
        load_config(tmp_path / "missing.yaml")
    assert str(exc.value).startswith('loading config "')


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("enabled: [true\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError) as exc:
        load_config(path)
    assert "invalid yaml" in str(exc.value)


def test_unknown_field_rejected():
    with pytest.raises(ConfigLoadError) as exc:
        parse_config({"enabled": True, "dns": "1.1.1.1"})
    assert 'loading config "<memory>": dns:' in str(exc.value)


def test_bad_address_rejected():
    data = {"interfaces": {"eth0": {"ipv4": {"gateway_ip": "not-an-ip"}}}}
    with pytest.raises(ConfigLoadError) as exc:
        parse_config(data)
    assert "interfaces.eth0.ipv4.gateway_ip" in str(exc.value)


def test_top_level_must_be_mapping():
    with pytest.raises(ConfigLoadError) as exc:
        parse_config(["eth0"])
    assert str(exc.value) == 'loading config "<memory>": top level must be a mapping, got list'
