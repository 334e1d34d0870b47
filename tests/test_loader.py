"""Tests for loader.py.

Tests JSON configuration reading and conversion to model objects.
"""

import copy
import ipaddress
import json
from pathlib import Path
from typing import Any

import pytest

from enums import SelectorKind
from errors import ConfigError
from loader import load_config, parse_batches, parse_interfaces


class TestLoadConfig:
    """Tests for load_config function."""

    def test_reads_object(self, config_file: Path, sample_config: dict[str, Any]) -> None:
        """Test a valid file decodes to the original document."""
        assert load_config(config_file) == sample_config

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test unreadable file raises ConfigError."""
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ConfigError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_not_utf8(self, tmp_path: Path) -> None:
        """Test undecodable bytes raise ConfigError."""
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')

        with pytest.raises(ConfigError, match="not UTF-8"):
            load_config(path)

    def test_top_level_not_object(self, tmp_path: Path) -> None:
        """Test a JSON list at top level is rejected."""
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2, 3]))

        with pytest.raises(ConfigError, match="must be an object"):
            load_config(path)


class TestParseInterfaces:
    """Tests for parse_interfaces function."""

    def test_builds_interfaces(self, sample_config: dict[str, Any]) -> None:
        """Test ids, names and addresses are converted."""
        interfaces = parse_interfaces(sample_config)

        assert sorted(interfaces) == [0, 1, 2]
        eth0 = interfaces[0]
        assert eth0.name == "eth0"
        assert len(eth0.addresses) == 2
        assert eth0.addresses[0].ip == ipaddress.IPv4Address("192.168.1.2")
        assert eth0.addresses[0].gateway == ipaddress.IPv4Address("192.168.1.1")

    def test_dotted_netmask(self, sample_config: dict[str, Any]) -> None:
        """Test dotted masks and prefix lengths describe the same network."""
        eth0 = parse_interfaces(sample_config)[0]

        assert eth0.addresses[0].network == eth0.addresses[1].network

    def test_missing_addresses_allowed(self) -> None:
        """Test an interface without addresses is valid."""
        interfaces = parse_interfaces({"interfaces": [{"id": 7, "name": "lo"}]})

        assert interfaces[7].addresses == ()

    @pytest.mark.parametrize("value", [None, [], {}, "eth0"])
    def test_interfaces_must_be_nonempty_list(self, value: Any) -> None:
        """Test missing or empty interface list is rejected."""
        with pytest.raises(ConfigError, match="non-empty list"):
            parse_interfaces({"interfaces": value})

    @pytest.mark.parametrize("value", [None, 5, "10.0.0.1/24", {"ip": "10.0.0.1"}])
    def test_addresses_must_be_list(self, value: Any) -> None:
        """Test a non-list address field is rejected."""
        data = {"interfaces": [{"id": 0, "name": "eth0", "addresses": value}]}

        with pytest.raises(ConfigError, match="Addresses of eth0 must be a list"):
            parse_interfaces(data)

    def test_duplicate_id(self) -> None:
        """Test two interfaces with one id are rejected."""
        data = {"interfaces": [{"id": 1, "name": "a"}, {"id": 1, "name": "b"}]}

        with pytest.raises(ConfigError, match="Duplicate interface id 1"):
            parse_interfaces(data)

    @pytest.mark.parametrize("iface_id", ["0", 1.5, None, True])
    def test_bad_id(self, iface_id: Any) -> None:
        """Test non-integer ids are rejected."""
        with pytest.raises(ConfigError, match="id must be an integer"):
            parse_interfaces({"interfaces": [{"id": iface_id, "name": "eth0"}]})

    @pytest.mark.parametrize("name", [None, "", "eth 0", "x" * 65])
    def test_bad_name(self, name: Any) -> None:
        """Test invalid interface names are rejected."""
        with pytest.raises(ConfigError, match="Invalid interface name"):
            parse_interfaces({"interfaces": [{"id": 0, "name": name}]})

    def test_interface_entry_not_object(self) -> None:
        """Test non-object interface entries are rejected."""
        with pytest.raises(ConfigError, match="must be an object"):
            parse_interfaces({"interfaces": ["eth0"]})

    @pytest.mark.parametrize(
        "address",
        [
            {"ip": "bogus", "netmask": 24},
            {"ip": "10.0.0.1", "netmask": 33},
            {"ip": "10.0.0.1"},
            {"ip": "10.0.0.1", "netmask": True},
        ],
    )
    def test_bad_address(self, address: dict[str, Any]) -> None:
        """Test invalid addresses are reported with the interface name."""
        data = {"interfaces": [{"id": 0, "name": "eth0", "addresses": [address]}]}

        with pytest.raises(ConfigError, match="eth0"):
            parse_interfaces(data)


class TestParseBatches:
    """Tests for parse_batches function."""

    def test_batches(self, sample_config: dict[str, Any]) -> None:
        """Test batches keep their offsets and route order."""
        interfaces = parse_interfaces(sample_config)

        batches = parse_batches(sample_config, interfaces)

        assert [offset for offset, _ in batches] == [0, 100]
        first_routes = batches[0][1]
        assert [r.dst for r in first_routes] == ["0.0.0.0/0", "172.16.1.0/24", "172.16.1.0/26"]
        assert first_routes[2].interface is interfaces[1]

    def test_route_fields(self, sample_config: dict[str, Any]) -> None:
        """Test optional route fields and defaults."""
        interfaces = parse_interfaces(sample_config)

        v6_route = parse_batches(sample_config, interfaces)[1][1][0]

        assert v6_route.src == ""
        assert v6_route.priority == 0
        assert v6_route.next_hop == "2001:db8:1::1"
        assert v6_route.selector is SelectorKind.FIT

    def test_selector_defaults_to_none(self, sample_config: dict[str, Any]) -> None:
        """Test routes without a selector leave it unset."""
        interfaces = parse_interfaces(sample_config)

        route = parse_batches(sample_config, interfaces)[0][1][0]

        assert route.selector is None
        assert route.selector_kind() is SelectorKind.FIRST

    def test_top_level_routes(self, sample_config: dict[str, Any]) -> None:
        """Test a plain routes list becomes one batch with offset 0."""
        data = {
            "interfaces": sample_config["interfaces"],
            "routes": [{"interface": 1, "dst": "10.0.0.0/8"}],
        }
        interfaces = parse_interfaces(data)

        batches = parse_batches(data, interfaces)

        assert len(batches) == 1
        offset, routes = batches[0]
        assert offset == 0
        assert routes[0].dst == "10.0.0.0/8"

    def test_batch_offset_defaults_to_zero(self, sample_config: dict[str, Any]) -> None:
        """Test a batch without priority_offset uses the default."""
        data = copy.deepcopy(sample_config)
        del data["batches"][1]["priority_offset"]
        interfaces = parse_interfaces(data)

        assert parse_batches(data, interfaces)[1][0] == 0

    def test_malformed_dst_passes_through(self, sample_config: dict[str, Any]) -> None:
        """Test prefix syntax is left for the router to judge."""
        data = {"interfaces": sample_config["interfaces"],
                "routes": [{"interface": 0, "dst": "not-a-prefix"}]}

        routes = parse_batches(data, parse_interfaces(data))[0][1]

        assert routes[0].dst == "not-a-prefix"

    def test_missing_batches(self, sample_config: dict[str, Any]) -> None:
        """Test a document without routes is rejected."""
        data = {"interfaces": sample_config["interfaces"]}

        with pytest.raises(ConfigError, match="must be a list"):
            parse_batches(data, parse_interfaces(data))

    @pytest.mark.parametrize(
        "route, message",
        [
            ({"interface": 9, "dst": "10.0.0.0/8"}, "unknown interface 9"),
            ({"interface": "0", "dst": "10.0.0.0/8"}, "must be an integer id"),
            ({"interface": True, "dst": "10.0.0.0/8"}, "must be an integer id"),
            ({"interface": 0}, "destination must be a CIDR string"),
            ({"interface": 0, "dst": "10.0.0.0/8", "priority": "1"}, "priority must be an integer"),
            ({"interface": 0, "dst": "10.0.0.0/8", "selector": "best"}, "Unknown address selector"),
            ("10.0.0.0/8", "must be an object"),
        ],
    )
    def test_bad_route(
        self, sample_config: dict[str, Any], route: Any, message: str
    ) -> None:
        """Test malformed route entries are rejected."""
        data = {"interfaces": sample_config["interfaces"], "routes": [route]}

        with pytest.raises(ConfigError, match=message):
            parse_batches(data, parse_interfaces(data))

    @pytest.mark.parametrize("offset", ["100", 1.5, False])
    def test_bad_offset(self, sample_config: dict[str, Any], offset: Any) -> None:
        """Test non-integer offsets are rejected."""
        data = copy.deepcopy(sample_config)
        data["batches"][0]["priority_offset"] = offset

        with pytest.raises(ConfigError, match="priority_offset must be an integer"):
            parse_batches(data, parse_interfaces(data))
