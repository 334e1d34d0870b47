"""Configuration loading.

Reads interfaces and route batches from a JSON document and builds
model objects. Everything that can be wrong with the document is
reported as ConfigError.
"""

import json
from pathlib import Path
from typing import Any

import config
from enums import SelectorKind
from errors import ConfigError
from logging_config import get_logger
from models import Interface, InterfaceAddress, Route
from utils import sanitize_for_log, validate_interface_name

logger = get_logger(__name__)


def load_config(path: Path) -> dict[str, Any]:
    """Read and decode a JSON configuration file.

    Args:
        path: Configuration file path

    Returns:
        Decoded top-level object.

    Raises:
        ConfigError: File unreadable, not UTF-8, not JSON, or not a JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not UTF-8 text: {e.reason}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be an object")

    return data


def parse_interfaces(data: dict[str, Any]) -> dict[int, Interface]:
    """Build Interface objects keyed by id.

    Raises:
        ConfigError: Missing fields, bad names or addresses, duplicate ids.
    """
    raw_interfaces = data.get(config.CONFIG_INTERFACES_KEY)
    if not isinstance(raw_interfaces, list) or not raw_interfaces:
        raise ConfigError(f"'{config.CONFIG_INTERFACES_KEY}' must be a non-empty list")

    interfaces: dict[int, Interface] = {}
    for raw in raw_interfaces:
        iface = _parse_interface(raw)
        if iface.id in interfaces:
            raise ConfigError(f"Duplicate interface id {iface.id}")
        interfaces[iface.id] = iface
        logger.debug(
            "Interface %d (%s): %d addresses",
            iface.id,
            sanitize_for_log(iface.name),
            len(iface.addresses),
        )

    return interfaces


def _parse_interface(raw: Any) -> Interface:
    if not isinstance(raw, dict):
        raise ConfigError(f"Interface entry must be an object, got {raw!r}")

    iface_id = raw.get("id")
    if not isinstance(iface_id, int) or isinstance(iface_id, bool):
        raise ConfigError(f"Interface id must be an integer, got {iface_id!r}")

    name = raw.get("name")
    if not validate_interface_name(name):
        raise ConfigError(f"Invalid interface name {name!r}")

    raw_addresses = raw.get("addresses", [])
    if not isinstance(raw_addresses, list):
        raise ConfigError(f"Addresses of {name} must be a list, got {raw_addresses!r}")

    addresses = []
    for raw_address in raw_addresses:
        if not isinstance(raw_address, dict):
            raise ConfigError(f"Address entry of {name} must be an object")
        try:
            addresses.append(
                InterfaceAddress.create(
                    ip=raw_address.get("ip"),
                    netmask=raw_address.get("netmask"),
                    broadcast=raw_address.get("broadcast"),
                    gateway=raw_address.get("gateway"),
                )
            )
        except ValueError as e:
            raise ConfigError(f"Interface {name}: {e}") from e

    return Interface(id=iface_id, name=name, addresses=tuple(addresses))


def parse_batches(
    data: dict[str, Any], interfaces: dict[int, Interface]
) -> list[tuple[int, list[Route]]]:
    """Build route batches as (priority_offset, routes) pairs.

    A top-level "routes" list is accepted as one batch with the default
    priority offset. Destination prefixes are not parsed here; the
    router rejects malformed ones when the batch is added.

    Raises:
        ConfigError: Bad structure or unknown interface reference.
    """
    raw_batches = data.get(config.CONFIG_BATCHES_KEY)
    if raw_batches is None and config.CONFIG_ROUTES_KEY in data:
        raw_batches = [{config.CONFIG_ROUTES_KEY: data[config.CONFIG_ROUTES_KEY]}]

    if not isinstance(raw_batches, list):
        raise ConfigError(
            f"'{config.CONFIG_BATCHES_KEY}' or '{config.CONFIG_ROUTES_KEY}' must be a list"
        )

    batches = []
    for raw_batch in raw_batches:
        if not isinstance(raw_batch, dict):
            raise ConfigError(f"Batch entry must be an object, got {raw_batch!r}")

        offset = raw_batch.get("priority_offset", config.DEFAULT_PRIORITY_OFFSET)
        if not isinstance(offset, int) or isinstance(offset, bool):
            raise ConfigError(f"priority_offset must be an integer, got {offset!r}")

        raw_routes = raw_batch.get(config.CONFIG_ROUTES_KEY, [])
        if not isinstance(raw_routes, list):
            raise ConfigError(f"'{config.CONFIG_ROUTES_KEY}' of a batch must be a list")

        batches.append((offset, [_parse_route(raw, interfaces) for raw in raw_routes]))

    return batches


def _parse_route(raw: Any, interfaces: dict[int, Interface]) -> Route:
    if not isinstance(raw, dict):
        raise ConfigError(f"Route entry must be an object, got {raw!r}")

    iface_id = raw.get("interface")
    if not isinstance(iface_id, int) or isinstance(iface_id, bool):
        raise ConfigError(f"Route interface must be an integer id, got {iface_id!r}")
    if iface_id not in interfaces:
        raise ConfigError(f"Route references unknown interface {iface_id!r}")

    dst = raw.get("dst")
    if not isinstance(dst, str):
        raise ConfigError(f"Route destination must be a CIDR string, got {dst!r}")

    priority = raw.get("priority", 0)
    if not isinstance(priority, int) or isinstance(priority, bool):
        raise ConfigError(f"Route priority must be an integer, got {priority!r}")

    selector = raw.get("selector")
    if selector is not None:
        try:
            selector = SelectorKind(selector)
        except ValueError as e:
            raise ConfigError(f"Unknown address selector {selector!r}") from e

    return Route(
        interface=interfaces[iface_id],
        dst=dst,
        src=raw.get("src") or "",
        priority=priority,
        next_hop=raw.get("next_hop"),
        selector=selector,
    )
