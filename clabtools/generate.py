"""Generation of Clos topology definitions from command line style flags."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import yaml

from clabtools.exceptions import DuplicatedValueError, GenerateSyntaxError, IncorrectInputError

_log = logging.getLogger(__name__)

INTERFACE_FORMAT = {
    "srl": "e1-{}",
    "ceos": "eth{}",
    "crpd": "eth{}",
    "sonic-vs": "eth{}",
    "linux": "eth{}",
    "bridge": "veth{}",
    "vr-sros": "eth{}",
    "vr-vmx": "eth{}",
    "vr-vsrx": "eth{}",
    "vr-vqfx": "eth{}",
    "vr-xrv9k": "eth{}",
    "vr-veos": "eth{}",
    "xrd": "eth{}",
    "rare": "eth{}",
}

SUPPORTED_KINDS = (
    "srl", "ceos", "linux", "bridge", "sonic-vs", "crpd", "vr-sros",
    "vr-vmx", "vr-vsrx", "vr-vqfx", "vr-xrv9k", "vr-veos", "xrd", "rare",
)

DEFAULT_SRL_TYPE = "ixrd2"
DEFAULT_NODE_PREFIX = "node"
DEFAULT_GROUP_PREFIX = "tier"

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class NodesDef:
    """One stage of a Clos network: how many nodes, of which kind and type."""

    num_nodes: int
    kind: str
    typ: str = ""


def parse_flag(kind: str, items: Iterable[str]) -> dict[str, str]:
    """Parse "<kind>=<value>" items; bare values are assigned to the default kind."""
    result: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep:
            if not kind:
                _log.error("no kind specified for flag item '%s'", item)
                raise GenerateSyntaxError()
            key, value = kind, item
        if key in result:
            _log.error("duplicated flag item for kind '%s'", key)
            raise DuplicatedValueError()
        result[key] = value
    return result


def parse_nodes_flag(kind: str, nodes: Sequence[str] | None) -> list[NodesDef]:
    """Parse stage definitions in the form <num_nodes>[:<kind>[:<type>]]."""
    if not nodes:
        _log.error("no nodes specified using --nodes")
        raise GenerateSyntaxError()
    result = []
    for spec in nodes:
        items = spec.split(":", 2)
        if not _INT_RE.fullmatch(items[0]) or int(items[0]) < 0:
            _log.error("failed converting '%s' to a node count", items[0])
            raise GenerateSyntaxError()
        count = int(items[0])
        if len(items) == 1:
            if not kind:
                _log.error("no kind specified for nodes '%s'", spec)
                raise GenerateSyntaxError()
            result.append(NodesDef(count, kind))
        elif len(items) == 2:
            if not kind:
                _log.error("no kind specified for nodes '%s'", spec)
                raise GenerateSyntaxError()
            result.append(NodesDef(count, items[1]))
        else:
            result.append(NodesDef(count, items[1] or kind, items[2]))
    return result


def _interface(kind: str, index: int) -> str:
    try:
        return INTERFACE_FORMAT[kind].format(index)
    except KeyError:
        raise IncorrectInputError(f"no interface naming known for kind '{kind}'") from None


def _node_definition(group: str, node: NodesDef) -> dict[str, str]:
    definition = {"kind": node.kind, "group": group, "type": node.typ}
    return {k: v for k, v in definition.items() if v}


def _is_set(value: str | None) -> bool:
    return bool(value) and value != "<nil>"


def generate_topology_config(
    name: str,
    network: str = "",
    ipv4_subnet: str | None = None,
    ipv6_subnet: str | None = None,
    images: Mapping[str, str] | None = None,
    licenses: Mapping[str, str] | None = None,
    nodes: Sequence[NodesDef] = (),
    node_prefix: str = DEFAULT_NODE_PREFIX,
    group_prefix: str = DEFAULT_GROUP_PREFIX,
) -> str:
    """Build a Clos topology where each stage is fully meshed with the next one."""
    mgmt: dict[str, str] = {}
    if network:
        mgmt["network"] = network
    if _is_set(ipv4_subnet):
        mgmt["ipv4-subnet"] = ipv4_subnet  # type: ignore[assignment]
    if _is_set(ipv6_subnet):
        mgmt["ipv6-subnet"] = ipv6_subnet  # type: ignore[assignment]

    kinds: dict[str, dict[str, str]] = {}
    for kind, image in (images or {}).items():
        kinds[kind] = {"image": image}
    for kind, lic in (licenses or {}).items():
        kinds.setdefault(kind, {})["license"] = lic

    topo_nodes: dict[str, dict[str, str]] = {}
    links: list[dict[str, list[str]]] = []

    if len(nodes) == 1:
        for j in range(nodes[0].num_nodes):
            topo_nodes.setdefault(
                f"{node_prefix}1-{j + 1}", _node_definition(f"{group_prefix}-1", nodes[0])
            )

    for i, (stage, next_stage) in enumerate(zip(nodes, nodes[1:])):
        offset = nodes[i - 1].num_nodes if i > 0 else 0
        for j in range(stage.num_nodes):
            node1 = f"{node_prefix}{i + 1}-{j + 1}"
            topo_nodes.setdefault(node1, _node_definition(f"{group_prefix}-{i + 1}", stage))
            for k in range(next_stage.num_nodes):
                node2 = f"{node_prefix}{i + 2}-{k + 1}"
                topo_nodes.setdefault(
                    node2, _node_definition(f"{group_prefix}-{i + 2}", next_stage)
                )
                links.append({"endpoints": [
                    f"{node1}:{_interface(stage.kind, k + 1 + offset)}",
                    f"{node2}:{_interface(next_stage.kind, j + 1)}",
                ]})

    topology: dict[str, Any] = {}
    if kinds:
        topology["kinds"] = {k: kinds[k] for k in sorted(kinds)}
    if topo_nodes:
        topology["nodes"] = {k: topo_nodes[k] for k in sorted(topo_nodes)}
    if links:
        topology["links"] = links

    config = {"name": name, "mgmt": mgmt, "topology": topology}
    return yaml.safe_dump(config, sort_keys=False, default_flow_style=False)


def save_topo_file(path: str | Path, data: str | bytes) -> None:
    """Write the topology to path, replacing any previous content."""
    path = Path(path)
    if isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(data)