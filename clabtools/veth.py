"""Parsing of veth endpoint references for the veth tool."""

from __future__ import annotations

from dataclasses import dataclass

from clabtools.exceptions import IncorrectInputError

SUPPORTED_KINDS = ("ovs-bridge", "bridge", "host")


@dataclass(frozen=True)
class VethEndpoint:
    """Where one side of a veth pair attaches."""

    kind: str
    node: str
    iface: str


def parse_veth_endpoint(s: str) -> VethEndpoint:
    """Parse ``<node>:<iface>`` or ``<kind>:<node>:<iface>``.

    Two-part references attach to a container, or to the host when the node
    is named "host".
    """
    parts = s.split(":")
    if len(parts) == 2:
        node, iface = parts
        return VethEndpoint("host" if node == "host" else "container", node, iface)
    if len(parts) == 3:
        kind, node, iface = parts
        if kind not in SUPPORTED_KINDS:
            supported = " ".join(f'"{k}"' for k in SUPPORTED_KINDS)
            raise IncorrectInputError(
                f"node type {kind} is not supported, supported nodes are [{supported}]"
            )
        return VethEndpoint(kind, node, iface)
    raise IncorrectInputError("malformed veth endpoint reference")