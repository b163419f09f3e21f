"""Summaries of running lab containers."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from typing import Iterable

from tabulate import tabulate

from clabtools import labels

_HEADER = [
    "Lab Name",
    "Name",
    "Container ID",
    "Image",
    "Kind",
    "State",
    "IPv4 Address",
    "IPv6 Address",
]


@dataclass
class Container:
    """A container as reported by the runtime."""

    names: list[str] = field(default_factory=list)
    image: str = ""
    state: str = ""
    status: str = ""
    short_id: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    ipv4_address: str = ""
    ipv6_address: str = ""


@dataclass
class ContainerDetails:
    """Display details of one lab container."""

    lab_name: str = ""
    lab_path: str = ""
    name: str = ""
    container_id: str = ""
    image: str = ""
    kind: str = ""
    group: str = ""
    state: str = ""
    ipv4_address: str = ""
    ipv6_address: str = ""


def _relative_path(target: str, cwd: str) -> str:
    if not target or os.path.isabs(target) != os.path.isabs(cwd):
        return ""
    try:
        return os.path.relpath(target, cwd)
    except ValueError:
        return ""


def container_details(
    containers: Iterable[Container], cwd: str | None = None
) -> list[ContainerDetails]:
    """Build details for containers, sorted by lab name then container name."""
    cwd = cwd if cwd is not None else os.getcwd()
    details = [
        ContainerDetails(
            lab_name=c.labels.get(labels.CONTAINERLAB, ""),
            lab_path=_relative_path(c.labels.get(labels.TOPO_FILE, ""), cwd),
            name=c.names[0] if c.names else "",
            container_id=c.short_id,
            image=c.image,
            kind=c.labels.get(labels.NODE_KIND, ""),
            group=c.labels.get(labels.NODE_GROUP, ""),
            state=c.state,
            ipv4_address=c.ipv4_address,
            ipv6_address=c.ipv6_address,
        )
        for c in containers
    ]
    details.sort(key=lambda d: (d.lab_name, d.name))
    return details


def to_table_data(
    details: Iterable[ContainerDetails], all_labs: bool = False
) -> list[list[str]]:
    """Rows for the inspect table; lab path and name are included for all labs."""
    rows = []
    for index, d in enumerate(details, start=1):
        lead = [str(index)]
        if all_labs:
            lead += [d.lab_path, d.lab_name]
        rows.append(
            lead
            + [d.name, d.container_id, d.image, d.kind, d.state,
               d.ipv4_address, d.ipv6_address]
        )
    return rows


def _merge_cells(rows: list[list[str]], columns: Iterable[int]) -> list[list[str]]:
    """Blank cells that repeat the value directly above them."""
    merged = [list(r) for r in rows]
    for col in columns:
        for prev, cur, out in zip(rows, rows[1:], merged[1:]):
            if cur[col] == prev[col]:
                out[col] = ""
    return merged


def format_inspect(
    containers: Iterable[Container],
    fmt: str = "table",
    all_labs: bool = False,
    cwd: str | None = None,
) -> str:
    """Render containers as a table or JSON; unknown formats render nothing."""
    details = container_details(containers, cwd)
    if fmt == "json":
        return json.dumps({"containers": [asdict(d) for d in details]}, indent=2)
    if fmt == "table":
        if all_labs:
            header = ["#", "Topo Path"] + _HEADER
        else:
            header = ["#"] + _HEADER[1:]
        rows = _merge_cells(to_table_data(details, all_labs), (1, 2))
        return tabulate(rows, headers=header, tablefmt="pretty", disable_numparse=True)
    return ""