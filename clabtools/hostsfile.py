"""Management of lab entries in the hosts file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from clabtools.exceptions import ClabError, IncorrectInputError
from clabtools.inspect import Container

HOSTS_FILENAME = "/etc/hosts"


def _prefix(labname: str) -> str:
    return f"###### CLAB-{labname}-START ######"


def _postfix(labname: str) -> str:
    return f"###### CLAB-{labname}-END ######"


def generate_hosts_entries(containers: Iterable[Container], labname: str) -> str:
    """Hosts-file block for the containers: IPv4 entries first, then IPv6."""
    v4: list[str] = []
    v6: list[str] = []
    for c in containers:
        if not c.names:
            continue
        if c.ipv4_address:
            v4.append(f"{c.ipv4_address}\t{c.names[0]}\n")
        if c.ipv6_address:
            v6.append(f"{c.ipv6_address}\t{c.names[0]}\n")
    return f"{_prefix(labname)}\n" + "".join(v4) + "".join(v6) + f"{_postfix(labname)}\n"


def append_hosts_file_entries(
    containers: Iterable[Container], labname: str, path: str | Path = HOSTS_FILENAME
) -> None:
    """Replace any stale block for the lab and append a fresh one."""
    if not labname:
        raise IncorrectInputError("missing lab name")
    path = Path(path)
    if not path.exists():
        path.write_text("127.0.0.1\tlocalhost\n")
    delete_entries_from_hosts_file(labname, path)
    data = generate_hosts_entries(containers, labname)
    with path.open("a") as f:
        f.write(data)


def delete_entries_from_hosts_file(labname: str, path: str | Path = HOSTS_FILENAME) -> None:
    """Remove the lab's block; leaves the file untouched if the block is unterminated."""
    if not labname:
        raise IncorrectInputError("missing containerlab name")
    path = Path(path)
    prefix, postfix = _prefix(labname), _postfix(labname)
    kept: list[str] = []
    skipping = False
    with path.open() as f:
        for line in f:
            stripped = line.strip()
            if stripped == postfix:
                skipping = False
                continue
            if stripped == prefix or skipping:
                skipping = True
                continue
            kept.append(line)
    if skipping:
        raise ClabError(f"issue cleaning up {path} file. Please do so manually")
    path.write_text("".join(kept))