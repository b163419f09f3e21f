# clabtools

A library of helpers for container-based network labs. It can generate Clos
topology definitions. It can add and remove a lab's block of entries in a
hosts file. It can summarise lab containers as a table or JSON, and it can
collect the results of commands run inside containers. It can also parse veth
endpoint references and find topology files and their template variables.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `clabtools.generate`: `parse_flag`, `parse_nodes_flag`, `NodesDef`,
  `generate_topology_config` and `save_topo_file`.
- `clabtools.execution`: `ExecFormat`, `parse_exec_output_format`, `ExecCmd`,
  `ExecResult`, `ExecCollection` and `ExecNotSupportedError`.
- `clabtools.inspect`: `Container`, `ContainerDetails`, `container_details`,
  `to_table_data` and `format_inspect`.
- `clabtools.hostsfile`: `generate_hosts_entries`,
  `append_hosts_file_entries` and `delete_entries_from_hosts_file`. The hosts
  path defaults to `/etc/hosts`.
- `clabtools.topofile`: `read_template_variables` and `find_topology_file`.
- `clabtools.veth`: `VethEndpoint` and `parse_veth_endpoint`.
- `clabtools.labels`: the label names put on lab containers.
- `clabtools.exceptions`: `ClabError` and its subclasses
  `LabFileNotFoundError`, `IncorrectInputError`, `DuplicatedValueError` and
  `GenerateSyntaxError`.

## Examples

Generate a two-stage Clos topology as YAML:

```python
from clabtools.generate import generate_topology_config, parse_flag, parse_nodes_flag

nodes = parse_nodes_flag("srl", ["2", "4"])
images = parse_flag("srl", ["ghcr.io/nokia/srlinux"])
print(generate_topology_config("lab1", images=images, nodes=nodes))
```

Every node of a stage is linked to every node of the next stage. Nodes are
named `<node_prefix><stage>-<n>` and grouped as `<group_prefix>-<stage>`.
The prefixes default to `node` and `tier`.

Collect exec results and dump them:

```python
from clabtools.execution import ExecCmd, ExecCollection, ExecResult, parse_exec_output_format

fmt = parse_exec_output_format("json")
cmd = ExecCmd.from_string("ip -br a")
results = ExecCollection()
results.add("clab-lab1-node1", ExecResult(cmd=cmd.cmd, stdout="{}"))
print(results.dump(fmt))
```

If stdout is valid JSON, it is embedded as JSON in the JSON dump. Otherwise it
is kept as a string.

Maintain the hosts file block of a lab:

```python
from clabtools.hostsfile import append_hosts_file_entries, delete_entries_from_hosts_file
from clabtools.inspect import Container

containers = [Container(names=["clab-lab1-node1"], ipv4_address="172.20.20.2")]
append_hosts_file_entries(containers, "lab1", "hosts.txt")
delete_entries_from_hosts_file("lab1", "hosts.txt")
```

## What it does not do

This is a library only. It installs no command-line program. It does not talk
to a container runtime, create or delete containers, or set up links,
namespaces, bridges or VxLAN tunnels. The veth module parses endpoint
references but does not wire them. The package also does not render topology
templates, write Ansible inventories, draw topology graphs, serve a web view
or check for new releases.