from pathlib import Path

import pytest

from clabtools.exceptions import ClabError
from clabtools.topofile import find_topology_file, read_template_variables


def test_no_vars_file_returns_none(tmp_path):
    topo = tmp_path / "lab.clab.yml"
    topo.write_text("name: lab\n")
    assert read_template_variables(str(topo)) is None


def test_vars_file_found_next_to_topology(tmp_path):
    topo = tmp_path / "lab.clab.yml"
    topo.write_text("name: lab\n")
    (tmp_path / "lab.clab_vars.yaml").write_text("count: 3\nnames: [a, b]\n")
    assert read_template_variables(str(topo)) == {"count": 3, "names": ["a", "b"]}


def test_yaml_extension_takes_precedence_over_json(tmp_path):
    topo = tmp_path / "lab.clab.yml"
    topo.write_text("name: lab\n")
    (tmp_path / "lab.clab_vars.json").write_text('{"source": "json"}')
    (tmp_path / "lab.clab_vars.yaml").write_text("source: yaml\n")
    assert read_template_variables(str(topo)) == {"source": "yaml"}


def test_json_vars_file(tmp_path):
    topo = tmp_path / "lab.clab.yml"
    topo.write_text("name: lab\n")
    (tmp_path / "lab.clab_vars.json").write_text('{"n": 2}')
    assert read_template_variables(topo) == {"n": 2}


def test_explicit_vars_file(tmp_path):
    vars_file = tmp_path / "custom.yml"
    vars_file.write_text("key: value\n")
    assert read_template_variables(tmp_path / "lab.clab.yml", vars_file) == {"key": "value"}


def test_explicit_missing_vars_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_template_variables(tmp_path / "lab.clab.yml", tmp_path / "missing.yml")


def test_find_single_topology_file(tmp_path):
    (tmp_path / "lab.clab.yaml").write_text("name: lab\n")
    (tmp_path / "other.yml").write_text("x: 1\n")
    found = find_topology_file(tmp_path)
    assert Path(found) == tmp_path / "lab.clab.yaml"


def test_find_no_topology_file_raises(tmp_path):
    with pytest.raises(ClabError):
        find_topology_file(tmp_path)


def test_find_multiple_topology_files_raises(tmp_path):
    (tmp_path / "a.clab.yml").write_text("name: a\n")
    (tmp_path / "b.clab.yaml").write_text("name: b\n")
    with pytest.raises(ClabError, match="more than one"):
        find_topology_file(tmp_path)