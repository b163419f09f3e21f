import pytest

from clabtools.exceptions import ClabError, IncorrectInputError
from clabtools.hostsfile import (
    append_hosts_file_entries,
    delete_entries_from_hosts_file,
    generate_hosts_entries,
)
from clabtools.inspect import Container


def _containers():
    return [
        Container(names=["clab-lab1-a"], ipv4_address="10.0.0.2", ipv6_address="fd00::2"),
        Container(names=["clab-lab1-b"], ipv4_address="10.0.0.3"),
        Container(names=[], ipv4_address="10.0.0.9"),
    ]


def test_generate_entries_layout():
    out = generate_hosts_entries(_containers(), "lab1")
    assert out == (
        "###### CLAB-lab1-START ######\n"
        "10.0.0.2\tclab-lab1-a\n"
        "10.0.0.3\tclab-lab1-b\n"
        "fd00::2\tclab-lab1-a\n"
        "###### CLAB-lab1-END ######\n"
    )


def test_append_then_delete_restores_file(tmp_path):
    hosts = tmp_path / "hosts"
    original = "127.0.0.1\tlocalhost\n::1\tlocalhost\n"
    hosts.write_text(original)
    append_hosts_file_entries(_containers(), "lab1", hosts)
    content = hosts.read_text()
    assert content.startswith(original)
    assert content.endswith(generate_hosts_entries(_containers(), "lab1"))
    delete_entries_from_hosts_file("lab1", hosts)
    assert hosts.read_text() == original


def test_append_twice_keeps_single_block(tmp_path):
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1\tlocalhost\n")
    append_hosts_file_entries(_containers(), "lab1", hosts)
    append_hosts_file_entries(_containers(), "lab1", hosts)
    assert hosts.read_text().count("CLAB-lab1-START") == 1


def test_append_creates_missing_file(tmp_path):
    hosts = tmp_path / "hosts"
    append_hosts_file_entries(_containers(), "lab1", hosts)
    content = hosts.read_text()
    assert content.splitlines()[0] == "127.0.0.1\tlocalhost"
    assert "10.0.0.3\tclab-lab1-b" in content


def test_delete_leaves_other_labs(tmp_path):
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1\tlocalhost\n")
    append_hosts_file_entries(_containers(), "lab1", hosts)
    append_hosts_file_entries(_containers(), "lab2", hosts)
    delete_entries_from_hosts_file("lab1", hosts)
    content = hosts.read_text()
    assert "CLAB-lab1-START" not in content
    assert content.endswith(generate_hosts_entries(_containers(), "lab2"))


def test_delete_unterminated_block_raises_and_keeps_file(tmp_path):
    hosts = tmp_path / "hosts"
    text = "127.0.0.1\tlocalhost\n###### CLAB-lab1-START ######\n10.0.0.2\tx\n"
    hosts.write_text(text)
    with pytest.raises(ClabError):
        delete_entries_from_hosts_file("lab1", hosts)
    assert hosts.read_text() == text


def test_missing_lab_name(tmp_path):
    with pytest.raises(IncorrectInputError):
        append_hosts_file_entries([], "", tmp_path / "hosts")
    with pytest.raises(IncorrectInputError):
        delete_entries_from_hosts_file("", tmp_path / "hosts")


def test_delete_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        delete_entries_from_hosts_file("lab1", tmp_path / "nope")