"""Tests for JSON persistence."""

import json
from dataclasses import replace

import pytest

from pysysinfo.errors import PersistenceError
from pysysinfo.models import SystemSnapshot
from pysysinfo.storage import DEFAULT_OUTPUT_PATH, load_snapshot, save_snapshot


def test_default_output_path():
    """Test snapshots are saved to system-info.json in the working directory."""
    assert str(DEFAULT_OUTPUT_PATH) == "system-info.json"


def test_save_writes_indented_json(snapshot, tmp_path):
    """Test the file holds two-space indented JSON with the five keys."""
    path = save_snapshot(snapshot, tmp_path / "system-info.json")

    text = path.read_text(encoding="utf-8")
    data = json.loads(text)

    assert list(data) == ["cpu_info", "mem_info", "disk_info", "host_info", "net_info"]
    assert data == snapshot.to_dict()
    assert data["mem_info"]["used"] == 500
    assert text.startswith('{\n  "cpu_info": [\n    {\n')


def test_save_overwrites_existing_file(snapshot, tmp_path):
    """Test an existing file is replaced, not appended to."""
    target = tmp_path / "system-info.json"
    target.write_text("stale contents that are longer than nothing" * 100)

    save_snapshot(snapshot, target)

    assert json.loads(target.read_text()) == snapshot.to_dict()


def test_save_then_load_round_trip(snapshot, tmp_path):
    """Test a saved snapshot loads back field for field."""
    target = save_snapshot(snapshot, tmp_path / "system-info.json")

    assert load_snapshot(target) == snapshot


def test_save_into_missing_directory(snapshot, tmp_path):
    """Test a write failure is reported as a persistence error."""
    target = tmp_path / "no-such-dir" / "system-info.json"

    with pytest.raises(PersistenceError) as excinfo:
        save_snapshot(snapshot, target)

    assert excinfo.value.step == "write"
    assert excinfo.value.path == target
    assert not target.exists()


def test_load_missing_file(tmp_path):
    """Test reading a file that does not exist."""
    with pytest.raises(PersistenceError) as excinfo:
        load_snapshot(tmp_path / "absent.json")

    assert excinfo.value.step == "read"


@pytest.mark.parametrize(
    "contents",
    [
        "{not json",
        "[1, 2, 3]",
        '{"cpu_info": [{"cpu": 0}]}',
    ],
)
def test_load_malformed_file(tmp_path, contents):
    """Test malformed or mismatched contents fail at decode."""
    target = tmp_path / "system-info.json"
    target.write_text(contents)

    with pytest.raises(PersistenceError) as excinfo:
        load_snapshot(target)

    assert excinfo.value.step == "decode"


def test_empty_snapshot_serializes_nulls(tmp_path):
    """Test unpopulated records are written as null."""
    target = save_snapshot(SystemSnapshot(), tmp_path / "system-info.json")

    data = json.loads(target.read_text())

    assert data == {
        "cpu_info": [],
        "mem_info": None,
        "disk_info": None,
        "host_info": None,
        "net_info": [],
    }


def test_non_ascii_written_as_utf8(snapshot, tmp_path):
    """Test non-ASCII hostnames are stored as UTF-8 text, not escapes."""
    host = replace(snapshot.host_info, hostname="hôte-münchen")
    target = save_snapshot(replace(snapshot, host_info=host), tmp_path / "system-info.json")

    text = target.read_text(encoding="utf-8")

    assert '"hostname": "hôte-münchen"' in text
    assert "\\u" not in text
