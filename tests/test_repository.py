"""Tests for reading time entry exports."""

import json

import pendulum
import pytest

from dayslice.model.skipped_entry import SkipReason
from dayslice.repository.time_entry import EntriesFileError, TimeEntryRepository


def test_reads_yaml_list_of_entries(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        """
- id: e1
  start_at: "2024-01-01T09:00:00+09:00"
  end_at: "2024-01-01T10:30:00+09:00"
  duration_minutes: 5
  category_id: work
  category_name: Work
  category_color: "#FF0000"
  note: standup
  task_title: Write report
  source: manual
- id: e2
  start_at: "2024-01-01T11:00:00Z"
"""
    )

    entries = TimeEntryRepository(path).get_all_time_entries()

    assert len(entries) == 2
    first, second = entries
    assert first["id"] == "e1"
    assert first["start_at"] == pendulum.datetime(2024, 1, 1, 0, tz="UTC")
    assert first["end_at"] == pendulum.datetime(2024, 1, 1, 1, 30, tz="UTC")
    assert first["duration_minutes"] == 5
    assert first["task_title"] == "Write report"
    assert first["source"] == "manual"
    assert second["end_at"] is None
    assert second["category_id"] is None


def test_reads_api_json_with_nested_category_and_task(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text(
        json.dumps(
            {
                "entries": [
                    {
                        "id": "e1",
                        "start_at": "2024-01-01T09:00:00Z",
                        "end_at": "2024-01-01T10:00:00Z",
                        "category": {"id": "c1", "name": "Deep work", "color": "#123456"},
                        "task": {"title": "Refactor"},
                    },
                    {
                        "id": "e2",
                        "start_at": "2024-01-01T11:00:00Z",
                        "end_at": None,
                        "category": None,
                        "category_id_snapshot": "c2",
                    },
                ]
            }
        )
    )

    first, second = TimeEntryRepository(path).get_all_time_entries()

    assert first["category_id"] == "c1"
    assert first["category_name"] == "Deep work"
    assert first["category_color"] == "#123456"
    assert first["task_title"] == "Refactor"
    assert second["category_id"] == "c2"


def test_unquoted_yaml_timestamps_are_read(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        """
- id: e1
  start_at: 2024-01-01T09:00:00+09:00
  end_at: 2024-01-01 02:00:00
"""
    )

    (entry,) = TimeEntryRepository(path).get_all_time_entries()

    assert entry["start_at"] == pendulum.datetime(2024, 1, 1, 0, tz="UTC")
    assert entry["end_at"] == pendulum.datetime(2024, 1, 1, 2, tz="UTC")


def test_unreadable_records_are_skipped(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        """
- id: bad
  start_at: not a timestamp
- just a string
- id: good
  start_at: "2024-01-01T09:00:00Z"
"""
    )
    repository = TimeEntryRepository(path)

    entries = repository.get_all_time_entries()
    skipped = repository.get_skipped_entries()

    assert [entry["id"] for entry in entries] == ["good"]
    assert len(skipped) == 2
    assert {item["reason"] for item in skipped} == {SkipReason.UNPARSABLE_RECORD}


def test_missing_id_gets_generated(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text('- start_at: "2024-01-01T09:00:00Z"\n')

    (entry,) = TimeEntryRepository(path).get_all_time_entries()

    assert isinstance(entry["id"], str) and len(entry["id"]) > 0


def test_empty_file_has_no_entries(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("")

    assert TimeEntryRepository(path).get_all_time_entries() == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(EntriesFileError):
        TimeEntryRepository(tmp_path / "missing.yaml").get_all_time_entries()


def test_non_list_document_raises(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("entries: 42\n")

    with pytest.raises(EntriesFileError):
        TimeEntryRepository(path).get_all_time_entries()
