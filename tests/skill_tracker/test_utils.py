"""Tests for utility functions."""

import json
import os
from datetime import datetime, timedelta, timezone

import pytest

from skill_tracker.utils.file_storage import file_exists, load_json, save_json
from skill_tracker.utils.time_format import format_duration, format_timestamp


class TestFormatDuration:
    """Tests for duration formatting."""

    def test_minutes_only(self):
        """Test durations under an hour."""
        assert format_duration(0.25) == "15 min"
        assert format_duration(0.5) == "30 min"

    def test_zero(self):
        """Test that no time renders as minutes."""
        assert format_duration(0) == "0 min"

    def test_whole_hours(self):
        """Test durations on a whole hour."""
        assert format_duration(1) == "1 hr"
        assert format_duration(10000) == "10000 hr"

    def test_hours_and_minutes(self):
        """Test mixed durations."""
        assert format_duration(1.5) == "1 hr 30 min"
        assert format_duration(8.5) == "8 hr 30 min"
        assert format_duration(2.75) == "2 hr 45 min"

    def test_minute_conversion_round_trip(self):
        """Test that minute entries display as entered."""
        assert format_duration(45 / 60) == "45 min"
        assert format_duration(100 / 60) == "1 hr 40 min"

    def test_rounding_carries_into_next_hour(self):
        """Test that a value rounding to 60 minutes becomes the next hour."""
        assert format_duration(1.9999) == "2 hr 0 min"
        assert format_duration(0.9999) == "1 hr 0 min"
        assert format_duration(5.995) == "6 hr 0 min"

    def test_exact_hours_unaffected_by_carry(self):
        """Test that whole hours still omit the minutes."""
        assert format_duration(2) == "2 hr"
        assert format_duration(2.0001) == "2 hr"

    def test_rounds_half_minute_up(self):
        """Test that half a minute rounds up."""
        assert format_duration(0.375) == "23 min"


class TestFormatTimestamp:
    """Tests for timestamp formatting."""

    def test_formats_in_local_time(self):
        """Test that the timestamp is shown in local time."""
        ts = datetime(2024, 3, 1, 18, 30, tzinfo=timezone.utc)
        expected = ts.astimezone().strftime("%Y-%m-%d %H:%M")
        assert format_timestamp(ts) == expected

    def test_custom_format(self):
        """Test a custom strftime pattern."""
        ts = datetime(2024, 3, 1, 18, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(ts, "%Y") == "2024"


class TestFileStorageUtils:
    """Tests for JSON file storage utilities."""

    def test_save_and_load_json(self, tmp_path):
        """Test saving and loading a document."""
        filepath = str(tmp_path / "skills.json")
        data = [{"id": 1, "name": "Guitar", "hours": 0, "history": []}]

        save_json(data, filepath)
        assert load_json(filepath) == data

    def test_save_json_creates_directories(self, tmp_path):
        """Test that save_json creates parent directories."""
        filepath = str(tmp_path / "nested" / "dir" / "skills.json")

        save_json([], filepath)

        assert os.path.exists(filepath)
        assert load_json(filepath) == []

    def test_save_json_overwrites_existing(self, tmp_path):
        """Test that save_json replaces the previous snapshot."""
        filepath = str(tmp_path / "skills.json")

        save_json([1], filepath)
        save_json([2], filepath)

        assert load_json(filepath) == [2]

    def test_save_json_leaves_no_temp_files(self, tmp_path):
        """Test that the atomic write cleans up after itself."""
        save_json({"a": 1}, str(tmp_path / "skills.json"))
        assert os.listdir(tmp_path) == ["skills.json"]

    def test_save_json_failure_keeps_previous_file(self, tmp_path):
        """Test that an unserializable payload does not clobber the file."""
        filepath = str(tmp_path / "skills.json")
        save_json([1], filepath)

        with pytest.raises(TypeError):
            save_json([object()], filepath)

        assert load_json(filepath) == [1]
        assert os.listdir(tmp_path) == ["skills.json"]

    def test_relative_path_resolves_under_data_root(self, tmp_path, monkeypatch):
        """Test that relative paths land in the data root."""
        from skill_tracker.config import settings

        monkeypatch.setattr(settings, "data_root", str(tmp_path))
        resolved = save_json([], "skills.json")

        assert resolved == str(tmp_path / "skills.json")
        assert file_exists("skills.json") is True

    def test_load_json_not_found(self):
        """Test loading a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_json("/nonexistent/path/skills.json")

    def test_load_json_invalid(self, tmp_path):
        """Test loading a corrupt file raises a decode error."""
        filepath = tmp_path / "skills.json"
        filepath.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_json(str(filepath))

    def test_file_exists_false(self):
        """Test file_exists returns False for non-existent file."""
        assert file_exists("/nonexistent/path/file.txt") is False

    def test_save_json_with_unicode(self, tmp_path):
        """Test saving and loading unicode content."""
        filepath = str(tmp_path / "skills.json")
        data = [{"name": "Kanji 漢字"}]

        save_json(data, filepath)
        assert load_json(filepath) == data
