"""Tests for the logged file helpers."""

import json

import pandas as pd
import pytest

from dataviz_workshop.utils import file_io


def test_write_then_read_csv_creates_parents(tmp_path):
    df = pd.DataFrame({"ID": [1, 2], "BMI": [22.5, None]})
    path = file_io.write_csv(df, tmp_path / "a" / "b" / "survey.csv")
    assert path.exists()
    pd.testing.assert_frame_equal(file_io.read_csv(path), df)


def test_read_csv_missing_file_logs_and_raises(tmp_path, caplog):
    with pytest.raises(FileNotFoundError):
        file_io.read_csv(tmp_path / "nope.csv")
    assert "Failed to read CSV file" in caplog.text


def test_writers_log_failing_path(tmp_path, caplog):
    blocker = tmp_path / "taken"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(OSError):
        file_io.write_json({"participants": 3}, blocker / "summary.json")
    assert "Failed to write JSON file" in caplog.text
    assert str(blocker / "summary.json") in caplog.text
    with pytest.raises(OSError):
        file_io.write_csv(pd.DataFrame({"ID": [1]}), blocker / "survey.csv")
    assert "Failed to write CSV file" in caplog.text


def test_write_json_and_text(tmp_path):
    json_path = file_io.write_json({"participants": 3}, tmp_path / "out" / "summary.json")
    text_path = file_io.write_text("# Index\n", tmp_path / "out" / "index.md")
    assert json.loads(json_path.read_text(encoding="utf-8")) == {"participants": 3}
    assert text_path.read_text(encoding="utf-8") == "# Index\n"
