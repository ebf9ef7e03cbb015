import csv

import pytest

from csv_emitter import emit
from errors import OutputError
from models import NormalizedTable


def _read(path):
    with path.open(encoding="utf-8", newline="") as fh:
        return list(csv.reader(fh))


def test_emit_writes_one_file_per_table(tmp_path):
    tables = [
        NormalizedTable(rows=[["A1", "A2"], ["A3", "A4"]]),
        NormalizedTable(rows=[["B1"]], depth=1),
    ]

    written = emit(tables, tmp_path)

    assert written == [tmp_path / "table_1.csv", tmp_path / "table_2.csv"]
    assert _read(tmp_path / "table_1.csv") == [["A1", "A2"], ["A3", "A4"]]
    assert _read(tmp_path / "table_2.csv") == [["B1"]]


def test_emit_creates_missing_directories(tmp_path):
    out = tmp_path / "nested" / "out"

    emit([NormalizedTable(rows=[["x"]])], out)

    assert out.is_dir()
    assert _read(out / "table_1.csv") == [["x"]]


def test_emit_quotes_per_rfc4180(tmp_path):
    emit([NormalizedTable(rows=[['a, b', 'say "hi"', ""]])], tmp_path)

    raw = (tmp_path / "table_1.csv").read_bytes()
    assert raw == b'"a, b","say ""hi""",\r\n'


def test_emit_overwrites_existing_files(tmp_path):
    (tmp_path / "table_1.csv").write_text("stale\n", encoding="utf-8")

    emit([NormalizedTable(rows=[["fresh"]])], tmp_path)

    assert _read(tmp_path / "table_1.csv") == [["fresh"]]


def test_emit_writes_utf8(tmp_path):
    emit([NormalizedTable(rows=[["Ünïcödé", "日本"]])], tmp_path)

    assert (tmp_path / "table_1.csv").read_bytes() == "Ünïcödé,日本\r\n".encode("utf-8")


def test_emit_directory_blocked_by_file(tmp_path):
    blocker = tmp_path / "out"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OutputError) as excinfo:
        emit([NormalizedTable(rows=[["x"]])], blocker)

    assert excinfo.value.stage == "create directory"
    assert excinfo.value.target == str(blocker)


def test_emit_file_blocked_by_directory(tmp_path):
    (tmp_path / "table_1.csv").mkdir()

    with pytest.raises(OutputError) as excinfo:
        emit([NormalizedTable(rows=[["x"]])], tmp_path)

    assert excinfo.value.stage == "create file"
