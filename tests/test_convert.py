import csv

import pytest

import convert

NESTED = """
<html><body>
  <table>
    <tr><td>Main Table Cell 1</td><td>
      <table><tr><td>Nested Table Cell 1</td></tr><tr><td>Nested Table Cell 2</td></tr></table>
    </td></tr>
    <tr><td>Main Table Cell 2</td><td>Main Table Cell 3</td></tr>
  </table>
</body></html>
"""


def _read(path):
    with path.open(encoding="utf-8", newline="") as fh:
        return list(csv.reader(fh))


def test_cli_extracts_tables(tmp_path, capsys):
    source = tmp_path / "page.html"
    source.write_text(NESTED, encoding="utf-8")
    out = tmp_path / "missing" / "dir"

    code = convert.main(["--input", str(source), "--output-dir", str(out)])

    assert code == 0
    assert "Successfully extracted 2 tables!" in capsys.readouterr().out
    assert _read(out / "table_1.csv") == [
        ["Main Table Cell 1", ""],
        ["Main Table Cell 2", "Main Table Cell 3"],
    ]
    assert _read(out / "table_2.csv") == [["Nested Table Cell 1"], ["Nested Table Cell 2"]]


def test_cli_no_tables(tmp_path, capsys):
    source = tmp_path / "plain.html"
    source.write_text("<html><body><p>hi</p></body></html>", encoding="utf-8")

    code = convert.main(["-i", str(source), "-o", str(tmp_path / "out")])

    assert code == 0
    assert "No tables found in the input source." in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


def test_cli_missing_input_exits_non_zero(tmp_path, capsys):
    code = convert.main(["-i", str(tmp_path / "absent.html"), "-o", str(tmp_path)])

    err = capsys.readouterr().err
    assert code == 1
    assert err.startswith("Error: Failed to read")
    assert "caused by: FileNotFoundError" in err


def test_cli_debug_prints_grid_trace(tmp_path, capsys):
    source = tmp_path / "page.html"
    source.write_text('<table><tr><td colspan="2">M</td></tr></table>', encoding="utf-8")

    code = convert.main(["-i", str(source), "-o", str(tmp_path), "--debug"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Columns: 2, Cells: \"['M', 2, 1], ['', 2, 1]\"" in out
    assert "Writing CSV file:" in out
    assert "| M |  |" in out


def test_cli_requires_input(capsys):
    with pytest.raises(SystemExit) as excinfo:
        convert.main([])

    assert excinfo.value.code == 2


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        convert.main(["--version"])

    assert excinfo.value.code == 0
    assert convert.__version__ in capsys.readouterr().out
