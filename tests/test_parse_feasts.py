import csv

from openpyxl import load_workbook

import parse_feasts


def _write_input(tmp_path, *lines):
    path = tmp_path / "saints.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_main_writes_table_and_reports_counts(tmp_path, capsys):
    src = _write_input(tmp_path, "Maria ep.", "Barbara v. m.\t04/Dec.")
    out = tmp_path / "out.csv"

    assert parse_feasts.main([str(src), "-o", str(out)]) == 0

    with open(out, encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    assert [r[0] for r in rows] == ["Name", "Maria", "Barbara"]

    captured = capsys.readouterr()
    assert "Parsed 2 lines" in captured.out
    assert f"Wrote {out}" in captured.out
    assert captured.err == ""


def test_main_prints_warnings_and_keeps_going(tmp_path, capsys):
    src = _write_input(tmp_path, "Maria % ep.", "Lucia v. 13/Dec.")
    out = tmp_path / "out.csv"

    assert parse_feasts.main([str(src), "-o", str(out)]) == 0

    captured = capsys.readouterr()
    assert "WARNING: found the following errors: [['%']]" in captured.err
    assert "WARNING: line not consumed:" in captured.err
    assert "1 lines were not parsed cleanly" in captured.out

    with open(out, encoding="utf-8", newline="") as f:
        assert len(list(csv.reader(f))) == 3


def test_main_quiet_and_strict(tmp_path, capsys):
    src = _write_input(tmp_path, "Maria (A) 01/Jan. (B)")
    out = tmp_path / "out.csv"

    assert parse_feasts.main([str(src), "-o", str(out), "--strict", "--quiet"]) == 2
    assert capsys.readouterr().err == ""


def test_main_rejects_unknown_output_format(tmp_path, capsys):
    src = _write_input(tmp_path, "Maria ep.")

    assert parse_feasts.main([str(src), "-o", str(tmp_path / "out.pdf")]) == 1
    assert "Error: Unsupported output format" in capsys.readouterr().err


def test_main_missing_input_leaves_existing_output(tmp_path, capsys):
    out = tmp_path / "out.csv"
    out.write_text("Name,Attributes\nprevious,run\n", encoding="utf-8")

    assert parse_feasts.main([str(tmp_path / "missing.txt"), "-o", str(out)]) == 1

    assert "Error:" in capsys.readouterr().err
    assert out.read_text(encoding="utf-8") == "Name,Attributes\nprevious,run\n"


def test_main_writes_xlsx(tmp_path):
    src = _write_input(tmp_path, "Maria ep.", "Lucia v. 13/Dec.")
    out = tmp_path / "out.xlsx"

    assert parse_feasts.main([str(src), "-o", str(out)]) == 0

    ws = load_workbook(out)["feasts"]
    assert [row[0] for row in ws.iter_rows(values_only=True)] == ["Name", "Maria", "Lucia"]
