import extract_saints


PAGE = """
<html><body><table>
  <tr><td>Barbara v. m.</td>
      <td><a class="choixDate">05/Dec.</a> <a class="choixDate">16/Dec.</a></td></tr>
  <tr><td>Sine data</td><td>-</td></tr>
  <tr><td>Lucia v.</td><td><a class="choixDate">13/Dec.</a></td></tr>
</table></body></html>
"""


def _write_page(tmp_path):
    page = tmp_path / "calendar.html"
    page.write_text(PAGE, encoding="utf-8")
    return page


def test_main_writes_lines_to_output_file(tmp_path, capsys):
    page = _write_page(tmp_path)
    out = tmp_path / "nested" / "saints.txt"

    assert extract_saints.main([str(page), "-o", str(out)]) == 0

    assert out.read_text(encoding="utf-8").splitlines() == [
        "Barbara v. m.\t05/Dec.|16/Dec.",
        "Lucia v.\t13/Dec.",
    ]
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Extracted 2 saints to {out}" in captured.err


def test_main_prints_lines_without_output_file(tmp_path, capsys):
    page = _write_page(tmp_path)

    assert extract_saints.main([str(page)]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "Barbara v. m.\t05/Dec.|16/Dec.",
        "Lucia v.\t13/Dec.",
    ]


def test_main_reports_unreadable_source(tmp_path, capsys):
    out = tmp_path / "saints.txt"

    assert extract_saints.main([str(tmp_path / "missing.html"), "-o", str(out)]) == 1

    assert capsys.readouterr().err.startswith("Error:")
    assert not out.exists()
