import pytest
import requests

from feasts.logic.extractor import parse_line
from feasts.sources import html_table
from feasts.sources.html_table import SaintRow, extract_lines, extract_rows, load_html


CALENDAR_HTML = """
<html><body>
<table>
  <tr><th>Nom</th><th>Dates</th></tr>
  <tr>
    <td>Barbara v. m. Nicomed. (Trans.)</td>
    <td><a class="choixDate" href="#">05/Dec.</a> <a class="choixDate" href="#">16/Dec.</a></td>
  </tr>
  <tr><td>Sine data</td><td>-</td></tr>
  <tr>
    <td>Maria ep.</td>
    <td><p><a class="choixDate">31/Dec.</a></p><a class="choixDate"> 02/Jan. </a><a class="autre">x</a></td>
  </tr>
</table>
</body></html>
"""


def test_extract_rows_keeps_rows_with_date_links():
    rows = extract_rows(CALENDAR_HTML)

    assert rows == [
        SaintRow(name="Barbara v. m. Nicomed. (Trans.)", dates=["05/Dec.", "16/Dec."]),
        SaintRow(name="Maria ep.", dates=["02/Jan."]),
    ]


def test_row_renders_as_tab_separated_line():
    row = SaintRow(name="Barbara v. m.", dates=["05/Dec.", "16/Dec."])
    assert row.to_line() == "Barbara v. m.\t05/Dec.|16/Dec."


def test_row_without_name_cell_renders_empty_name():
    assert SaintRow(name=None, dates=["01/Jan."]).to_line() == "\t01/Jan."


def test_extracted_lines_parse_cleanly():
    results = [parse_line(line) for line in extract_lines(CALENDAR_HTML)]

    assert [r.ok for r in results] == [True, True]
    assert results[0].feast.name == "Barbara"
    assert results[0].feast.attributes == ("v.", "m. (Nicomed.)")
    assert results[0].feast.modifiers == ("(Trans.)",)
    assert results[0].feast.dates == ("05/Dec.", "16/Dec.")
    assert results[1].feast.dates == ("02/Jan.",)


def test_page_without_rows_gives_nothing():
    assert extract_lines("<html><body><p>nothing</p></body></html>") == []


def test_load_html_reads_local_file(tmp_path):
    page = tmp_path / "calendar.html"
    page.write_text(CALENDAR_HTML, encoding="utf-8")

    assert load_html(str(page)) == CALENDAR_HTML


class _FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_load_html_fetches_urls(monkeypatch):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, timeout))
        return _FakeResponse(CALENDAR_HTML)

    monkeypatch.setattr(html_table.requests, "get", fake_get)

    assert load_html("https://example.org/cal.html") == CALENDAR_HTML
    assert calls == [("https://example.org/cal.html", 30)]


def test_load_html_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(html_table.requests, "get",
                        lambda url, headers=None, timeout=None: _FakeResponse("", 404))

    with pytest.raises(requests.HTTPError):
        load_html("http://example.org/missing.html")
