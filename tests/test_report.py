# File: tests/test_report.py
import json

from link_scout.aggregator import BrokenLink, CrawlReport, build_report
from link_scout.report import render_html, render_json, render_text

LINKS = [
    BrokenLink("https://s.test/z", "https://s.test/", 404, "HTTP 404"),
    BrokenLink("https://ext.test/", "https://s.test/a", None, "timeout"),
]


def test_build_report_floors_seconds_and_keeps_order():
    report = build_report(iter(LINKS), total_checked=7, elapsed_ms=2999.9, base_url="https://s.test/")
    assert report.elapsed_seconds == 2
    assert report.total_checked == 7
    assert report.broken_links == LINKS
    assert not report.ok


def test_empty_report_is_ok():
    report = build_report([], total_checked=1, elapsed_ms=10)
    assert report.ok
    assert report.elapsed_seconds == 0
    assert "No broken links found." in render_text(report)


def test_render_text_lists_pages():
    text = render_text(CrawlReport("https://s.test/", 7, 3, list(LINKS)))
    assert "Completed link check in      3 sec." in text
    assert "Links checked: 7" in text
    assert "https://s.test/z  [HTTP 404]\n\tOn: https://s.test/" in text
    assert "\tOn: https://s.test/a" in text


def test_json_roundtrip(tmp_path):
    report = CrawlReport("https://s.test/", 7, 3, list(LINKS))
    path = render_json(report, tmp_path / "out" / "report.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["total_checked"] == 7
    assert data["broken_links"][1] == {
        "url": "https://ext.test/",
        "found_on": "https://s.test/a",
        "status": None,
        "reason": "timeout",
    }
    assert json.loads(report.json()) == data


def test_render_html_with_packaged_template(tmp_path):
    report = CrawlReport("https://s.test/", 7, 3, list(LINKS))
    path = render_html(report, None, tmp_path / "report.html")
    html = path.read_text(encoding="utf-8")
    assert "https://s.test/z" in html
    assert "timeout" in html
    assert "<td>404</td>" in html


def test_render_html_custom_template(tmp_path):
    (tmp_path / "report.html.j2").write_text("{{ total_checked }}|{{ broken_links|length }}", encoding="utf-8")
    path = render_html(CrawlReport("x", 5, 0, list(LINKS)), tmp_path, tmp_path / "r.html")
    assert path.read_text(encoding="utf-8") == "5|2"
