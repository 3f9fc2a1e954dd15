# link_scout/report/text_report.py
"""
Текстовый отчёт: CLI печатает его, если не запрошен вывод в файл.
"""
from __future__ import annotations

from link_scout.aggregator import CrawlReport

_RULE = "-" * 35


def render_text(report: CrawlReport) -> str:
    """Форматирует *report* как консольный список битых ссылок."""
    lines = [
        _RULE,
        f"Completed link check in {report.elapsed_seconds:>6} sec.",
        f"Links checked: {report.total_checked}",
        _RULE,
        "",
    ]
    if not report.broken_links:
        lines.append("No broken links found.")
        return "\n".join(lines)

    lines.append(f"Broken Links ({len(report.broken_links)}):")
    for link in report.broken_links:
        suffix = f"  [{link.reason}]" if link.reason else ""
        lines.append(f"{link.url}{suffix}")
        lines.append(f"\tOn: {link.found_on}")
    return "\n".join(lines)
