# File: link_scout/report/__init__.py
"""link_scout.report: генерация отчётов (текст, JSON и HTML), используемые CLI и тестами."""

from __future__ import annotations

from link_scout.report.html_report import DEFAULT_TEMPLATE_DIR, render_html
from link_scout.report.json_report import render_json
from link_scout.report.text_report import render_text

__all__ = ["render_text", "render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
