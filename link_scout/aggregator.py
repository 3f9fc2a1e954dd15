# File: link_scout/aggregator.py
"""link_scout.aggregator: сборка итогового отчёта о битых ссылках."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

__all__ = ["BrokenLink", "CrawlReport", "build_report"]


@dataclass(frozen=True, slots=True)
class BrokenLink:
    """Битая ссылка и страница, на которой она найдена."""

    url: str
    found_on: str
    status: Optional[int] = None
    reason: str = ""


@dataclass(slots=True)
class CrawlReport:
    """Результат одной проверки сайта."""

    base_url: str = ""
    total_checked: int = 0
    elapsed_seconds: int = 0
    broken_links: List[BrokenLink] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.broken_links

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_report(
    broken_links: Iterable[BrokenLink],
    total_checked: int,
    elapsed_ms: float,
    base_url: str = "",
) -> CrawlReport:
    """Собирает CrawlReport; время округляется вниз до целых секунд, порядок ссылок сохраняется."""
    return CrawlReport(
        base_url=base_url,
        total_checked=total_checked,
        elapsed_seconds=int(max(elapsed_ms, 0) // 1000),
        broken_links=list(broken_links),
    )
