# link_scout/crawler/frontier.py
"""
Фронтир обхода: FIFO-очередь ссылок на проверку и множество посещённых URL.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, NamedTuple, Optional, Set

__all__ = ("SEED_ORIGIN", "FrontierEntry", "FrontierProgress", "Frontier")

#: значение ``found_on`` у стартовой записи
SEED_ORIGIN = "base URL"


@dataclass(frozen=True, slots=True)
class FrontierEntry:
    """Ссылка, ожидающая проверки, и страница, на которой она найдена."""

    url: str
    found_on: str
    seq: int = 0


class FrontierProgress(NamedTuple):
    position: int
    length: int

    @property
    def percent(self) -> int:
        return int(self.position * 100 / self.length) if self.length else 100


class Frontier:
    """
    Очередь работ для обхода в ширину.

    URL отсеиваются при добавлении (среди ожидающих и посещённых) и ещё раз
    при извлечении: :meth:`mark_visited` - единственное место, где URL
    становится посещённым; повторная попытка возвращает ``False``.
    """

    def __init__(self) -> None:
        self._pending: Deque[FrontierEntry] = deque()
        self._seen: Set[str] = set()
        self._visited: Set[str] = set()
        self._pushed = 0
        self._popped = 0

    def __len__(self) -> int:
        return len(self._pending)

    def push(self, url: str, found_on: str) -> bool:
        """Добавляет *url* в хвост, если он ещё не в очереди и не посещён."""
        if url in self._seen or url in self._visited:
            return False
        self._seen.add(url)
        self._pending.append(FrontierEntry(url, found_on, self._pushed))
        self._pushed += 1
        return True

    def pop(self) -> Optional[FrontierEntry]:
        if not self._pending:
            return None
        self._popped += 1
        return self._pending.popleft()

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    def mark_visited(self, url: str) -> bool:
        """Проверка с отметкой; ``False`` - *url* уже обработан."""
        if url in self._visited:
            return False
        self._visited.add(url)
        return True

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def progress(self) -> FrontierProgress:
        """Снимок только для чтения, для вывода прогресса."""
        return FrontierProgress(self._popped, self._pushed)
