# link_scout/crawler/link_extractor.py
"""
Извлечение ссылок для LinkScout.

Доступны две стратегии:

* ``regex`` – ищет вхождения ``href="..."`` в тексте. Быстро и терпимо
  к кривой разметке, структура HTML не учитывается.
* ``html`` – разбирает страницу BeautifulSoup и читает только ``<a href>``.
"""
from __future__ import annotations

import re
from typing import Callable, Dict, List

from bs4 import BeautifulSoup, SoupStrainer
from bs4.element import Tag

__all__ = ("extract_hrefs", "extract_anchor_hrefs", "get_extractor", "EXTRACTORS")

_HREF_RE = re.compile(r'href="(.+?)"')

# разбираем только теги <a href>
_ANCHOR_STRAINER = SoupStrainer("a", href=True)


def extract_hrefs(html: str) -> List[str]:
    """Возвращает значения href в порядке документа."""
    if not html:
        return []
    return _HREF_RE.findall(html)


def extract_anchor_hrefs(html: str) -> List[str]:
    """Возвращает href тегов ``<a>`` в порядке документа."""
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser", parse_only=_ANCHOR_STRAINER)
    hrefs: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if isinstance(href_val, str):
            hrefs.append(href_val)
    return hrefs


EXTRACTORS: Dict[str, Callable[[str], List[str]]] = {
    "regex": extract_hrefs,
    "html": extract_anchor_hrefs,
}


def get_extractor(name: str) -> Callable[[str], List[str]]:
    try:
        return EXTRACTORS[name]
    except KeyError:
        raise ValueError(f"unknown link parser {name!r}, expected one of {sorted(EXTRACTORS)}") from None
