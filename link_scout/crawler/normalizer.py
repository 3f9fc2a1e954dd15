# link_scout/crawler/normalizer.py
"""
Нормализация URL для LinkScout.

Превращает «сырые» значения ``href`` в канонические абсолютные URL
(или отбрасывает их) и готовит стартовый URL проверки.
"""
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from link_scout.logger import logger

__all__ = ("InvalidStartUrl", "normalize", "prepare_start_url", "origin_of", "strip_query")

_DISCARD_PREFIXES = ("#", "mailto:", "tel:")
_SUSPICIOUS_HREFS = frozenset({"true", "false"})
_HTTP_RE = re.compile(r"^https?://", re.IGNORECASE)
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


class InvalidStartUrl(ValueError):
    """Стартовый URL нельзя превратить в https-адрес для обхода."""


def strip_query(url: str) -> str:
    """Отрезает всё, начиная с первого ``?`` или ``#``."""
    for sep in ("?", "#"):
        url = url.split(sep, 1)[0]
    return url


def origin_of(url: str) -> str:
    """Возвращает ``scheme://netloc`` для *url*."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, "", "", ""))


def normalize(href: str, current_page_url: str, base_origin: str) -> Optional[str]:
    """
    Разрешает *href*, найденный на *current_page_url*, в абсолютный URL.

    Возвращает ``None``, если ссылка не ведёт на загружаемую страницу.
    Порядок проверок важен: пути от корня сайта разрешаются до фильтра
    #/mailto/tel, абсолютные http(s) остаются как есть, остальное
    считается относительным к текущей странице.
    """
    href = href.strip()
    if not href:
        return None

    if href.startswith("//"):
        # protocol-relative: схема берётся у проверяемого сайта
        resolved = f"{urlsplit(base_origin).scheme}:{href}"
    elif href.startswith("/"):
        resolved = base_origin.rstrip("/") + href
    elif href.startswith(_DISCARD_PREFIXES):
        logger.debug("Discarded non-page href %r on %s", href, current_page_url)
        return None
    elif href in _SUSPICIOUS_HREFS:
        logger.warning("Suspicious href=%r on %s (malformed markup?), skipped", href, current_page_url)
        return None
    elif _HTTP_RE.match(href):
        resolved = href
    elif _SCHEME_RE.match(href):
        logger.debug("Discarded non-http href %r on %s", href, current_page_url)
        return None
    else:
        resolved = urljoin(current_page_url, href)

    return strip_query(resolved)


def prepare_start_url(raw: str) -> str:
    """
    Готовит пользовательский ввод как стартовый URL обхода.

    Без схемы добавляется ``https://``, ``http://`` меняется на ``https://``,
    query-строка и фрагмент отбрасываются, голый хост получает ``/``.
    Бросает :class:`InvalidStartUrl`, если хост не найден.
    """
    url = (raw or "").strip()
    if not url:
        raise InvalidStartUrl("starting URL is empty")

    lowered = url.lower()
    if lowered.startswith("https://"):
        pass
    elif lowered.startswith("http://"):
        url = "https://" + url[len("http://"):]
    elif _SCHEME_RE.match(url) and "://" in url:
        raise InvalidStartUrl(f"unsupported scheme in starting URL: {raw!r}")
    else:
        url = "https://" + url

    # seed обязан совпадать с нормализованными ссылками, иначе он не префикс для них
    url = strip_query(url)
    parts = urlsplit(url)
    if not parts.hostname:
        raise InvalidStartUrl(f"starting URL has no host: {raw!r}")
    if not parts.path:
        url = urlunsplit((parts.scheme, parts.netloc, "/", "", ""))
    return url
