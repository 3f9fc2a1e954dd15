# File: tests/conftest.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable, Dict, List, Tuple, Union

import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from link_scout.config import CheckerConfig
from link_scout.crawler.fetcher import TransportError

SITE = "https://site.test/"

#: (status, content type, body) or an exception raised by ``open``
PageDef = Union[Tuple[int, str, str], BaseException]


def html_page(*hrefs: str, status: int = 200) -> Tuple[int, str, str]:
    """Build an HTML page linking to *hrefs*."""
    body = "".join(f'<a href="{h}">{h}</a>\n' for h in hrefs)
    return status, "text/html; charset=utf-8", f"<html><body>{body}</body></html>"


class FakeResponse:
    def __init__(self, fetcher: "FakeFetcher", url: str, status: int, headers: CIMultiDictProxy, body: str) -> None:
        self._fetcher = fetcher
        self._url = url
        self._body = body
        self.status = status
        self.headers = headers

    async def text(self) -> str:
        self._fetcher.bodies_read.append(self._url)
        return self._body


class FakeFetcher:
    """
    In-memory transport. Unknown URLs answer 404, exceptions in *pages* are raised.
    """

    def __init__(self, pages: Dict[str, PageDef]) -> None:
        self.pages = pages
        self.requested: List[str] = []
        self.bodies_read: List[str] = []

    @asynccontextmanager
    async def open(self, url: str):
        self.requested.append(url)
        page = self.pages.get(url, (404, "text/html", "Not Found"))
        if isinstance(page, BaseException):
            raise page
        status, content_type, body = page
        headers = CIMultiDict({"content-type": content_type} if content_type else {})
        yield FakeResponse(self, url, status, CIMultiDictProxy(headers), body)


def unreachable(url: str) -> TransportError:
    return TransportError(url, "connection refused")


@pytest.fixture()
def make_config() -> Callable[..., CheckerConfig]:
    """
    Return a factory for CheckerConfig pointing at https://site.test/.
    """
    def _make(**overrides) -> CheckerConfig:
        values = {"base_url": SITE, "timeout": 2.0, "progress_interval": 0}
        values.update(overrides)
        return CheckerConfig(**values)

    return _make


@pytest.fixture(autouse=True)
def reset_project_logger():
    """
    The CLI detaches the project logger from root; re-attach it so caplog sees records.
    """
    lg = logging.getLogger("LinkScout")
    yield
    lg.handlers.clear()
    lg.propagate = True
    lg.setLevel(logging.NOTSET)
