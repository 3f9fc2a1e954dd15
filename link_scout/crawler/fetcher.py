# link_scout/crawler/fetcher.py
"""
Модуль Fetcher: транспорт, через который краулер загружает страницы.

Краулер зависит только от протокола :class:`Fetcher`; :class:`AiohttpFetcher` -
рабочая реализация с таймаутом на запрос. Любой сбой транспорта
поднимается как :class:`TransportError`.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Optional, Protocol

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout
from multidict import CIMultiDictProxy

from link_scout.logger import logger

__all__ = ("TransportError", "FetchResponse", "Fetcher", "AiohttpFetcher")


class TransportError(Exception):
    """Сбой соединения, DNS или таймаут при загрузке *url*."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FetchResponse(Protocol):
    """Ответ сервера: статус, заголовки (без учёта регистра имён) и тело."""

    status: int
    headers: CIMultiDictProxy[str]

    async def text(self) -> str: ...


class Fetcher(Protocol):
    def open(self, url: str) -> AsyncContextManager[FetchResponse]: ...


def _describe(exc: BaseException) -> str:
    if isinstance(exc, asyncio.TimeoutError):
        return "timeout"
    return str(exc) or type(exc).__name__


class _AiohttpResponse:
    """Обёртка над :class:`aiohttp.ClientResponse`, переводит ошибки чтения в TransportError."""

    __slots__ = ("_resp", "url")

    def __init__(self, url: str, resp: ClientResponse) -> None:
        self.url = url
        self._resp = resp

    @property
    def status(self) -> int:
        return self._resp.status

    @property
    def headers(self) -> CIMultiDictProxy[str]:
        return self._resp.headers

    async def text(self) -> str:
        try:
            return await self._resp.text(errors="replace")
        except (ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(self.url, _describe(exc)) from exc


class AiohttpFetcher:
    """HTTP-транспорт: одна :class:`aiohttp.ClientSession` на запуск."""

    def __init__(self, timeout: float, user_agent: str) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> AiohttpFetcher:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers={"User-Agent": self.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    @asynccontextmanager
    async def open(self, url: str) -> AsyncIterator[_AiohttpResponse]:
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            resp = await self.session.get(url)
        # yarl бросает ValueError на href, не являющиеся URL
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise TransportError(url, _describe(exc)) from exc
        logger.debug("GET %s -> %s", url, resp.status)
        try:
            yield _AiohttpResponse(url, resp)
        finally:
            resp.release()
