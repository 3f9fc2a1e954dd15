# File: link_scout/engine.py
"""link_scout.engine: запуск проверки ссылок (асинхронно и синхронно)."""

from __future__ import annotations

import asyncio
from typing import Optional

from link_scout.aggregator import CrawlReport
from link_scout.config import CheckerConfig
from link_scout.crawler.crawler import LinkCrawler
from link_scout.crawler.fetcher import AiohttpFetcher, Fetcher
from link_scout.logger import logger

__all__ = ["Engine", "start_check"]


async def start_check(cfg: CheckerConfig, fetcher: Optional[Fetcher] = None) -> CrawlReport:
    """
    Запускает LinkCrawler и возвращает CrawlReport.

    Если fetcher не передан, на время проверки открывается AiohttpFetcher
    с таймаутом и User-Agent из конфигурации.
    """
    if fetcher is not None:
        return await LinkCrawler(cfg, fetcher).crawl()
    async with AiohttpFetcher(cfg.timeout, cfg.user_agent) as http:
        return await LinkCrawler(cfg, http).crawl()


class Engine:
    """Синхронный запуск проверки для CLI."""

    def __init__(self, config: CheckerConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.fetcher = fetcher

    def start_check(self, run_timeout: Optional[float] = None) -> CrawlReport:
        """Запускает проверку (с общим таймаутом, если задан) и возвращает отчёт."""
        logger.info("Starting link check…")
        coro = start_check(self.config, self.fetcher)
        if run_timeout:
            coro = asyncio.wait_for(coro, timeout=run_timeout)
        try:
            return asyncio.run(coro)
        except asyncio.TimeoutError:
            logger.error("Link check did not finish within %s seconds", run_timeout)
            raise
        except Exception as exc:
            logger.error("Link check failed: %s", exc)
            raise
