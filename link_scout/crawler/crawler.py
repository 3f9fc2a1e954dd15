# link_scout/crawler/crawler.py
"""
Краулер LinkScout: обход сайта в ширину с ограниченной параллельностью.
"""
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Set, Tuple

from link_scout.aggregator import BrokenLink, CrawlReport, build_report
from link_scout.crawler.fetcher import Fetcher, TransportError
from link_scout.crawler.frontier import SEED_ORIGIN, Frontier, FrontierEntry
from link_scout.crawler.link_extractor import get_extractor
from link_scout.crawler.normalizer import normalize, origin_of
from link_scout.logger import logger

__all__ = ("LinkCrawler",)


class LinkCrawler:
    """
    Проверка ссылок одного сайта обходом в ширину.

    Страницы, чей URL начинается со стартового, загружаются и сканируются на
    ссылки; остальные запрашиваются один раз, только чтобы проверить доступность.
    Экземпляр владеет своим фронтиром и результатами и служит ровно одному запуску.
    """

    def __init__(self, config, fetcher: Fetcher) -> None:
        self.config = config
        self.fetcher = fetcher
        self.start_url: str = str(config.base_url)
        self.origin: str = origin_of(self.start_url)
        self.concurrency: int = config.concurrency
        self.broken_statuses = frozenset(config.broken_statuses)
        self.frontier = Frontier()
        self._extract = get_extractor(config.link_parser)
        self._broken: List[Tuple[int, BrokenLink]] = []
        self._started = False

    async def crawl(self) -> CrawlReport:
        if self._started:
            raise RuntimeError("LinkCrawler can only run once, create a new instance")
        self._started = True

        logger.info("Starting broken link checker for %s", self.start_url)
        start = time.monotonic()
        self.frontier.push(self.start_url, SEED_ORIGIN)

        progress_task: Optional[asyncio.Task] = None
        if self.config.progress_interval > 0:
            progress_task = asyncio.create_task(self._report_progress(self.config.progress_interval))
        try:
            await self._run()
        finally:
            if progress_task is not None:
                progress_task.cancel()
                await asyncio.gather(progress_task, return_exceptions=True)

        elapsed_ms = (time.monotonic() - start) * 1000
        self._broken.sort(key=lambda item: item[0])
        report = build_report(
            (link for _, link in self._broken),
            total_checked=self.frontier.visited_count,
            elapsed_ms=elapsed_ms,
            base_url=self.start_url,
        )
        logger.info(
            "Completed link check in %d s: %d checked, %d broken",
            report.elapsed_seconds,
            report.total_checked,
            len(report.broken_links),
        )
        return report

    async def _run(self) -> None:
        in_flight: Set[asyncio.Task] = set()
        try:
            while len(self.frontier) or in_flight:
                while len(self.frontier) and len(in_flight) < self.concurrency:
                    entry = self.frontier.pop()
                    if entry is None or not self.frontier.mark_visited(entry.url):
                        continue
                    in_flight.add(asyncio.create_task(self._check(entry)))
                if not in_flight:
                    continue
                done, in_flight = await asyncio.wait(in_flight, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    task.result()
        finally:
            for task in in_flight:
                task.cancel()
            if in_flight:
                await asyncio.gather(*in_flight, return_exceptions=True)

    async def _check(self, entry: FrontierEntry) -> None:
        url = entry.url
        in_origin = self._in_origin(url)
        html = ""
        try:
            async with self.fetcher.open(url) as resp:
                status = resp.status
                if status in self.broken_statuses:
                    self._record(entry, status, f"HTTP {status}")
                    return
                if in_origin and "text/html" in resp.headers.get("Content-Type", "").lower():
                    html = await resp.text()
        except TransportError as exc:
            self._record(entry, None, exc.reason)
            return

        if in_origin:
            self._enqueue_links(html, url)

    def _enqueue_links(self, html: str, page_url: str) -> None:
        added = 0
        for href in self._extract(html):
            link = normalize(href, page_url, self.origin)
            # push отсеивает уже посещённые и стоящие в очереди URL
            if link is not None and self.frontier.push(link, page_url):
                added += 1
        logger.debug("%s: %d new links queued", page_url, added)

    def _in_origin(self, url: str) -> bool:
        return url.startswith(self.start_url) and origin_of(url) == self.origin

    def _record(self, entry: FrontierEntry, status: Optional[int], reason: str) -> None:
        logger.warning("broken: %s (%s), found on %s", entry.url, reason, entry.found_on)
        self._broken.append((entry.seq, BrokenLink(entry.url, entry.found_on, status, reason)))

    async def _report_progress(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            snap = self.frontier.progress()
            logger.info("Progress: %d%% (%d/%d)", snap.percent, snap.position, snap.length)
