"""
Fetcher module: the fetch capability the crawl driver depends on, plus its
HTTP implementation on top of aiohttp.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Protocol, runtime_checkable

from aiohttp import ClientError, ClientSession, ClientTimeout

from bfs_crawler.crawler.link_extractor import extract_links
from bfs_crawler.crawler.models import FetchError, PageData
from bfs_crawler.logger import get_logger
from bfs_crawler.parser.html_parser import DocumentParseError, extract_text, extract_title

__all__ = ("DEFAULT_USER_AGENT", "Fetcher", "HttpFetcher")

DEFAULT_USER_AGENT = "BfsCrawler/0.1"


@runtime_checkable
class Fetcher(Protocol):
    """Anything that can turn a URL into a PageData or raise FetchError."""

    async def fetch(self, url: str) -> PageData:
        ...


class HttpFetcher:
    """
    Plain GET fetcher.

    The whole body is read whatever the status code; links are resolved
    against the final (post-redirect) URL. Use as an async context manager
    unless a session is passed in, in which case the caller owns it.
    """

    def __init__(
        self,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: Optional[float] = None,
        session: Optional[ClientSession] = None,
    ) -> None:
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session
        self._owns_session = session is None
        self.logger = get_logger("fetcher")

    async def __aenter__(self) -> HttpFetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> PageData:
        """
        Download *url* and derive links, title and text from the body.

        Transport errors, timeouts, invalid URLs and unparseable documents
        are all raised as FetchError.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                body = await resp.read()
                final_url = str(resp.url)
                self.logger.debug("GET %s -> HTTP %s (%d bytes)", url, resp.status, len(body))
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        try:
            links = extract_links(body, final_url)
        except DocumentParseError as exc:
            raise FetchError(url, str(exc)) from exc

        title = extract_title(body)
        text = extract_text(body)
        self.logger.debug("Title: %s", title)
        return PageData(url=url, content=body, links=links, title=title, text=text)
