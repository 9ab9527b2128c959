import asyncio
from dataclasses import dataclass
from typing import Optional, Protocol

import aiohttp

from overwatch_tracker.logger import logger
from overwatch_tracker.player.document import ProfileDocument
from overwatch_tracker.player.errors import FetchError
from overwatch_tracker.player.http_session import get_session


@dataclass
class FetchResult:
    url: str
    status: int
    document: ProfileDocument

    @property
    def ok(self) -> bool:
        return self.status == 200

    @property
    def not_found(self) -> bool:
        return self.status == 404


class DocumentFetcher(Protocol):
    async def fetch(self, url: str) -> FetchResult:
        ...


class HttpDocumentFetcher:
    """
    Fetches profile pages over HTTP. Any status is returned to the caller;
    only transport failures raise (FetchError).
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session

    @property
    def session(self) -> aiohttp.ClientSession:
        return self._session if self._session is not None else get_session()

    async def fetch(self, url: str) -> FetchResult:
        try:
            async with self.session.get(url, allow_redirects=True) as response:
                body = await response.read()
                logger.debug("GET %s -> %s", url, response.status)
                return FetchResult(url=url, status=response.status, document=ProfileDocument(body, url))
        except aiohttp.ClientError as e:
            logger.error(f"HTTP error fetching {url}: {e}", exc_info=True)
            raise FetchError(url, str(e)) from e
        except asyncio.TimeoutError as e:
            logger.warning(f"Timeout fetching {url}")
            raise FetchError(url, "timed out") from e
