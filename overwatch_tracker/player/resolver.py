from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from overwatch_tracker.logger import logger
from overwatch_tracker.player.document import ProfileDocument
from overwatch_tracker.player.errors import UserPlatformNotDefinedError, UserRegionNotDefinedError
from overwatch_tracker.player.fetcher import DocumentFetcher, FetchResult
from overwatch_tracker.player.identity import PlayerIdentity
from overwatch_tracker.player.structures import DEFAULT_REGION_ORDER, Platform, Region
from overwatch_tracker.player.urls import build_profile_url

CONSOLE_PROBE_ORDER = (Platform.PSN, Platform.XBL)


class ResolverState(str, Enum):
    UNRESOLVED = "unresolved"
    PROBING_REGION = "probing_region"
    PROBING_PLATFORM = "probing_platform"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class PlatformRegionState:
    platform: Platform = Platform.NONE
    region: Region = Region.NONE

    @property
    def resolved(self) -> bool:
        if self.platform == Platform.NONE:
            return False
        return self.platform != Platform.PC or self.region != Region.NONE


@dataclass
class Resolution:
    state: ResolverState
    platform: Platform
    region: Region
    url: Optional[str] = None
    document: Optional[ProfileDocument] = None
    probed_urls: list[str] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.state == ResolverState.RESOLVED


class ProfileResolver:
    """
    Works out which profile url hosts a player, probing candidate urls one at a time.

    pc players with an unknown region are probed over `region_order` and the first
    url answering 200 wins. Console players with an unknown platform are probed on
    psn then xbl: a 404 means "not there", any other status is taken as a match.
    Running out of candidates is not an error, it ends in the FAILED state.

    Transport failures abort the whole probe sequence (FetchError) instead of
    moving on to the next candidate.
    """

    def __init__(self, identity: PlayerIdentity, fetcher: DocumentFetcher):
        self.identity = identity
        self.fetcher = fetcher
        self.state = ResolverState.UNRESOLVED
        self.probed_urls: list[str] = []

    async def resolve(
            self,
            current: PlatformRegionState,
            region_order: Optional[Sequence[Region]] = None,
            auto_detect: bool = True
    ) -> Resolution:
        self.state = ResolverState.UNRESOLVED
        self.probed_urls = []
        document: Optional[ProfileDocument] = None

        if not auto_detect:
            if current.platform == Platform.PC and current.region == Region.NONE:
                raise UserRegionNotDefinedError()
            if current.platform == Platform.NONE:
                raise UserPlatformNotDefinedError()
        elif self.identity.is_tag:
            current.platform = Platform.PC
            if current.region == Region.NONE:
                self.state = ResolverState.PROBING_REGION
                document = await self._probe_regions(
                    current, DEFAULT_REGION_ORDER if region_order is None else region_order
                )
        elif current.platform == Platform.NONE:
            self.state = ResolverState.PROBING_PLATFORM
            document = await self._probe_platforms(current)

        if not current.resolved:
            self.state = ResolverState.FAILED
            logger.warning("Could not resolve a profile for %s (tried %d urls)",
                           self.identity.username, len(self.probed_urls))
            return Resolution(self.state, current.platform, current.region, probed_urls=list(self.probed_urls))

        url = build_profile_url(current.platform, current.region, self.identity.url_handle)
        if document is None:
            document = (await self._fetch(url)).document
        self.state = ResolverState.RESOLVED
        logger.info("Resolved %s to %s", self.identity.username, url)
        return Resolution(self.state, current.platform, current.region, url, document, list(self.probed_urls))

    async def _fetch(self, url: str) -> FetchResult:
        self.probed_urls.append(url)
        return await self.fetcher.fetch(url)

    async def _probe_regions(self, current: PlatformRegionState,
                             region_order: Sequence[Region]) -> Optional[ProfileDocument]:
        for region in region_order:
            url = build_profile_url(Platform.PC, region, self.identity.url_handle)
            result = await self._fetch(url)
            logger.debug("Region probe %s -> %s", url, result.status)
            if result.ok:
                current.region = region
                return result.document
            result.document.release()
        return None

    async def _probe_platforms(self, current: PlatformRegionState) -> Optional[ProfileDocument]:
        for platform in CONSOLE_PROBE_ORDER:
            url = build_profile_url(platform, Region.NONE, self.identity.url_handle)
            result = await self._fetch(url)
            logger.debug("Platform probe %s -> %s", url, result.status)
            if not result.not_found:
                if not result.ok:
                    logger.warning("Treating status %s from %s as a %s profile",
                                   result.status, url, platform.value)
                current.platform = platform
                return result.document
            result.document.release()
        current.platform = Platform.NONE
        return None
