import datetime
from typing import Any, Optional, Sequence

from overwatch_tracker.logger import logger
from overwatch_tracker.player.achievements import PlayerAchievements
from overwatch_tracker.player.document import ProfileDocument
from overwatch_tracker.player.errors import ProfileNotFoundError
from overwatch_tracker.player.extractor import extract_profile
from overwatch_tracker.player.fetcher import DocumentFetcher, HttpDocumentFetcher
from overwatch_tracker.player.identity import classify
from overwatch_tracker.player.resolver import PlatformRegionState, ProfileResolver
from overwatch_tracker.player.stats import PlayerStats
from overwatch_tracker.player.structures import Mode, Platform, ProfileFields, Region
from overwatch_tracker.player.urls import build_profile_url


class OverwatchPlayer:
    """
    A player looked up on the career profile site.

    :param username: battletag ("SomeUser#1234") or a psn/xbl username
    :param platform: defaults to NONE, a battletag always forces PC
    :param region: only used for PC players, NONE lets update() detect it
    :param fetcher: where pages come from, defaults to an aiohttp fetcher
    """

    def __init__(
            self,
            username: str,
            platform: Platform = Platform.NONE,
            region: Region = Region.NONE,
            fetcher: Optional[DocumentFetcher] = None
    ):
        self.username = username
        self.identity, platform = classify(username, platform)
        self._state = PlatformRegionState(platform, region if self.identity.is_tag else Region.NONE)
        self._resolver = ProfileResolver(self.identity, fetcher or HttpDocumentFetcher())
        self._document: Optional[ProfileDocument] = None

        self.profile_url: Optional[str] = None
        self.fields: Optional[ProfileFields] = None
        self.player_level = 0
        self.prestige_offset = 0
        self.competitive_rank = 0
        self.competitive_rank_img: Optional[str] = None
        self.profile_portrait_url: Optional[str] = None
        self.profile_last_downloaded: Optional[datetime.datetime] = None
        self.casual_stats: Optional[PlayerStats] = None
        self.competitive_stats: Optional[PlayerStats] = None
        self.achievements: Optional[PlayerAchievements] = None

        if self._state.resolved:
            self.profile_url = build_profile_url(self.platform, self.region, self.identity.url_handle)

    @property
    def platform(self) -> Platform:
        return self._state.platform

    @property
    def region(self) -> Region:
        return self._state.region

    @property
    def document(self) -> Optional[ProfileDocument]:
        return self._document

    async def update(self, region_order: Optional[Sequence[Region]] = None, auto_detect: bool = True) -> None:
        """
        Download and parse the player's profile.

        Platform and region are only probed for while still unknown, later calls
        just fetch the page again.

        :param region_order: regions to try for PC players, defaults to US, EU, KR
        :param auto_detect: probe for a missing platform/region instead of raising
        """
        self.close()
        resolution = await self._resolver.resolve(self._state, region_order, auto_detect)
        if not resolution.resolved:
            self.profile_url = None
            raise ProfileNotFoundError(self.username)

        self.profile_url = resolution.url
        self._document = resolution.document
        try:
            self._parse_document()
        except Exception:
            logger.error("Failed to parse profile page %s", self.profile_url, exc_info=True)
            self.close()
            raise

    def _parse_document(self) -> None:
        document = self._document
        fields = extract_profile(document)
        casual = PlayerStats.from_document(document, Mode.CASUAL)
        competitive = PlayerStats.from_document(document, Mode.COMPETITIVE)
        achievements = PlayerAchievements.from_document(document)

        self.fields = fields
        self.player_level = fields["level"]
        self.prestige_offset = fields["prestige_offset"]
        self.competitive_rank = fields["competitive_rank"]
        self.competitive_rank_img = fields["rank_badge_url"]
        self.profile_portrait_url = fields["portrait_url"]
        self.casual_stats = casual
        self.competitive_stats = competitive if len(competitive) else None
        self.achievements = achievements
        self.profile_last_downloaded = fields["last_updated"]
        logger.debug("Parsed %s: level %s, rank %s", self.username, self.player_level, self.competitive_rank)

    def close(self) -> None:
        """Release the downloaded page. Safe to call any number of times."""
        if self._document is not None:
            self._document.release()
            self._document = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type: Any, exc_value: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<OverwatchPlayer {self.username!r} platform={self.platform.value} region={self.region.value}>"
