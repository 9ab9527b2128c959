import datetime
from enum import Enum
from typing import Optional, TypedDict


class Platform(str, Enum):
    NONE = "none"
    PC = "pc"
    PSN = "psn"
    XBL = "xbl"


class Region(str, Enum):
    NONE = "none"
    US = "us"
    EU = "eu"
    KR = "kr"


class Mode(str, Enum):
    CASUAL = "quickplay"
    COMPETITIVE = "competitive"


DEFAULT_REGION_ORDER: tuple[Region, ...] = (Region.US, Region.EU, Region.KR)


class ProfileFields(TypedDict):
    """
    Typed fields extracted from a profile page.
    `level` already includes the prestige offset.
    """
    level: int
    prestige_offset: int
    competitive_rank: int
    rank_badge_url: Optional[str]
    portrait_url: str
    last_updated: datetime.datetime


class Achievement(TypedDict):
    name: str
    category: str
    earned: bool
