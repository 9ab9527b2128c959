from overwatch_tracker.player import OverwatchPlayer
from overwatch_tracker.player.errors import (
    ExtractionError,
    FetchError,
    InvalidIdentityError,
    OverwatchError,
    PrestigeLookupError,
    ProfileNotFoundError,
    StructuralParseError,
    UserPlatformNotDefinedError,
    UserRegionNotDefinedError,
)
from overwatch_tracker.player.http_session import close_session
from overwatch_tracker.player.structures import DEFAULT_REGION_ORDER, Mode, Platform, Region

__version__ = "0.1.0"
