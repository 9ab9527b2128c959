from typing import Optional


class OverwatchError(Exception):
    """Base class for every error raised by the tracker."""


class InvalidIdentityError(OverwatchError):
    def __init__(self, username: str):
        super().__init__(f"'{username}' is not a valid battletag (expected Name#1234)")
        self.username = username


class UserRegionNotDefinedError(OverwatchError):
    def __init__(self):
        super().__init__("Region must be set for pc players when auto-detect is disabled")


class UserPlatformNotDefinedError(OverwatchError):
    def __init__(self):
        super().__init__("Platform must be set when auto-detect is disabled")


class ProfileNotFoundError(OverwatchError):
    def __init__(self, username: str):
        super().__init__(f"No profile could be resolved for '{username}'")
        self.username = username


class FetchError(OverwatchError):
    """Transport failure (connection, timeout) while fetching a profile page."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ExtractionError(OverwatchError):
    pass


class PrestigeLookupError(ExtractionError):
    def __init__(self, identifier: Optional[str]):
        super().__init__(f"Unknown player level border image id: {identifier!r}")
        self.identifier = identifier


class StructuralParseError(ExtractionError):
    def __init__(self, locator: str):
        super().__init__(f"Profile page has no node matching '{locator}'")
        self.locator = locator
