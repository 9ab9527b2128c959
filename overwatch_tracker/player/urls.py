import os
import urllib.parse

from overwatch_tracker.player.structures import Platform, Region

BASE_URL = os.getenv("OVERWATCH_BASE_URL", "https://playoverwatch.com").rstrip("/")
LOCALE = os.getenv("OVERWATCH_LOCALE", "en-gb")

PC_TEMPLATE = "{base}/{locale}/career/{platform}/{region}/{handle}"
CONSOLE_TEMPLATE = "{base}/{locale}/career/{platform}/{handle}"


def build_profile_url(platform: Platform, region: Region, handle: str,
                      base_url: str = BASE_URL, locale: str = LOCALE) -> str:
    if platform == Platform.NONE:
        raise ValueError("Cannot build a profile url without a platform")
    if platform == Platform.PC:
        if region == Region.NONE:
            raise ValueError("Cannot build a pc profile url without a region")
        return PC_TEMPLATE.format(base=base_url, locale=locale, platform=platform.value,
                                  region=region.value, handle=handle)
    return CONSOLE_TEMPLATE.format(base=base_url, locale=locale, platform=platform.value, handle=handle)


def parse_profile_url(url: str) -> tuple[Platform, Region, str]:
    """Inverse of build_profile_url. Raises ValueError on anything that is not a career url."""
    parts = [p for p in urllib.parse.urlsplit(url).path.split("/") if p]
    try:
        career = parts.index("career")
    except ValueError:
        raise ValueError(f"Not a career profile url: {url}") from None
    tail = parts[career + 1:]
    if not tail:
        raise ValueError(f"Not a career profile url: {url}")
    platform = Platform(tail[0])
    if platform == Platform.PC and len(tail) == 3:
        return platform, Region(tail[1]), tail[2]
    if platform in (Platform.PSN, Platform.XBL) and len(tail) == 2:
        return platform, Region.NONE, tail[1]
    raise ValueError(f"Not a career profile url: {url}")
