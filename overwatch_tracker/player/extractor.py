import datetime
import re
from typing import Mapping, Optional

from bs4 import Tag

from overwatch_tracker.player.document import Locator, ProfileDocument
from overwatch_tracker.player.errors import StructuralParseError
from overwatch_tracker.player.prestige import PRESTIGE_DEFINITIONS, prestige_offset
from overwatch_tracker.player.structures import ProfileFields

UINT16_MAX = 0xFFFF
_DIGITS_RE = re.compile(r"[0-9]+")


def parse_uint16(node: Optional[Tag]) -> int:
    """Text of `node` as an unsigned 16 bit int, 0 when missing or not a number."""
    if node is None:
        return 0
    text = node.get_text(strip=True)
    if not _DIGITS_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if value <= UINT16_MAX else 0


def image_source(node: Tag, locator: str) -> str:
    src = node.get("src")
    if not src:
        raise StructuralParseError(f"{locator}[src]")
    return src


def extract_profile(document: ProfileDocument,
                    prestige_table: Mapping[str, int] = PRESTIGE_DEFINITIONS) -> ProfileFields:
    """
    Read level, competitive rank, rank badge and portrait from a profile page.

    Missing level or rank text counts as 0 and a missing badge as None. The level
    is capped at UINT16_MAX. A missing portrait means the page is not a profile page
    and raises StructuralParseError; a level widget without a border image listed in
    `prestige_table` (or no level widget at all) raises PrestigeLookupError.
    """
    level_container = document.find_optional(Locator.LEVEL_CONTAINER)
    style = level_container.get("style") if level_container is not None else None
    offset = prestige_offset(style, prestige_table)
    level = min(parse_uint16(document.find_optional(Locator.LEVEL_TEXT)) + offset, UINT16_MAX)

    competitive_rank = parse_uint16(document.find_optional(Locator.COMPETITIVE_RANK_TEXT))
    badge = document.find_optional(Locator.RANK_BADGE)
    rank_badge_url = None
    if badge is not None:
        rank_badge_url = badge.get("src") or None

    portrait = document.find_required(Locator.PORTRAIT)

    return ProfileFields(
        level=level,
        prestige_offset=offset,
        competitive_rank=competitive_rank,
        rank_badge_url=rank_badge_url,
        portrait_url=image_source(portrait, Locator.PORTRAIT),
        last_updated=datetime.datetime.now(datetime.UTC),
    )
