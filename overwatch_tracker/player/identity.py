import re
import urllib.parse
from dataclasses import dataclass

from overwatch_tracker.player.errors import InvalidIdentityError
from overwatch_tracker.player.structures import Platform

BATTLETAG_SEPARATOR = "#"
URL_SEPARATOR = "-"
BATTLETAG_RE = re.compile(r"^(?P<name>[^\W\d_]\w{2,11})#(?P<discriminator>\d{4,5})$")


def is_battletag(username: str) -> bool:
    return BATTLETAG_RE.match(username) is not None


@dataclass(frozen=True)
class PlayerIdentity:
    """
    A username as typed by the user, either a battletag (pc) or a console handle.
    """
    username: str
    is_tag: bool
    url_handle: str


def classify(username: str, platform: Platform = Platform.NONE) -> tuple[PlayerIdentity, Platform]:
    """
    Classify `username` and return it with the platform it implies.

    A battletag always means pc, whatever platform was requested. Asking for pc with
    something that is not a battletag raises InvalidIdentityError.
    """
    if is_battletag(username):
        handle = username.replace(BATTLETAG_SEPARATOR, URL_SEPARATOR)
        return PlayerIdentity(username, True, handle), Platform.PC
    if platform == Platform.PC:
        raise InvalidIdentityError(username)
    return PlayerIdentity(username, False, urllib.parse.quote(username, safe="")), platform
