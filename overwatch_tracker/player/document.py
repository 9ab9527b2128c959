from typing import Optional

from bs4 import BeautifulSoup, Tag

from overwatch_tracker.player.errors import StructuralParseError


class Locator:
    """CSS selectors a profile page has to expose."""
    LEVEL_CONTAINER = "div.player-level"
    LEVEL_TEXT = "div.player-level div"
    COMPETITIVE_RANK_TEXT = "div.competitive-rank div"
    RANK_BADGE = "div.competitive-rank img"
    PORTRAIT = "img.player-portrait"
    ACHIEVEMENTS_SECTION = "#achievements-section"


class ProfileDocument:
    """
    Parsed profile page. The owner must call release() once it is done with it;
    releasing twice is a no-op.
    """

    def __init__(self, markup: str | bytes, url: str | None = None):
        self.url = url
        self._soup: BeautifulSoup | None = BeautifulSoup(markup, "html.parser")

    @property
    def released(self) -> bool:
        return self._soup is None

    @property
    def soup(self) -> BeautifulSoup:
        if self._soup is None:
            raise RuntimeError("ProfileDocument has already been released")
        return self._soup

    def find_optional(self, locator: str, root: Tag | None = None) -> Optional[Tag]:
        return (self.soup if root is None else root).select_one(locator)

    def find_required(self, locator: str, root: Tag | None = None) -> Tag:
        node = self.find_optional(locator, root)
        if node is None:
            raise StructuralParseError(locator)
        return node

    def find_all(self, locator: str, root: Tag | None = None) -> list[Tag]:
        return (self.soup if root is None else root).select(locator)

    def release(self) -> None:
        if self._soup is not None:
            self._soup.decompose()
            self._soup = None
