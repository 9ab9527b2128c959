from typing import Optional

from overwatch_tracker.player.document import ProfileDocument
from overwatch_tracker.player.fetcher import FetchResult

BORDER_STYLE = ("background-image:url(https://blzgdapipro-a.akamaihd.net/game/playerlevelrewards/"
                "{}_Border.png)")
BRONZE_BORDER = "0x0250000000000918"
SILVER_BORDER = "0x0250000000000954"  # prestige 6, +600
PORTRAIT = "https://blzgdapipro-a.akamaihd.net/game/unlocks/0x0250000000000EF7.png"
BADGE = "https://blzgdapipro-a.akamaihd.net/game/rank-icons/season-2/rank-5.png"

NOT_FOUND_PAGE = "<html><body><h1 class='u-align-center'>Profile Not Found</h1></body></html>"

STATS_SECTION = """
<div id="{mode}" data-js="career-category" data-mode="{mode}">
  <section class="content-box career-stats-section">
    <select data-js="career-select" data-group-id="stats">
      <option value="0x02E00000FFFFFFFF">ALL HEROES</option>
      <option value="0x02E0000000000002">Reaper</option>
    </select>
    <div class="js-stats" data-group-id="stats" data-category-id="0x02E00000FFFFFFFF">
      <table class="data-table">
        <thead><tr><th colspan="2"><span class="stat-title">Combat</span></th></tr></thead>
        <tbody>
          <tr><td>Eliminations</td><td>1,234</td></tr>
          <tr><td>Weapon Accuracy</td><td>45%</td></tr>
          <tr><td>Critical Hits</td><td>--</td></tr>
        </tbody>
      </table>
      <table class="data-table">
        <thead><tr><th colspan="2"><span class="stat-title">Game</span></th></tr></thead>
        <tbody>
          <tr><td>Time Played</td><td>12 hours</td></tr>
          <tr><td>Games Won</td><td>81</td></tr>
        </tbody>
      </table>
    </div>
    <div class="js-stats" data-group-id="stats" data-category-id="0x02E0000000000002">
      <table class="data-table">
        <thead><tr><th colspan="2"><span class="stat-title">Hero Specific</span></th></tr></thead>
        <tbody>
          <tr><td>Souls Consumed</td><td>312</td></tr>
          <tr><td>Longest Life</td><td>03:25</td></tr>
        </tbody>
      </table>
    </div>
  </section>
</div>
"""

ACHIEVEMENTS_SECTION = """
<section id="achievements-section">
  <select data-group-id="achievements">
    <option value="0x0860000000000020">General</option>
    <option value="0x0860000000000021">Offense</option>
  </select>
  <div data-group-id="achievements" data-category-id="0x0860000000000020">
    <div class="achievement-card"><div class="media-card-title">Level 10</div></div>
    <div class="achievement-card m-disabled"><div class="media-card-title">Decorated</div></div>
  </div>
  <div data-group-id="achievements" data-category-id="0x0860000000000021">
    <div class="achievement-card"><div class="media-card-title">Die Die Die... Die!</div></div>
  </div>
</section>
"""


def profile_page(
        level: str = "25",
        border: Optional[str] = BRONZE_BORDER,
        rank: Optional[str] = "2750",
        badge: Optional[str] = BADGE,
        portrait: Optional[str] = PORTRAIT,
        casual: bool = True,
        competitive: bool = True,
        achievements: bool = True,
        level_widget: bool = True,
) -> str:
    parts = ["<html><body><div class='masthead'>"]
    if portrait is not None:
        parts.append(f'<img class="player-portrait" src="{portrait}">')
    if level_widget:
        style = f' style="{BORDER_STYLE.format(border)}"' if border is not None else ""
        parts.append(f'<div class="player-level"{style}><div class="u-vertical-center">{level}</div></div>')
    if rank is not None:
        img = f'<img src="{badge}">' if badge is not None else ""
        parts.append(f'<div class="competitive-rank">{img}<div class="u-align-center h6">{rank}</div></div>')
    parts.append("</div>")
    if casual:
        parts.append(STATS_SECTION.format(mode="quickplay"))
    if competitive:
        parts.append(STATS_SECTION.format(mode="competitive"))
    if achievements:
        parts.append(ACHIEVEMENTS_SECTION)
    parts.append("</body></html>")
    return "".join(parts)


class FakeFetcher:
    """
    In-memory fetcher. `pages` maps url -> (status, html) or an exception to raise;
    anything else answers 404.
    """

    def __init__(self, pages: Optional[dict] = None):
        self.pages = pages or {}
        self.requested: list[str] = []
        self.documents: list[ProfileDocument] = []

    async def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        page = self.pages.get(url, (404, NOT_FOUND_PAGE))
        if isinstance(page, Exception):
            raise page
        status, html = page
        document = ProfileDocument(html, url)
        self.documents.append(document)
        return FetchResult(url=url, status=status, document=document)
