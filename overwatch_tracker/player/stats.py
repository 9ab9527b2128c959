import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from overwatch_tracker.player.document import ProfileDocument
from overwatch_tracker.player.structures import Mode

_DURATION_RE = re.compile(r"^(?:(\d+):)?(\d+):(\d{2})$")
_UNIT_RE = re.compile(r"^([\d.]+)\s*(hour|minute|second)s?$", re.I)
_UNIT_SECONDS = {"hour": 3600, "minute": 60, "second": 1}


def parse_stat_value(text: str) -> Optional[float]:
    """
    Turn a displayed stat into a number. Durations become seconds, percentages drop
    the sign. Returns None for anything else ("--", empty cells).
    """
    text = text.strip().replace(",", "")
    if not text:
        return None
    duration = _DURATION_RE.match(text)
    if duration:
        hours, minutes, seconds = duration.groups()
        return float(int(hours or 0) * 3600 + int(minutes) * 60 + int(seconds))
    unit = _UNIT_RE.match(text)
    if unit:
        try:
            return float(unit.group(1)) * _UNIT_SECONDS[unit.group(2).lower()]
        except ValueError:
            return None
    try:
        return float(text.rstrip("%"))
    except ValueError:
        return None


@dataclass
class HeroStats:
    name: str
    category_id: str
    # stat category (e.g. "Combat") -> stat name -> value
    categories: dict[str, dict[str, float]] = field(default_factory=dict)

    def get(self, stat: str, category: Optional[str] = None) -> Optional[float]:
        for name, stats in self.categories.items():
            if category is not None and name != category:
                continue
            if stat in stats:
                return stats[stat]
        return None


@dataclass
class PlayerStats:
    """Per hero stat tables of one game mode (quick play or competitive)."""
    mode: Mode
    heroes: dict[str, HeroStats] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.heroes)

    def __iter__(self) -> Iterator[HeroStats]:
        return iter(self.heroes.values())

    def __contains__(self, hero: str) -> bool:
        return hero in self.heroes

    def __getitem__(self, hero: str) -> HeroStats:
        return self.heroes[hero]

    @classmethod
    def from_document(cls, document: ProfileDocument, mode: Mode) -> "PlayerStats":
        stats = cls(mode)
        section = document.find_optional(f"div#{mode.value}")
        if section is None:
            return stats

        hero_names = {
            option.get("value"): option.get_text(strip=True)
            for option in document.find_all('select[data-group-id="stats"] option', section)
        }
        for block in document.find_all('div[data-group-id="stats"][data-category-id]', section):
            category_id = block["data-category-id"]
            hero = HeroStats(name=hero_names.get(category_id, category_id), category_id=category_id)
            for table in document.find_all("table.data-table", block):
                title = document.find_optional(".stat-title", table)
                category = title.get_text(strip=True) if title is not None else ""
                values = hero.categories.setdefault(category, {})
                for row in document.find_all("tbody tr", table):
                    cells = row.find_all("td")
                    if len(cells) < 2:
                        continue
                    value = parse_stat_value(cells[1].get_text())
                    if value is not None:
                        values[cells[0].get_text(strip=True)] = value
                if not values:
                    del hero.categories[category]
            if hero.categories:
                stats.heroes[hero.name] = hero
        return stats
