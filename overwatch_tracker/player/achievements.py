from dataclasses import dataclass, field

from overwatch_tracker.player.document import Locator, ProfileDocument
from overwatch_tracker.player.structures import Achievement

DISABLED_CLASS = "m-disabled"


@dataclass
class PlayerAchievements:
    # category name -> achievements in page order
    categories: dict[str, list[Achievement]] = field(default_factory=dict)

    def __len__(self) -> int:
        return sum(len(items) for items in self.categories.values())

    @property
    def earned(self) -> list[Achievement]:
        return [a for items in self.categories.values() for a in items if a["earned"]]

    @classmethod
    def from_document(cls, document: ProfileDocument) -> "PlayerAchievements":
        achievements = cls()
        section = document.find_optional(Locator.ACHIEVEMENTS_SECTION)
        if section is None:
            return achievements

        names = {
            option.get("value"): option.get_text(strip=True)
            for option in document.find_all('select[data-group-id="achievements"] option', section)
        }
        for block in document.find_all('div[data-group-id="achievements"][data-category-id]', section):
            category = names.get(block["data-category-id"], block["data-category-id"])
            items = achievements.categories.setdefault(category, [])
            for card in document.find_all("div.achievement-card", block):
                title = document.find_optional(".media-card-title", card)
                if title is None:
                    continue
                items.append(Achievement(
                    name=title.get_text(strip=True),
                    category=category,
                    earned=DISABLED_CLASS not in (card.get("class") or []),
                ))
        return achievements
