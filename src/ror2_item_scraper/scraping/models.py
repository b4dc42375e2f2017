# src/ror2_item_scraper/scraping/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


# ids continue after the 126 items already present in items.js
ID_OFFSET = 126


class ItemCategory(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    LEGENDARY = "legendary"
    BOSS = "boss"
    LUNAR = "lunar"
    VOID = "void"
    LUNAR_EQUIPMENT = "lunar_equipment"
    EQUIPMENT = "equipment"
    ELITE = "elite"


# Table N on the Items page holds category N.
ITEM_CATEGORIES: Tuple[ItemCategory, ...] = tuple(ItemCategory)


class InclusionPolicy(Enum):
    ALL = "all"
    EXPANSION_ONLY = "expansion_only"

    @classmethod
    def from_flag(cls, expansion_only: bool) -> "InclusionPolicy":
        return cls.EXPANSION_ONLY if expansion_only else cls.ALL


@dataclass
class CategoryTag:
    href: str
    text_content: str
    category: str

    @classmethod
    def from_text(cls, href: str, text_content: str) -> "CategoryTag":
        return cls(
            href=href,
            text_content=text_content,
            category=text_content.upper().replace(" ", "_"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "href": self.href,
            "textContent": self.text_content,
            "category": self.category,
        }


@dataclass
class Item:
    name: str
    image: str
    short_description: str
    description: str
    item_rarity: ItemCategory
    id: int
    categories: List[CategoryTag] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready record, keys in the order items.js expects.
        """
        return {
            "name": self.name,
            "image": self.image,
            "shortDescription": self.short_description,
            "description": self.description,
            "itemRarity": self.item_rarity.value,
            "id": self.id,
            "categories": [c.to_dict() for c in self.categories],
        }
