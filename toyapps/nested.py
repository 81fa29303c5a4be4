"""Hover tracking and item labelling for a nested list."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional


class HoverKind(Enum):
    HEADER = "header"
    ITEM = "item"
    LIST = "list"
    NONE = "none"


@dataclass(frozen=True)
class Hovered:
    """What the pointer is over; an item carries its name."""

    kind: HoverKind = HoverKind.NONE
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is HoverKind.ITEM) != (self.name is not None):
            raise ValueError("an item needs a name and only an item has one")

    def __str__(self) -> str:
        if self.kind is HoverKind.HEADER:
            return "Header"
        if self.kind is HoverKind.ITEM:
            return self.name or ""
        if self.kind is HoverKind.LIST:
            return "List container"
        return "Nothing"


@dataclass(frozen=True)
class ListItem:
    name: str
    hide: bool = False


def label_items(items: Iterable[ListItem]) -> List[ListItem]:
    """The visible items, numbered from 1 in their names."""
    visible = (item for item in items if not item.hide)
    return [
        replace(item, name=f"#{number} - {item.name}")
        for number, item in enumerate(visible, start=1)
    ]