"""Randomly generated people for a keyed list, and the random helpers behind them."""

from __future__ import annotations

import html
import random
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple

_FIRST_NAMES = (
    "Alice", "Bruno", "Carla", "Dmitri", "Elena", "Felix", "Greta", "Hugo",
    "Iris", "Jonas", "Kira", "Leon", "Mara", "Nils", "Olga", "Paul",
    "Quinn", "Rosa", "Stefan", "Tara", "Ulla", "Victor", "Wanda", "Yusuf",
)
_LAST_NAMES = (
    "Abbott", "Becker", "Castillo", "Dunn", "Ellison", "Fischer", "Garner",
    "Holt", "Ingram", "Jansen", "Keller", "Lindqvist", "Moreau", "Novak",
    "Osborne", "Park", "Reyes", "Sommer", "Thorne", "Varga", "Weber",
)
_CITY_NAMES = (
    "Ashford", "Brookvale", "Cedar Falls", "Dunmore", "Eastwick", "Fairhaven",
    "Glenrock", "Harborview", "Ironwood", "Juniper Bay", "Kingsley", "Lakemont",
)
_STREET_NAMES = (
    "Maple", "Oak", "Pine", "Birch", "Willow", "Elm", "Chestnut", "Spruce",
    "Hawthorn", "Aspen", "Linden", "Poplar",
)
_STATE_ABBRS = (
    "AL", "AK", "AZ", "CA", "CO", "FL", "GA", "IL", "MA", "MN",
    "NY", "OH", "OR", "PA", "TX", "UT", "VA", "WA", "WI", "WY",
)


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def chance(p: float, rng: Optional[random.Random] = None) -> bool:
    """True with probability ``p``, which must lie in ``[0, 1]``."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability {p!r} is not in [0, 1]")
    return _rng(rng).random() < p


def range_exclusive(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """A random integer in the half-open range ``[low, high)``."""
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return _rng(rng).randrange(low, high)


def choose_two_distinct_indices(
    items: Sequence[object], rng: Optional[random.Random] = None
) -> Optional[Tuple[int, int]]:
    """Two distinct indices ``(a, b)`` with ``a < b``, or ``None`` for fewer than two items."""
    n = len(items)
    if n < 2:
        return None
    if n == 2:
        return (0, 1)
    rng = _rng(rng)
    first = range_exclusive(0, n, rng)
    while True:
        second = range_exclusive(0, n, rng)
        if second != first:
            break
    return (second, first) if first > second else (first, second)


@dataclass(frozen=True)
class PersonInfo:
    id: int
    name: str
    address: str
    age: int

    @classmethod
    def new_random(cls, person_id: int, rng: Optional[random.Random] = None) -> PersonInfo:
        """A person with a made-up name, address and age."""
        rng = _rng(rng)
        number = range_exclusive(1, 300, rng)
        state = rng.choice(_STATE_ABBRS)
        city = rng.choice(_CITY_NAMES)
        street = rng.choice(_STREET_NAMES)
        address = f"{number} {street} St., {city}, {state}"
        name = f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"
        age = range_exclusive(7, 77, rng)
        return cls(id=person_id, name=name, address=address, age=age)

    def render(self) -> str:
        """HTML card describing this person."""
        title = html.escape(f"{self.id} - {self.name}")
        age = html.escape(f"Age: {self.age}")
        address = html.escape(f"Address: {self.address}")
        return (
            '<div class="card w-50 card_style">'
            '<div class="card-body">'
            f'<h5 class="card-title">{title}</h5>'
            f'<p class="card-text">{age}</p>'
            f'<p class="card-text">{address}</p>'
            "</div></div>"
        )


class PersonKind(Enum):
    """How a person is rendered: as plain markup or through a component."""

    INLINE = "inline"
    COMPONENT = "component"


class Rendered(NamedTuple):
    """Markup of a list entry and the key used to match it between renders."""

    key: Optional[str]
    html: str


@dataclass(frozen=True)
class Person:
    kind: PersonKind
    info: PersonInfo

    @classmethod
    def new_random(
        cls, person_id: int, ratio: float, rng: Optional[random.Random] = None
    ) -> Person:
        """A random person, inline with probability ``ratio``."""
        rng = _rng(rng)
        info = PersonInfo.new_random(person_id, rng)
        kind = PersonKind.INLINE if chance(ratio, rng) else PersonKind.COMPONENT
        return cls(kind=kind, info=info)

    def render(self, keyed: bool) -> Rendered:
        css = "text-danger" if self.kind is PersonKind.INLINE else "text-info"
        ident = html.escape(str(self.info.id), quote=True)
        markup = f'<div class="{css}" id="{ident}">{self.info.render()}</div>'
        return Rendered(key=str(self.info.id) if keyed else None, html=markup)