"""A list of people that can be grown, shrunk, shuffled and sorted."""

from __future__ import annotations

import random
from typing import List, Optional

from .people import Person, choose_two_distinct_indices

MAX_LISTED_IDS = 20


class PersonList:
    """The people shown in a keyed list, with the actions that change them."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.persons: List[Person] = []
        self.last_id = 0
        self.keyed = True
        self.build_component_ratio = 0.5

    def __len__(self) -> int:
        return len(self.persons)

    def _next(self) -> Person:
        self.last_id += 1
        return Person.new_random(self.last_id, self.build_component_ratio, self._rng)

    def create(self, count: int) -> None:
        """Append ``count`` new people."""
        for _ in range(count):
            self.persons.append(self._next())

    def prepend(self, count: int) -> None:
        """Insert ``count`` new people at the front, one at a time."""
        for _ in range(count):
            self.persons.insert(0, self._next())

    def change_ratio(self, ratio: float) -> bool:
        """Set the share of inline people; returns whether it changed."""
        if self.build_component_ratio == ratio:
            return False
        self.build_component_ratio = ratio
        return True

    def delete_by_id(self, person_id: int) -> bool:
        """Remove the first person with this id; returns whether one was found."""
        for index, person in enumerate(self.persons):
            if person.info.id == person_id:
                del self.persons[index]
                return True
        return False

    def delete_everybody(self) -> None:
        self.persons.clear()

    def swap_random(self) -> None:
        """Swap two randomly chosen people; needs at least two."""
        pair = choose_two_distinct_indices(self.persons, self._rng)
        if pair is None:
            raise ValueError("need at least two persons to swap")
        a, b = pair
        self.persons[a], self.persons[b] = self.persons[b], self.persons[a]

    def reverse(self) -> None:
        self.persons.reverse()

    def sort_by_id(self) -> None:
        self.persons.sort(key=lambda p: p.info.id)

    def sort_by_name(self) -> None:
        self.persons.sort(key=lambda p: p.info.name)

    def sort_by_age(self) -> None:
        self.persons.sort(key=lambda p: p.info.age)

    def sort_by_address(self) -> None:
        self.persons.sort(key=lambda p: p.info.address)

    def toggle_keyed(self) -> None:
        self.keyed = not self.keyed

    def ids_summary(self) -> str:
        """Space-separated ids, or a marker once the list gets long."""
        if len(self.persons) < MAX_LISTED_IDS:
            return " ".join(str(p.info.id) for p in self.persons)
        return "<too many>"