from __future__ import annotations

from abc import ABC, abstractmethod

from ...people.model import Person


class TagPredicate(ABC):
    """Strategy Pattern: encapsulate how one search tag tests a record."""

    def __init__(self, value: str):
        self._needle = value.strip().lower()

    @abstractmethod
    def matches(self, person: Person) -> bool:
        raise NotImplementedError

    def __call__(self, person: Person) -> bool:
        return self.matches(person)
