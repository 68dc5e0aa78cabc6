from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from ..events.model import CalendarEvent
from ..people.model import ParentTutor, Person, Staff, Student
from .state import RosterState


class RosterRepository(Protocol):
    """Read + dispatch interface the services depend on.

    Services never touch a concrete store, so tests can hand them any object
    with these methods.
    """

    @property
    def state(self) -> RosterState:
        raise NotImplementedError

    def students(self) -> Sequence[Student]:
        raise NotImplementedError

    def staff(self) -> Sequence[Staff]:
        raise NotImplementedError

    def parents(self) -> Sequence[ParentTutor]:
        raise NotImplementedError

    def all_people(self) -> Sequence[Person]:
        raise NotImplementedError

    def events(self) -> Sequence[CalendarEvent]:
        raise NotImplementedError

    def find_student(self, document_number: str) -> Optional[Student]:
        raise NotImplementedError

    def dispatch(self, mutation: Callable[..., RosterState], *args, **kwargs) -> RosterState:
        raise NotImplementedError
