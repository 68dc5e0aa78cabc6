from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..common.logger import get_logger
from ..events.model import CalendarEvent
from ..events.seed import initial_events
from ..people.model import ParentTutor, Person, Staff, Student
from ..people.seed import generate_parents, generate_staff, generate_students, make_rng
from . import state as roster_state
from .repository import RosterRepository
from .state import RosterState

logger = get_logger(__name__)


class RosterStore(RosterRepository):
    """Explicitly constructed holder of the current ``RosterState``.

    One instance is built by the container and injected wherever it is needed;
    mutations go through ``dispatch`` with one of the pure functions from
    ``roster.state``.
    """

    def __init__(self, initial: Optional[RosterState] = None):
        self._state = initial or RosterState()

    @classmethod
    def seeded(
        cls,
        *,
        seed: Optional[int] = None,
        student_count: int,
        staff_count: int,
        parent_ratio: float = 0.1,
    ) -> "RosterStore":
        rng = make_rng(seed)
        students = generate_students(student_count, rng)
        staff = generate_staff(staff_count, rng)
        parents = generate_parents(students, rng, ratio=parent_ratio)
        state = roster_state.build_state(students=students, staff=staff, parents=parents, events=initial_events())
        logger.info(
            "roster generated: students=%d staff=%d parents=%d events=%d",
            len(state.students), len(state.staff), len(state.parents), len(state.events),
        )
        return cls(state)

    @property
    def state(self) -> RosterState:
        return self._state

    def students(self) -> Sequence[Student]:
        return self._state.students

    def staff(self) -> Sequence[Staff]:
        return self._state.staff

    def parents(self) -> Sequence[ParentTutor]:
        return self._state.parents

    def all_people(self) -> Sequence[Person]:
        return self._state.all_people

    def events(self) -> Sequence[CalendarEvent]:
        return self._state.events

    def find_student(self, document_number: str) -> Optional[Student]:
        return roster_state.find_student(self._state, document_number)

    def dispatch(self, mutation: Callable[..., RosterState], *args, **kwargs) -> RosterState:
        self._state = mutation(self._state, *args, **kwargs)
        logger.info("roster mutation applied: %s", mutation.__name__)
        return self._state
