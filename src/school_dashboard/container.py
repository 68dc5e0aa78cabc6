from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.fetcher import AttendanceFetcher
from .core import constants
from .enrollment.service import EnrollmentService
from .events.service import CalendarService
from .roster.store import RosterStore
from .search.factory import TagPredicateFactory
from .search.parser import QueryTagParser
from .users.service import UserDirectoryService


@dataclass(frozen=True)
class Container:
    roster: RosterStore

    enrollment_service: EnrollmentService
    user_directory_service: UserDirectoryService
    calendar_service: CalendarService
    attendance_fetcher: AttendanceFetcher


def build_container(settings, *, roster: Optional[RosterStore] = None) -> Container:
    """Wire services from a settings module (see ``school_dashboard.config``).

    ``roster`` lets tests inject a hand-built store instead of the generated one.
    """
    year = int(getattr(settings, "ACADEMIC_YEAR", constants.ACADEMIC_YEAR))
    school_name = str(getattr(settings, "SCHOOL_NAME", constants.SCHOOL_NAME))
    seed = getattr(settings, "ROSTER_SEED", None)

    roster = roster or RosterStore.seeded(
        seed=seed,
        student_count=int(getattr(settings, "STUDENT_COUNT", constants.TOTAL_STUDENTS)),
        staff_count=int(getattr(settings, "STAFF_COUNT", constants.TOTAL_STAFF)),
        parent_ratio=float(getattr(settings, "PARENT_RATIO", 0.1)),
    )

    parser = QueryTagParser()
    predicate_factory = TagPredicateFactory()

    enrollment_service = EnrollmentService(
        roster,
        parser=parser,
        predicate_factory=predicate_factory,
        page_size=int(getattr(settings, "ENROLLMENT_PAGE_SIZE", constants.ENROLLMENT_PAGE_SIZE)),
        year=year,
        school_name=school_name,
    )
    user_directory_service = UserDirectoryService(
        roster,
        parser=parser,
        predicate_factory=predicate_factory,
        page_size=int(getattr(settings, "USERS_PAGE_SIZE", constants.USERS_PAGE_SIZE)),
        year=year,
        school_name=school_name,
    )
    calendar_service = CalendarService(roster)
    attendance_fetcher = AttendanceFetcher(
        delay_seconds=float(getattr(settings, "ATTENDANCE_FETCH_DELAY", constants.ATTENDANCE_FETCH_DELAY_SECONDS)),
        total_students=len(roster.students()),
        total_staff=len(roster.staff()),
    )

    return Container(
        roster=roster,
        enrollment_service=enrollment_service,
        user_directory_service=user_directory_service,
        calendar_service=calendar_service,
        attendance_fetcher=attendance_fetcher,
    )
