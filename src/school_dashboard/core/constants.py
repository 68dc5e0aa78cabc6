"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SCHOOL_NAME = "IEE 6049 Ricardo Palma"
ACADEMIC_YEAR = 2025

TOTAL_STUDENTS = 1681
TOTAL_STAFF = 112

ENROLLMENT_PAGE_SIZE = 7
USERS_PAGE_SIZE = 10

ATTENDANCE_FETCH_DELAY_SECONDS = 0.5

MAX_EVENTS_PER_DAY_CELL = 3

GRADES_AND_SECTIONS: dict[str, dict[str, tuple[str, ...]]] = {
    "inicial": {
        "3 AÑOS": ("Margaritas", "Crisantemos"),
        "4 AÑOS": ("Jasminez", "Rosas", "Lirios", "Geranios"),
        "5 AÑOS": ("Orquideas", "Tulipanes", "Girasoles", "Claveles"),
    },
    "primaria": {
        "1° Grado": ("A", "B", "C"),
        "2° Grado": ("A", "B", "C"),
        "3° Grado": ("A", "B", "C"),
        "4° Grado": ("A", "B", "C", "D"),
        "5° Grado": ("A", "B", "C"),
        "6° Grado": ("A", "B", "C"),
    },
    "secundaria": {
        "1° Año": ("A", "B", "C", "D", "E", "F", "G", "H"),
        "2° Año": ("A", "B", "C", "D", "E", "F", "G"),
        "3° Año": ("A", "B", "C", "D", "E", "F", "G"),
        "4° Año": ("A", "B", "C", "D", "E", "F"),
        "5° Año": ("A", "B", "C", "D", "E", "F"),
    },
}
