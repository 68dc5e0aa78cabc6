SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SCHOOL_NAME = "IEE 6049 Ricardo Palma"
ACADEMIC_YEAR = 2025

# Small, reproducible roster keeps the suite fast.
ROSTER_SEED = 6049
STUDENT_COUNT = 60
STAFF_COUNT = 12
PARENT_RATIO = 0.1

ENROLLMENT_PAGE_SIZE = 7
USERS_PAGE_SIZE = 10

ATTENDANCE_FETCH_DELAY = 0.0
