import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SCHOOL_NAME = os.getenv("SCHOOL_NAME", "IEE 6049 Ricardo Palma")
ACADEMIC_YEAR = int(os.getenv("ACADEMIC_YEAR", "2025"))

# Mock roster; leave ROSTER_SEED empty for a different roster on every start.
ROSTER_SEED = int(os.environ["ROSTER_SEED"]) if os.getenv("ROSTER_SEED") else None
STUDENT_COUNT = int(os.getenv("STUDENT_COUNT", "1681"))
STAFF_COUNT = int(os.getenv("STAFF_COUNT", "112"))
PARENT_RATIO = float(os.getenv("PARENT_RATIO", "0.1"))

ENROLLMENT_PAGE_SIZE = int(os.getenv("ENROLLMENT_PAGE_SIZE", "7"))
USERS_PAGE_SIZE = int(os.getenv("USERS_PAGE_SIZE", "10"))

# Simulated network latency of the attendance fetch (seconds)
ATTENDANCE_FETCH_DELAY = float(os.getenv("ATTENDANCE_FETCH_DELAY", "0.5"))
