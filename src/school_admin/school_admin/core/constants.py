"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Durable storage keys (kept identical to the browser build so snapshots stay portable).
STUDENTS_KEY = "cc_students"
TEACHERS_KEY = "cc_teachers"
EVENTS_KEY = "cc_events"
NOTIFICATION_LOGS_KEY = "cc_notif_logs"
TEMPLATES_KEY = "cc_templates"
REPORT_SETTINGS_KEY = "cc_report_settings"
SCHOOL_LOGO_KEY = "cc_school_logo"

STORAGE_KEYS = (
    STUDENTS_KEY,
    TEACHERS_KEY,
    EVENTS_KEY,
    NOTIFICATION_LOGS_KEY,
    TEMPLATES_KEY,
    REPORT_SETTINGS_KEY,
    SCHOOL_LOGO_KEY,
)

DEFAULT_MAX_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100
TERMS = (1, 2, 3)
LOW_GRADE_THRESHOLD = 60

DEFAULT_SYNC_WINDOW_SECONDS = 0.8
DEFAULT_MAIL_FAILURE_RATE = 0.03
DEFAULT_MAIL_LATENCY_SECONDS = 0.8
DEFAULT_DRAFT_TIMEOUT_SECONDS = 30.0
DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"

DEFAULT_SCHOOL_NAME = "Cedar Crest International School"
DEFAULT_SCHOOL_CODE = "CCIS"

SUBJECTS = (
    "Mathematics",
    "Science",
    "English",
    "History",
    "Geography",
    "Art",
    "COMPUTING",
    "LANGUAGE & LITERACY",
    "CREATIVE ARTS",
    "GHANAIAN LANG.",
    "WRITING",
    "RME",
    "CAREER TECHNOLOGY",
)
