SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_DIR = "data-test"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "school_admin_test",
}

MAIL_FAILURE_RATE = 0.0
MAIL_LATENCY_SECONDS = 0.0
SYNC_WINDOW_SECONDS = 0.8

# No key: drafting always returns the fallback text
GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-3-flash-preview"
DRAFT_TIMEOUT_SECONDS = 1.0

SCHOOL_NAME = "Cedar Crest International School"
SCHOOL_CODE = "CCIS"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
