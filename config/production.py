import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_DIR = os.getenv("STORAGE_DIR", "/var/lib/school-admin")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_admin"),
}

MAIL_FAILURE_RATE = float(os.getenv("MAIL_FAILURE_RATE", "0.03"))
MAIL_LATENCY_SECONDS = float(os.getenv("MAIL_LATENCY_SECONDS", "0.8"))
SYNC_WINDOW_SECONDS = float(os.getenv("SYNC_WINDOW_SECONDS", "0.8"))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", ""))
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
DRAFT_TIMEOUT_SECONDS = float(os.getenv("DRAFT_TIMEOUT_SECONDS", "30"))

SCHOOL_NAME = os.getenv("SCHOOL_NAME", "Cedar Crest International School")
SCHOOL_CODE = os.getenv("SCHOOL_CODE", "CCIS")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
