import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_DIR = os.getenv("STORAGE_DIR", "data")

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

DEBUG = True

# If enabled with the mysql backend, the kv_store table is created on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
