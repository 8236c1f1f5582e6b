import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "file" keeps one JSON file per roster under DATA_DIR, "memory" keeps nothing
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")

# Used in the backup file name: <APP_SLUG>-backup-YYYY-MM-DD.json
APP_SLUG = os.getenv("APP_SLUG", "rana-hazir-hai")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
