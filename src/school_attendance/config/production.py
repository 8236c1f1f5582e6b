import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "/var/lib/school-attendance")

APP_SLUG = os.getenv("APP_SLUG", "rana-hazir-hai")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
