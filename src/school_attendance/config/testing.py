import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_DIR = os.getenv("DATA_DIR", "data-test")

APP_SLUG = "rana-hazir-hai"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
