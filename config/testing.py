import os

SECRET_KEY = "test-secret"

APPS_SCRIPT_URL = os.getenv("APPS_SCRIPT_URL", "https://script.example.invalid/exec")
REQUEST_TIMEOUT = 5.0

PERCENT_DECIMALS = 2

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LOAD_ROSTER_ON_STARTUP = False
