import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

APPS_SCRIPT_URL = os.getenv("APPS_SCRIPT_URL", "")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))

PERCENT_DECIMALS = int(os.getenv("PERCENT_DECIMALS", "2"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOAD_ROSTER_ON_STARTUP = bool(int(os.getenv("LOAD_ROSTER_ON_STARTUP", "1")))
